"""
Entry point for running gphotos as a module.

Usage:
    python -m gphotos albums list
    python -m gphotos --config /path/to/config.yaml upload a.jpg b.jpg --album Trip
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import requests

from gphotos.auth import authorized_session, get_creds
from gphotos.client import PhotosLibrary
from gphotos.config import Settings
from gphotos.errors import PhotosError
from gphotos.models import (
    Album,
    Feature,
    FeatureFilter,
    Filters,
    MediaType,
    MediaTypeFilter,
    SharedAlbumOptions,
)
from gphotos.query import exclude_non_app_created_data
from gphotos.resources.albums import CreateAlbumRequest, ShareAlbumRequest
from gphotos.resources.media_items import SearchMediaItemsRequest
from gphotos.resources.shared_albums import JoinSharedAlbumRequest, LeaveSharedAlbumRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gphotos", description="Google Photos Library API client")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    albums = commands.add_parser("albums", help="Manage albums").add_subparsers(
        dest="action", required=True
    )
    albums_list = albums.add_parser("list", help="List all albums")
    albums_list.add_argument("--app-only", action="store_true", help="Only albums created by this app")
    albums.add_parser("get", help="Show one album").add_argument("album_id")
    albums.add_parser("create", help="Create an album").add_argument("title")
    share = albums.add_parser("share", help="Share an album")
    share.add_argument("album_id")
    share.add_argument("--collaborative", action="store_true")
    share.add_argument("--commentable", action="store_true")
    albums.add_parser("unshare", help="Stop sharing an album").add_argument("album_id")

    media = commands.add_parser("media", help="Browse media items").add_subparsers(
        dest="action", required=True
    )
    media_list = media.add_parser("list", help="List the whole library")
    media_list.add_argument("--app-only", action="store_true", help="Only items created by this app")
    media.add_parser("get", help="Show one media item").add_argument("media_item_id")
    search = media.add_parser("search", help="Search media items")
    search.add_argument("--album-id", default=None)
    search.add_argument("--media-type", choices=[t.value for t in MediaType], default=None)
    search.add_argument("--favorites", action="store_true")
    search.add_argument("--include-archived", action="store_true")

    shared = commands.add_parser("shared", help="Shared albums").add_subparsers(
        dest="action", required=True
    )
    shared.add_parser("list", help="List shared albums")
    shared.add_parser("join", help="Join a shared album").add_argument("share_token")
    shared.add_parser("leave", help="Leave a shared album").add_argument("share_token")

    upload = commands.add_parser("upload", help="Upload files, optionally into an album")
    upload.add_argument("files", nargs="+", type=Path)
    upload.add_argument("--album", default=None, help="Album title (created if missing)")
    upload.add_argument("--keep", action="store_true", help="Keep local files after upload")
    upload.add_argument(
        "--resumable", action="store_true", help="Use chunked resumable uploads (for large files)"
    )

    return parser


def load_settings(config: Path | None) -> Settings:
    if config is not None:
        return Settings.from_yaml(config)
    default = Path("config.yaml")
    if default.exists():
        return Settings.from_yaml(default)
    return Settings()


def build_search_request(args: argparse.Namespace) -> SearchMediaItemsRequest:
    if args.album_id:
        return SearchMediaItemsRequest(album_id=args.album_id)

    filters = Filters()
    if args.media_type:
        filters.media_type_filter = MediaTypeFilter(media_types=[MediaType(args.media_type)])
    if args.favorites:
        filters.feature_filter = FeatureFilter(included_features=[Feature.FAVORITES])
    if args.include_archived:
        filters.include_archived_media = True
    return SearchMediaItemsRequest(filters=filters)


def run_command(library: PhotosLibrary, args: argparse.Namespace):
    """Dispatch a parsed command; returns something JSON serializable."""
    if args.command == "albums":
        if args.action == "list":
            queries = [exclude_non_app_created_data()] if args.app_only else []
            return [a.to_api() for a in library.albums.list_all(*queries)]
        if args.action == "get":
            return library.albums.get(args.album_id).to_api()
        if args.action == "create":
            return library.albums.create(CreateAlbumRequest(album=Album(title=args.title))).to_api()
        if args.action == "share":
            options = SharedAlbumOptions(
                is_collaborative=args.collaborative, is_commentable=args.commentable
            )
            request = ShareAlbumRequest(shared_album_options=options)
            return library.albums.share(args.album_id, request).to_api()
        if args.action == "unshare":
            library.albums.unshare(args.album_id)
            return {}

    if args.command == "media":
        if args.action == "list":
            queries = [exclude_non_app_created_data()] if args.app_only else []
            return [m.to_api() for m in library.media_items.list_all(*queries)]
        if args.action == "get":
            return library.media_items.get(args.media_item_id).to_api()
        if args.action == "search":
            return [m.to_api() for m in library.media_items.search_all(build_search_request(args))]

    if args.command == "shared":
        if args.action == "list":
            return [a.to_api() for a in library.shared_albums.list_all()]
        if args.action == "join":
            return library.shared_albums.join(JoinSharedAlbumRequest(share_token=args.share_token)).to_api()
        if args.action == "leave":
            library.shared_albums.leave(LeaveSharedAlbumRequest(share_token=args.share_token))
            return {}

    if args.command == "upload":
        if args.keep:
            library.uploader.delete_after_upload = False
        if args.album:
            album, items = library.uploader.upload_with_album_name(args.files, args.album)
            return {"album": album.to_api(), "mediaItems": [i.to_api() for i in items]}
        return {"mediaItems": [i.to_api() for i in library.uploader.upload(args.files)]}

    raise ValueError(f"Unknown command: {args.command} {getattr(args, 'action', '')}".strip())


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Load and validate configuration
    try:
        settings = load_settings(args.config)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        creds = get_creds(
            str(settings.auth.token_path),
            str(settings.auth.client_secret_path),
            settings.auth.scopes,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    library = PhotosLibrary(
        authorized_session(creds),
        timeout=settings.request_timeout,
        album_page_size=settings.upload.album_page_size,
        delete_after_upload=settings.upload.delete_after_upload,
        resumable_chunk_size=(
            settings.upload.resumable_chunk_size if getattr(args, "resumable", False) else None
        ),
    )

    try:
        result = run_command(library, args)
    except PhotosError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except (requests.RequestException, OSError) as e:
        logger.error(f"{args.command} failed: {type(e).__name__}: {e}")
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
