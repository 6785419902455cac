"""
Upload local files and attach them to an album in one logical operation.

The batch is all-or-nothing from the caller's point of view: local files are
only deleted once every item of the batch-create call succeeded. When some
item fails, BatchCreateError carries every per-item result so callers can
inspect what the server did create.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from gphotos.errors import BatchCreateError
from gphotos.models import Album, MediaItem, NewMediaItem
from gphotos.query import page_size, page_token
from gphotos.resources.albums import AlbumsClient, CreateAlbumRequest
from gphotos.resources.media_items import BatchCreateMediaItemsRequest, MediaItemsClient
from gphotos.resources.uploads import UploadsClient

logger = logging.getLogger(__name__)


class Uploader:
    """
    Sequences raw upload -> batch create -> local delete.

    Args:
        albums: Client used to look up and create albums
        media_items: Client used for the batch-create call
        uploads: Client used for raw byte uploads
        album_page_size: Page size used while searching albums by title
        delete_after_upload: Remove local files once the whole batch succeeded
        resumable_chunk_size: Upload through resumable sessions in chunks of
            this many bytes instead of one raw request per file
    """

    def __init__(
        self,
        albums: AlbumsClient,
        media_items: MediaItemsClient,
        uploads: UploadsClient,
        album_page_size: int = 50,
        delete_after_upload: bool = True,
        resumable_chunk_size: int | None = None,
    ):
        self.albums = albums
        self.media_items = media_items
        self.uploads = uploads
        self.album_page_size = album_page_size
        self.delete_after_upload = delete_after_upload
        self.resumable_chunk_size = resumable_chunk_size

    def upload(self, file_paths: Sequence[str | Path]) -> list[MediaItem]:
        """Upload files to the library without adding them to an album."""
        return self._create(file_paths, album_id=None)

    def upload_with_album(self, file_paths: Sequence[str | Path], album: Album) -> list[MediaItem]:
        """Upload files straight into an existing album."""
        return self._create(file_paths, album_id=album.id)

    def upload_with_album_name(
        self, file_paths: Sequence[str | Path], album_name: str
    ) -> tuple[Album, list[MediaItem]]:
        """
        Upload files into the album titled ``album_name``, creating it if needed.

        Returns:
            Tuple of (album, created media items)

        Raises:
            BatchCreateError: If any item of the batch was not created
        """
        album = self.find_or_create_album(album_name)
        return album, self.upload_with_album(file_paths, album)

    def find_album(self, title: str) -> Album | None:
        """Return the first album whose title equals ``title`` exactly."""
        token = None
        while True:
            queries = [page_size(self.album_page_size)]
            if token:
                queries.append(page_token(token))
            response = self.albums.list(*queries)
            for album in response.albums:
                if album.title == title:
                    return album
            token = response.next_page_token
            if not token:
                return None

    def find_or_create_album(self, title: str) -> Album:
        album = self.find_album(title)
        if album is not None:
            logger.debug(f"Found album '{title}' -> {album.id}")
            return album
        album = self.albums.create(CreateAlbumRequest(album=Album(title=title)))
        logger.info(f"Created album '{title}' -> {album.id}")
        return album

    def _upload_file(self, path: str) -> str:
        filename = os.path.basename(path)
        if self.resumable_chunk_size:
            return self.uploads.resumable_upload(path, filename, chunk_size=self.resumable_chunk_size)
        return self.uploads.upload_media(path, filename)

    def _create(self, file_paths: Sequence[str | Path], album_id: str | None) -> list[MediaItem]:
        paths = [str(p) for p in file_paths]
        if not paths:
            return []

        drafts = []
        for path in paths:
            token = self._upload_file(path)
            drafts.append(NewMediaItem.from_token(token, description=path))

        request = BatchCreateMediaItemsRequest(album_id=album_id, new_media_items=drafts)
        results = self.media_items.batch_create(request).new_media_item_results

        if len(results) != len(paths) or not all(result.ok for result in results):
            logger.warning(f"Batch create failed for {len(paths)} file(s); keeping local files")
            raise BatchCreateError(results, expected=len(paths))

        items = [result.media_item or MediaItem() for result in results]
        logger.info(f"Uploaded {len(items)} media item(s)" + (f" to album {album_id}" if album_id else ""))
        if self.delete_after_upload:
            self._remove_local_files(paths, items)
        return items

    def _remove_local_files(self, paths: list[str], items: list[MediaItem]) -> None:
        """Delete uploaded files; a file that cannot be removed is logged and skipped."""
        for path, item in zip(paths, items):
            target = item.description or path
            try:
                os.remove(target)
            except OSError as e:
                logger.warning(f"Failed to delete {target}: {e}")
