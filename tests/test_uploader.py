"""Tests for the find-or-create album + upload + attach workflow."""

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest

from gphotos.client import PhotosLibrary
from gphotos.errors import BatchCreateError
from gphotos.models import Album, MediaItem, NewMediaItemResult, Status
from gphotos.query import build_params
from gphotos.resources.albums import AlbumsClient, ListAlbumsResponse
from gphotos.resources.media_items import BatchCreateMediaItemsResponse, MediaItemsClient
from gphotos.resources.uploads import UploadsClient
from gphotos.uploader import Uploader
from tests.helpers import make_response, sent_json


def ok_result(token: str, path: str, item_id: str) -> NewMediaItemResult:
    return NewMediaItemResult(
        upload_token=token,
        status=Status(message="Success"),
        media_item=MediaItem(id=item_id, description=path),
    )


@pytest.fixture
def files(temp_dir: Path) -> list[Path]:
    paths = []
    for name in ("a.jpg", "b.jpg", "c.jpg"):
        path = temp_dir / name
        path.write_bytes(name.encode())
        paths.append(path)
    return paths


@pytest.fixture
def albums() -> Mock:
    return Mock(spec=AlbumsClient)


@pytest.fixture
def media_items(files) -> Mock:
    mock = Mock(spec=MediaItemsClient)
    mock.batch_create.return_value = BatchCreateMediaItemsResponse(
        new_media_item_results=[
            ok_result(f"tok-{i}", str(p), f"item-{i}") for i, p in enumerate(files)
        ]
    )
    return mock


@pytest.fixture
def uploads() -> Mock:
    mock = Mock(spec=UploadsClient)
    tokens = {"a.jpg": "tok-0", "b.jpg": "tok-1", "c.jpg": "tok-2"}
    mock.upload_media.side_effect = lambda path, filename: tokens[filename]
    return mock


@pytest.fixture
def uploader(albums, media_items, uploads) -> Uploader:
    return Uploader(albums, media_items, uploads, album_page_size=1)


class TestFindAlbum:
    """Test exact-title album lookup across pages."""

    def test_existing_album_not_created(self, uploader, albums):
        """Test an album titled "Trip" is reused without a create call."""
        albums.list.side_effect = [
            ListAlbumsResponse(albums=[Album(id="x", title="Other")], next_page_token="p2"),
            ListAlbumsResponse(albums=[Album(id="trip-id", title="Trip")], next_page_token="p3"),
        ]

        album = uploader.find_or_create_album("Trip")

        assert album.id == "trip-id"
        albums.create.assert_not_called()
        # Stops at the first match without fetching page 3
        assert albums.list.call_count == 2
        assert build_params(albums.list.call_args_list[1].args) == [
            ("pageSize", "1"),
            ("pageToken", "p2"),
        ]

    def test_missing_album_created_once(self, uploader, albums):
        albums.list.side_effect = [
            ListAlbumsResponse(albums=[Album(id="x", title="Trip")], next_page_token="p2"),
            ListAlbumsResponse(albums=[Album(id="y", title="Other")], next_page_token=""),
        ]
        albums.create.return_value = Album(id="new-id", title="NewAlbum")

        album = uploader.find_or_create_album("NewAlbum")

        assert album.id == "new-id"
        albums.create.assert_called_once()
        request = albums.create.call_args.args[0]
        assert request.to_api() == {"album": {"title": "NewAlbum"}}

    def test_title_match_is_exact(self, uploader, albums):
        """Test no case or whitespace normalization is applied."""
        albums.list.return_value = ListAlbumsResponse(
            albums=[Album(id="1", title="trip"), Album(id="2", title="Trip ")]
        )

        assert uploader.find_album("Trip") is None

    def test_first_match_wins(self, uploader, albums):
        albums.list.return_value = ListAlbumsResponse(
            albums=[Album(id="first", title="Dup"), Album(id="second", title="Dup")]
        )

        assert uploader.find_album("Dup").id == "first"

    def test_empty_library(self, uploader, albums):
        albums.list.return_value = ListAlbumsResponse()
        assert uploader.find_album("Trip") is None
        albums.list.assert_called_once()


class TestUploadWithAlbumName:
    """Test the full upload workflow."""

    def test_existing_album_used(self, uploader, albums, media_items, files):
        albums.list.return_value = ListAlbumsResponse(albums=[Album(id="trip-id", title="Trip")])

        album, items = uploader.upload_with_album_name(files, "Trip")

        assert album.id == "trip-id"
        albums.create.assert_not_called()
        request = media_items.batch_create.call_args.args[0]
        assert request.album_id == "trip-id"
        assert [i.id for i in items] == ["item-0", "item-1", "item-2"]

    def test_created_album_id_used_for_batch(self, uploader, albums, media_items, files):
        """Test the id returned by create flows into the batch-create call."""
        albums.list.return_value = ListAlbumsResponse(next_page_token="")
        albums.create.return_value = Album(id="created-id", title="NewAlbum")

        album, _ = uploader.upload_with_album_name(files, "NewAlbum")

        assert album.id == "created-id"
        albums.create.assert_called_once()
        media_items.batch_create.assert_called_once()
        assert media_items.batch_create.call_args.args[0].album_id == "created-id"

    def test_drafts_carry_path_and_token(self, uploader, albums, media_items, uploads, files):
        albums.list.return_value = ListAlbumsResponse(albums=[Album(id="a", title="Trip")])

        uploader.upload_with_album_name(files, "Trip")

        assert [c.args for c in uploads.upload_media.call_args_list] == [
            (str(p), p.name) for p in files
        ]
        drafts = media_items.batch_create.call_args.args[0].new_media_items
        assert [d.description for d in drafts] == [str(p) for p in files]
        assert [d.simple_media_item.upload_token for d in drafts] == ["tok-0", "tok-1", "tok-2"]

    def test_local_files_deleted_on_success(self, uploader, albums, files):
        albums.list.return_value = ListAlbumsResponse(albums=[Album(id="a", title="Trip")])

        uploader.upload_with_album_name(files, "Trip")

        assert not any(p.exists() for p in files)

    def test_partial_failure_deletes_nothing(self, uploader, albums, media_items, files):
        """Test item 2 of 3 failing fails the whole upload and keeps every file."""
        albums.list.return_value = ListAlbumsResponse(albums=[Album(id="a", title="Trip")])
        media_items.batch_create.return_value = BatchCreateMediaItemsResponse(
            new_media_item_results=[
                ok_result("tok-0", str(files[0]), "item-0"),
                NewMediaItemResult(
                    upload_token="tok-1", status=Status(code=3, message="Invalid upload token")
                ),
                ok_result("tok-2", str(files[2]), "item-2"),
            ]
        )

        with pytest.raises(BatchCreateError) as exc_info:
            uploader.upload_with_album_name(files, "Trip")

        assert all(p.exists() for p in files)
        err = exc_info.value
        assert len(err.results) == 3
        assert [r.upload_token for r in err.failed] == ["tok-1"]
        assert "1 of 3" in str(err)

    def test_missing_results_is_failure(self, uploader, media_items, files):
        media_items.batch_create.return_value = BatchCreateMediaItemsResponse(
            new_media_item_results=[ok_result("tok-0", str(files[0]), "item-0")]
        )

        with pytest.raises(BatchCreateError) as exc_info:
            uploader.upload(files)

        assert exc_info.value.missing == 2
        assert "2 of 3" in str(exc_info.value)
        assert all(p.exists() for p in files)

    def test_upload_failure_stops_before_batch(self, uploader, media_items, uploads, files):
        uploads.upload_media.side_effect = FileNotFoundError("gone")

        with pytest.raises(FileNotFoundError):
            uploader.upload(files)

        media_items.batch_create.assert_not_called()

    def test_keep_local_files(self, albums, media_items, uploads, files):
        uploader = Uploader(albums, media_items, uploads, delete_after_upload=False)

        items = uploader.upload(files)

        assert len(items) == 3
        assert all(p.exists() for p in files)

    def test_resumable_uploads(self, albums, media_items, uploads, files):
        tokens = {"a.jpg": "tok-0", "b.jpg": "tok-1", "c.jpg": "tok-2"}
        uploads.resumable_upload.side_effect = lambda path, filename, chunk_size: tokens[filename]
        uploader = Uploader(albums, media_items, uploads, resumable_chunk_size=1024 * 1024)

        uploader.upload(files)

        uploads.upload_media.assert_not_called()
        assert [c.kwargs["chunk_size"] for c in uploads.resumable_upload.call_args_list] == [1024 * 1024] * 3
        drafts = media_items.batch_create.call_args.args[0].new_media_items
        assert [d.simple_media_item.upload_token for d in drafts] == ["tok-0", "tok-1", "tok-2"]

    def test_failed_delete_keeps_created_items(self, uploader, media_items, files, caplog):
        """Test a file that cannot be removed is skipped and every item is still returned."""
        files[1].unlink()

        with caplog.at_level(logging.WARNING, logger="gphotos.uploader"):
            items = uploader.upload(files)

        assert [i.id for i in items] == ["item-0", "item-1", "item-2"]
        assert not files[0].exists()
        assert not files[2].exists()
        assert f"Failed to delete {files[1]}" in caplog.text

    def test_same_path_twice(self, albums, media_items, uploads, files):
        media_items.batch_create.return_value = BatchCreateMediaItemsResponse(
            new_media_item_results=[
                ok_result("tok-0", str(files[0]), "item-0"),
                ok_result("tok-0", str(files[0]), "item-0b"),
            ]
        )
        uploader = Uploader(albums, media_items, uploads)

        items = uploader.upload([files[0], files[0]])

        assert [i.id for i in items] == ["item-0", "item-0b"]
        assert not files[0].exists()

    def test_empty_input_sends_nothing(self, uploader, media_items, uploads):
        assert uploader.upload([]) == []

        uploads.upload_media.assert_not_called()
        media_items.batch_create.assert_not_called()

    def test_upload_without_album(self, uploader, albums, media_items, files):
        uploader.upload(files)

        albums.list.assert_not_called()
        assert media_items.batch_create.call_args.args[0].album_id is None
        assert "albumId" not in media_items.batch_create.call_args.args[0].to_api()

    def test_delete_falls_back_to_input_path(self, uploader, media_items, files):
        """Test files are still removed when the server omits the description."""
        media_items.batch_create.return_value = BatchCreateMediaItemsResponse(
            new_media_item_results=[
                NewMediaItemResult(upload_token=f"tok-{i}", status=Status(), media_item=MediaItem(id=str(i)))
                for i in range(3)
            ]
        )

        uploader.upload(files)

        assert not any(p.exists() for p in files)


class TestPhotosLibraryUpload:
    """Test the workflow end to end over a mocked session."""

    def test_new_album_upload(self, session, temp_dir):
        photo = temp_dir / "beach.jpg"
        photo.write_bytes(b"jpeg")
        session.request.side_effect = [
            make_response(200, json_data={"albums": [{"id": "x", "title": "Other"}]}),
            make_response(200, json_data={"id": "new-album", "title": "Holiday"}),
            make_response(200, text="upload-tok"),
            make_response(
                200,
                json_data={
                    "newMediaItemResults": [
                        {
                            "uploadToken": "upload-tok",
                            "status": {"message": "Success"},
                            "mediaItem": {"id": "m1", "description": str(photo)},
                        }
                    ]
                },
            ),
        ]
        library = PhotosLibrary(session, album_page_size=1)

        album, items = library.uploader.upload_with_album_name([photo], "Holiday")

        assert album.id == "new-album"
        assert [i.id for i in items] == ["m1"]
        assert not photo.exists()
        methods_urls = [c.args for c in session.request.call_args_list]
        assert methods_urls == [
            ("GET", "https://photoslibrary.googleapis.com/v1/albums"),
            ("POST", "https://photoslibrary.googleapis.com/v1/albums"),
            ("POST", "https://photoslibrary.googleapis.com/v1/uploads"),
            ("POST", "https://photoslibrary.googleapis.com/v1/mediaItems:batchCreate"),
        ]
        assert sent_json(session.request.call_args_list[3]) == {
            "albumId": "new-album",
            "newMediaItems": [
                {"description": str(photo), "simpleMediaItem": {"uploadToken": "upload-tok"}}
            ],
        }
