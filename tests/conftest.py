"""Shared pytest fixtures for gphotos tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from gphotos.transport import Transport
from tests.helpers import make_response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def session() -> Mock:
    """Mock authenticated session; set request.return_value/side_effect per test."""
    mock_session = Mock(spec=requests.Session)
    mock_session.request.return_value = make_response(200, json_data={})
    return mock_session


@pytest.fixture
def transport(session: Mock) -> Transport:
    return Transport(session)


@pytest.fixture
def sample_album_json() -> dict:
    """Album as returned by albums.get with the sharing scope."""
    return {
        "id": "album-1",
        "title": "Trip",
        "productUrl": "https://photos.google.com/lr/album/album-1",
        "isWriteable": True,
        "shareInfo": {
            "sharedAlbumOptions": {"isCollaborative": True, "isCommentable": False},
            "shareableUrl": "https://photos.app.goo.gl/abc",
            "shareToken": "share-token-1",
            "isJoined": True,
            "isOwned": True,
        },
        "mediaItemsCount": "12",
        "coverPhotoBaseUrl": "https://lh3.googleusercontent.com/cover",
        "coverPhotoMediaItemId": "item-cover",
    }


@pytest.fixture
def sample_media_item_json() -> dict:
    """Photo media item with full metadata."""
    return {
        "id": "item-1",
        "description": "/photos/beach.jpg",
        "productUrl": "https://photos.google.com/lr/photo/item-1",
        "baseUrl": "https://lh3.googleusercontent.com/item-1",
        "mimeType": "image/jpeg",
        "mediaMetadata": {
            "creationTime": "2024-07-01T10:00:00Z",
            "width": "4032",
            "height": "3024",
            "photo": {
                "cameraMake": "Google",
                "cameraModel": "Pixel 8",
                "focalLength": 6.9,
                "apertureFNumber": 1.68,
                "isoEquivalent": 50,
                "exposureTime": "0.001s",
            },
        },
        "contributorInfo": {
            "profilePictureBaseUrl": "https://lh3.googleusercontent.com/me",
            "displayName": "Sam",
        },
        "filename": "beach.jpg",
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests."""
    import logging

    # Store original handlers
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield

    # Restore original state
    root_logger.handlers = original_handlers
    root_logger.level = original_level
