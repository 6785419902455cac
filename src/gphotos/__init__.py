"""
gphotos - Typed client for the Google Photos Library API.

Authenticate with OAuth2, then manage albums, list and search media items,
and upload files through typed request/response models.
"""

__version__ = "0.1.0"

from gphotos.auth import SCOPES, Scope, authorized_session, get_creds
from gphotos.client import PhotosLibrary
from gphotos.errors import ApiError, BatchCreateError, PhotosError
from gphotos.transport import Transport
from gphotos.uploader import Uploader

__all__ = [
    "__version__",
    "SCOPES",
    "Scope",
    "get_creds",
    "authorized_session",
    "PhotosLibrary",
    "Transport",
    "Uploader",
    "PhotosError",
    "ApiError",
    "BatchCreateError",
]
