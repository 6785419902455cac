"""
One client per REST resource group, each wrapping a shared Transport.
"""

from gphotos.resources.albums import AlbumsClient
from gphotos.resources.media_items import MediaItemsClient
from gphotos.resources.shared_albums import SharedAlbumsClient
from gphotos.resources.uploads import UploadsClient

__all__ = [
    "AlbumsClient",
    "MediaItemsClient",
    "SharedAlbumsClient",
    "UploadsClient",
]
