"""
Composition of the resource clients around a single session.
"""

import requests

from gphotos.resources import AlbumsClient, MediaItemsClient, SharedAlbumsClient, UploadsClient
from gphotos.transport import Transport
from gphotos.uploader import Uploader


class PhotosLibrary:
    """
    Convenience bundle of every resource client.

    Example:
        creds = get_creds()
        library = PhotosLibrary(authorized_session(creds))
        album, items = library.uploader.upload_with_album_name(["a.jpg"], "Trip")
    """

    def __init__(
        self,
        session: requests.Session,
        timeout: float | None = None,
        album_page_size: int = 50,
        delete_after_upload: bool = True,
        resumable_chunk_size: int | None = None,
    ):
        self.transport = Transport(session, timeout=timeout)
        self.albums = AlbumsClient(self.transport)
        self.media_items = MediaItemsClient(self.transport)
        self.shared_albums = SharedAlbumsClient(self.transport)
        self.uploads = UploadsClient(self.transport)
        self.uploader = Uploader(
            self.albums,
            self.media_items,
            self.uploads,
            album_page_size=album_page_size,
            delete_after_upload=delete_after_upload,
            resumable_chunk_size=resumable_chunk_size,
        )
