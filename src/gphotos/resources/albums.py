"""
Albums resource: https://developers.google.com/photos/library/reference/rest/v1/albums
"""

from __future__ import annotations

import logging

from pydantic import Field

from gphotos.models import (
    Album,
    AlbumPosition,
    ApiModel,
    EnrichmentItem,
    NewEnrichmentItem,
    ShareInfo,
    SharedAlbumOptions,
)
from gphotos.query import ListQuery, build_params, paginate
from gphotos.transport import API_ROOT, Transport, build_url

logger = logging.getLogger(__name__)


class AddEnrichmentRequest(ApiModel):
    new_enrichment_item: NewEnrichmentItem
    album_position: AlbumPosition


class AddEnrichmentResponse(ApiModel):
    enrichment_item: EnrichmentItem | None = None


class BatchAddMediaItemsRequest(ApiModel):
    media_item_ids: list[str] = Field(default_factory=list)


class BatchRemoveMediaItemsRequest(ApiModel):
    media_item_ids: list[str] = Field(default_factory=list)


class CreateAlbumRequest(ApiModel):
    album: Album


class ListAlbumsResponse(ApiModel):
    albums: list[Album] = Field(default_factory=list)
    next_page_token: str | None = None


class ShareAlbumRequest(ApiModel):
    shared_album_options: SharedAlbumOptions | None = None


class ShareAlbumResponse(ApiModel):
    share_info: ShareInfo | None = None


class AlbumsClient:
    """Requests belonging to ``albums``."""

    base_url = f"{API_ROOT}/albums"

    def __init__(self, transport: Transport):
        self.transport = transport

    def add_enrichment(self, album_id: str, request: AddEnrichmentRequest) -> AddEnrichmentResponse:
        """Add a text, location or map enrichment at a position in an album."""
        data = self.transport.request_json(
            "POST",
            build_url(self.base_url, album_id, "addEnrichment"),
            json_body=request.to_api(),
        )
        return AddEnrichmentResponse.from_api(data)

    def batch_add_media_items(self, album_id: str, request: BatchAddMediaItemsRequest) -> None:
        """Add existing library items to an album created by this app."""
        self.transport.request(
            "POST",
            build_url(self.base_url, album_id, "batchAddMediaItems"),
            json_body=request.to_api(),
        )

    def batch_remove_media_items(self, album_id: str, request: BatchRemoveMediaItemsRequest) -> None:
        self.transport.request(
            "POST",
            build_url(self.base_url, album_id, "batchRemoveMediaItems"),
            json_body=request.to_api(),
        )

    def create(self, request: CreateAlbumRequest) -> Album:
        """Create an album; the server assigns its id."""
        data = self.transport.request_json("POST", self.base_url, json_body=request.to_api())
        album = Album.from_api(data)
        logger.debug(f"Created album '{album.title}' -> {album.id}")
        return album

    def get(self, album_id: str) -> Album:
        data = self.transport.request_json("GET", build_url(self.base_url, album_id))
        return Album.from_api(data)

    def list(self, *queries: ListQuery) -> ListAlbumsResponse:
        """
        List one page of albums shown in the user's Albums tab.

        Args:
            queries: ``page_size``, ``page_token`` and
                ``exclude_non_app_created_data`` modifiers, applied in order

        Returns:
            The page and its ``next_page_token`` (empty on the last page)
        """
        data = self.transport.request_json("GET", self.base_url, params=build_params(queries))
        return ListAlbumsResponse.from_api(data)

    def list_all(self, *queries: ListQuery) -> list[Album]:
        """Collect every album across all pages, in server order."""
        return list(paginate(self.list, "albums", *queries))

    def patch(self, album_id: str, album: Album, update_mask: str = "title") -> Album:
        """Update the fields of an album named by ``update_mask`` (title, coverPhotoMediaItemId)."""
        data = self.transport.request_json(
            "PATCH",
            build_url(self.base_url, album_id),
            params=[("updateMask", update_mask)],
            json_body=album.to_api(),
        )
        return Album.from_api(data)

    def share(self, album_id: str, request: ShareAlbumRequest | None = None) -> ShareAlbumResponse:
        """Mark an album as shared; returns its new share info."""
        request = request or ShareAlbumRequest()
        data = self.transport.request_json(
            "POST",
            build_url(self.base_url, album_id, "share"),
            json_body=request.to_api(),
        )
        return ShareAlbumResponse.from_api(data)

    def unshare(self, album_id: str) -> None:
        self.transport.request("POST", build_url(self.base_url, album_id, "unshare"))
