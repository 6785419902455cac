"""
MediaItems resource: https://developers.google.com/photos/library/reference/rest/v1/mediaItems
"""

from __future__ import annotations

import logging

from pydantic import Field

from gphotos.models import (
    AlbumPosition,
    ApiModel,
    Filters,
    MediaItem,
    NewMediaItem,
    NewMediaItemResult,
    Status,
)
from gphotos.query import ListQuery, build_params, paginate
from gphotos.transport import API_ROOT, Transport, build_url

logger = logging.getLogger(__name__)


class BatchCreateMediaItemsRequest(ApiModel):
    album_id: str | None = None
    new_media_items: list[NewMediaItem] = Field(default_factory=list)
    album_position: AlbumPosition | None = None


class BatchCreateMediaItemsResponse(ApiModel):
    new_media_item_results: list[NewMediaItemResult] = Field(default_factory=list)


class MediaItemResult(ApiModel):
    status: Status | None = None
    media_item: MediaItem | None = None


class BatchGetMediaItemsResponse(ApiModel):
    media_item_results: list[MediaItemResult] = Field(default_factory=list)


class ListMediaItemsResponse(ApiModel):
    media_items: list[MediaItem] = Field(default_factory=list)
    next_page_token: str | None = None


class SearchMediaItemsRequest(ApiModel):
    """Search by album or by filters; the server rejects both together."""

    album_id: str | None = None
    page_size: int | None = None
    page_token: str | None = None
    filters: Filters | None = None
    order_by: str | None = None


class SearchMediaItemsResponse(ApiModel):
    media_items: list[MediaItem] = Field(default_factory=list)
    next_page_token: str | None = None


class MediaItemsClient:
    """Requests belonging to ``mediaItems``."""

    base_url = f"{API_ROOT}/mediaItems"

    def __init__(self, transport: Transport):
        self.transport = transport

    def batch_create(self, request: BatchCreateMediaItemsRequest) -> BatchCreateMediaItemsResponse:
        """
        Create media items from upload tokens, optionally inside an album.

        Returns one result per draft item, each with a status and, on
        success, the created item. Per-item failures are not raised here.
        """
        data = self.transport.request_json(
            "POST",
            build_url(self.base_url, action="batchCreate"),
            json_body=request.to_api(),
        )
        response = BatchCreateMediaItemsResponse.from_api(data)
        logger.debug(
            f"batchCreate: {len(request.new_media_items)} sent, "
            f"{sum(1 for r in response.new_media_item_results if r.ok)} ok"
        )
        return response

    def batch_get(self, media_item_ids: list[str]) -> BatchGetMediaItemsResponse:
        data = self.transport.request_json(
            "GET",
            build_url(self.base_url, action="batchGet"),
            params=[("mediaItemIds", item_id) for item_id in media_item_ids],
        )
        return BatchGetMediaItemsResponse.from_api(data)

    def get(self, media_item_id: str) -> MediaItem:
        data = self.transport.request_json("GET", build_url(self.base_url, media_item_id))
        return MediaItem.from_api(data)

    def list(self, *queries: ListQuery) -> ListMediaItemsResponse:
        """List one page of the library, newest first."""
        data = self.transport.request_json("GET", self.base_url, params=build_params(queries))
        return ListMediaItemsResponse.from_api(data)

    def list_all(self, *queries: ListQuery) -> list[MediaItem]:
        return list(paginate(self.list, "media_items", *queries))

    def patch(self, media_item_id: str, media_item: MediaItem, update_mask: str = "description") -> MediaItem:
        data = self.transport.request_json(
            "PATCH",
            build_url(self.base_url, media_item_id),
            params=[("updateMask", update_mask)],
            json_body=media_item.to_api(),
        )
        return MediaItem.from_api(data)

    def search(self, request: SearchMediaItemsRequest | None = None) -> SearchMediaItemsResponse:
        """Search the library; filtering happens server side."""
        request = request or SearchMediaItemsRequest()
        data = self.transport.request_json(
            "POST",
            build_url(self.base_url, action="search"),
            json_body=request.to_api(),
        )
        return SearchMediaItemsResponse.from_api(data)

    def search_all(self, request: SearchMediaItemsRequest | None = None) -> list[MediaItem]:
        """Run a search and follow ``next_page_token`` until the last page."""
        request = request or SearchMediaItemsRequest()
        items: list[MediaItem] = []
        page_request = request.model_copy()
        while True:
            response = self.search(page_request)
            items.extend(response.media_items)
            if not response.next_page_token:
                return items
            page_request = request.model_copy()
            page_request.page_token = response.next_page_token
