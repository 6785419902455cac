"""
SharedAlbums resource: https://developers.google.com/photos/library/reference/rest/v1/sharedAlbums
"""

from __future__ import annotations

from pydantic import Field

from gphotos.models import Album, ApiModel
from gphotos.query import ListQuery, build_params, paginate
from gphotos.transport import API_ROOT, Transport, build_url


class JoinSharedAlbumRequest(ApiModel):
    share_token: str


class JoinSharedAlbumResponse(ApiModel):
    album: Album | None = None


class LeaveSharedAlbumRequest(ApiModel):
    share_token: str


class ListSharedAlbumsResponse(ApiModel):
    shared_albums: list[Album] = Field(default_factory=list)
    next_page_token: str | None = None


class SharedAlbumsClient:
    """Requests belonging to ``sharedAlbums``."""

    base_url = f"{API_ROOT}/sharedAlbums"

    def __init__(self, transport: Transport):
        self.transport = transport

    def get(self, share_token: str) -> Album:
        """Fetch a shared album by its share token."""
        data = self.transport.request_json("GET", build_url(self.base_url, share_token))
        return Album.from_api(data)

    def join(self, request: JoinSharedAlbumRequest) -> JoinSharedAlbumResponse:
        data = self.transport.request_json(
            "POST",
            build_url(self.base_url, action="join"),
            json_body=request.to_api(),
        )
        return JoinSharedAlbumResponse.from_api(data)

    def leave(self, request: LeaveSharedAlbumRequest) -> None:
        """Leave a shared album; the owner cannot leave their own album."""
        self.transport.request(
            "POST",
            build_url(self.base_url, action="leave"),
            json_body=request.to_api(),
        )

    def list(self, *queries: ListQuery) -> ListSharedAlbumsResponse:
        data = self.transport.request_json("GET", self.base_url, params=build_params(queries))
        return ListSharedAlbumsResponse.from_api(data)

    def list_all(self, *queries: ListQuery) -> list[Album]:
        return list(paginate(self.list, "shared_albums", *queries))
