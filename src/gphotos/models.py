"""
Typed records mirroring the Photos Library API JSON schema.

Attribute names are snake_case, wire names are lowerCamelCase. ``to_api()``
only emits fields that were present when decoding (or set explicitly) and
skips ``None``, so a decoded response re-encodes to the fields it came with.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request and response record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",  # Keep fields newer than this client
    )

    @classmethod
    def from_api(cls, data: dict[str, Any] | None):
        return cls.model_validate(data or {})

    def to_api(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


# Enums


class PositionType(str, Enum):
    POSITION_TYPE_UNSPECIFIED = "POSITION_TYPE_UNSPECIFIED"
    FIRST_IN_ALBUM = "FIRST_IN_ALBUM"
    LAST_IN_ALBUM = "LAST_IN_ALBUM"
    AFTER_MEDIA_ITEM = "AFTER_MEDIA_ITEM"
    AFTER_ENRICHMENT_ITEM = "AFTER_ENRICHMENT_ITEM"


class VideoProcessingStatus(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    PROCESSING = "PROCESSING"
    READY = "READY"
    FAILED = "FAILED"


class MediaType(str, Enum):
    ALL_MEDIA = "ALL_MEDIA"
    VIDEO = "VIDEO"
    PHOTO = "PHOTO"


class Feature(str, Enum):
    NONE = "NONE"
    FAVORITES = "FAVORITES"


class ContentCategory(str, Enum):
    NONE = "NONE"
    LANDSCAPES = "LANDSCAPES"
    RECEIPTS = "RECEIPTS"
    CITYSCAPES = "CITYSCAPES"
    LANDMARKS = "LANDMARKS"
    SELFIES = "SELFIES"
    PEOPLE = "PEOPLE"
    PETS = "PETS"
    WEDDINGS = "WEDDINGS"
    BIRTHDAYS = "BIRTHDAYS"
    DOCUMENTS = "DOCUMENTS"
    TRAVEL = "TRAVEL"
    ANIMALS = "ANIMALS"
    FOOD = "FOOD"
    SPORT = "SPORT"
    NIGHT = "NIGHT"
    PERFORMANCES = "PERFORMANCES"
    WHITEBOARDS = "WHITEBOARDS"
    SCREENSHOTS = "SCREENSHOTS"
    UTILITY = "UTILITY"
    ARTS = "ARTS"
    CRAFTS = "CRAFTS"
    FASHION = "FASHION"
    HOUSES = "HOUSES"
    GARDENS = "GARDENS"
    FLOWERS = "FLOWERS"
    HOLIDAYS = "HOLIDAYS"


# Albums and sharing


class SharedAlbumOptions(ApiModel):
    is_collaborative: bool | None = None
    is_commentable: bool | None = None


class ShareInfo(ApiModel):
    """Sharing state of an album; only returned with the sharing scope."""

    shared_album_options: SharedAlbumOptions | None = None
    shareable_url: str | None = None
    share_token: str | None = None
    is_joined: bool | None = None
    is_owned: bool | None = None
    is_joinable: bool | None = None


class Album(ApiModel):
    id: str | None = None
    title: str | None = None
    product_url: str | None = None
    is_writeable: bool | None = None
    share_info: ShareInfo | None = None
    # int64 is sent as a JSON string
    media_items_count: str | None = None
    cover_photo_base_url: str | None = None
    cover_photo_media_item_id: str | None = None


# Media items


class Photo(ApiModel):
    camera_make: str | None = None
    camera_model: str | None = None
    focal_length: float | None = None
    aperture_f_number: float | None = None
    iso_equivalent: int | None = None
    exposure_time: str | None = None


class Video(ApiModel):
    camera_make: str | None = None
    camera_model: str | None = None
    fps: float | None = None
    # Unknown processing states are kept as plain strings
    status: VideoProcessingStatus | str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        if isinstance(v, str) and v in VideoProcessingStatus._value2member_map_:
            return VideoProcessingStatus(v)
        return v


class MediaMetadata(ApiModel):
    creation_time: str | None = None
    width: str | None = None
    height: str | None = None
    photo: Photo | None = None
    video: Video | None = None


class ContributorInfo(ApiModel):
    profile_picture_base_url: str | None = None
    display_name: str | None = None


class MediaItem(ApiModel):
    id: str | None = None
    description: str | None = None
    product_url: str | None = None
    base_url: str | None = None
    mime_type: str | None = None
    media_metadata: MediaMetadata | None = None
    contributor_info: ContributorInfo | None = None
    filename: str | None = None


class SimpleMediaItem(ApiModel):
    upload_token: str
    file_name: str | None = None


class NewMediaItem(ApiModel):
    """Draft of a media item: a description plus an upload token."""

    description: str | None = None
    simple_media_item: SimpleMediaItem

    @classmethod
    def from_token(cls, upload_token: str, description: str | None = None) -> "NewMediaItem":
        return cls(
            description=description,
            simple_media_item=SimpleMediaItem(upload_token=upload_token),
        )


class Status(ApiModel):
    """google.rpc.Status attached to each batch-create result."""

    code: int | None = None
    message: str | None = None
    details: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.code


class NewMediaItemResult(ApiModel):
    upload_token: str | None = None
    status: Status | None = None
    media_item: MediaItem | None = None

    @property
    def ok(self) -> bool:
        return self.status is not None and self.status.ok


# Positions and enrichments


class AlbumPosition(ApiModel):
    position: PositionType | None = None
    relative_media_item_id: str | None = None
    relative_enrichment_item_id: str | None = None


class LatLng(ApiModel):
    latitude: float | None = None
    longitude: float | None = None


class Location(ApiModel):
    location_name: str | None = None
    latlng: LatLng | None = None


class TextEnrichment(ApiModel):
    text: str | None = None


class LocationEnrichment(ApiModel):
    location: Location | None = None


class MapEnrichment(ApiModel):
    origin: Location | None = None
    destination: Location | None = None


class NewEnrichmentItem(ApiModel):
    """Exactly one of the enrichment kinds should be set."""

    text_enrichment: TextEnrichment | None = None
    location_enrichment: LocationEnrichment | None = None
    map_enrichment: MapEnrichment | None = None


class EnrichmentItem(ApiModel):
    id: str | None = None


# Search filters


class Date(ApiModel):
    """A calendar date; 0 in a component means "any"."""

    year: int | None = None
    month: int | None = None
    day: int | None = None


class DateRange(ApiModel):
    start_date: Date | None = None
    end_date: Date | None = None


class DateFilter(ApiModel):
    dates: list[Date] = Field(default_factory=list)
    ranges: list[DateRange] = Field(default_factory=list)


class ContentFilter(ApiModel):
    included_content_categories: list[ContentCategory] = Field(default_factory=list)
    excluded_content_categories: list[ContentCategory] = Field(default_factory=list)


class MediaTypeFilter(ApiModel):
    media_types: list[MediaType] = Field(default_factory=list)


class FeatureFilter(ApiModel):
    included_features: list[Feature] = Field(default_factory=list)


class Filters(ApiModel):
    date_filter: DateFilter | None = None
    content_filter: ContentFilter | None = None
    media_type_filter: MediaTypeFilter | None = None
    feature_filter: FeatureFilter | None = None
    include_archived_media: bool | None = None
    exclude_non_app_created_data: bool | None = None


# Errors


class ErrorDetail(ApiModel):
    code: int | None = None
    message: str | None = None
    status: str | None = None


class ApiErrorPayload(ApiModel):
    error: ErrorDetail | None = None
