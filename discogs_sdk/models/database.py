"""Request and response models for the Database API."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import (
    DiscogsModel,
    DiscogsRequest,
    NonBlankStr,
    PaginatedRequest,
    PaginatedResponse,
    PositiveId,
    Rating,
    build_body,
)
from .types import (
    CatalogEntity,
    CommunityRating,
    Currency,
    Format,
    Image,
    LenientSearchType,
    Release,
    ReleaseContentBase,
    ReleaseStats,
    SearchType,
    SortOrder,
)


class MasterVersionsSortKey(str, Enum):
    RELEASED = "released"
    TITLE = "title"
    FORMAT = "format"
    LABEL = "label"
    CATALOG_NUMBER = "catno"
    COUNTRY = "country"


class ArtistReleasesSortKey(str, Enum):
    YEAR = "year"
    TITLE = "title"
    FORMAT = "format"


# Requests
class GetReleaseRequest(DiscogsRequest):
    release_id: PositiveId = Field(description="Release ID (path)")
    curr_abbr: Optional[Currency] = Field(
        default=None, description="Currency for marketplace data"
    )

    def query_parameters(self) -> Dict[str, Any]:
        return {"curr_abbr": self.curr_abbr}


class GetUserReleaseRatingRequest(DiscogsRequest):
    release_id: PositiveId
    username: NonBlankStr


class UpdateUserReleaseRatingRequest(DiscogsRequest):
    release_id: PositiveId
    username: NonBlankStr
    rating: Rating = Field(description="Rating from 1 to 5")

    def to_body(self) -> Dict[str, Any]:
        return build_body({"rating": self.rating})


class DeleteUserReleaseRatingRequest(DiscogsRequest):
    release_id: PositiveId
    username: NonBlankStr


class GetCommunityReleaseRatingRequest(DiscogsRequest):
    release_id: PositiveId


class GetMasterReleaseRequest(DiscogsRequest):
    master_id: PositiveId


class GetMasterReleaseVersionsRequest(PaginatedRequest):
    """Filters and sorting for the versions of a master release."""

    master_id: PositiveId
    format: Optional[str] = Field(default=None, description="Filter by format")
    label: Optional[str] = Field(default=None, description="Filter by label")
    released: Optional[str] = Field(default=None, description="Filter by release year")
    country: Optional[str] = Field(default=None, description="Filter by country")
    sort: Optional[MasterVersionsSortKey] = None
    sort_order: Optional[SortOrder] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "label": self.label,
            "released": self.released,
            "country": self.country,
            "sort": self.sort,
            "sort_order": self.sort_order,
        }


class GetArtistRequest(DiscogsRequest):
    artist_id: PositiveId


class GetArtistReleasesRequest(PaginatedRequest):
    artist_id: PositiveId
    sort: Optional[ArtistReleasesSortKey] = None
    sort_order: Optional[SortOrder] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {"sort": self.sort, "sort_order": self.sort_order}


class GetLabelRequest(DiscogsRequest):
    label_id: PositiveId


class GetLabelReleasesRequest(PaginatedRequest):
    label_id: PositiveId


class SearchRequest(PaginatedRequest):
    """
    Database search parameters.

    Every field is optional; Discogs returns the most relevant results for
    whatever combination is supplied.
    """

    query: Optional[str] = Field(default=None, description="Free text query (q)")
    type: Optional[SearchType] = Field(default=None, description="release, master, artist or label")
    title: Optional[str] = Field(default=None, description="Combined 'Artist Name - Release Title'")
    release_title: Optional[str] = None
    credit: Optional[str] = None
    artist: Optional[str] = None
    anv: Optional[str] = Field(default=None, description="Artist name variation")
    label: Optional[str] = None
    genre: Optional[str] = None
    style: Optional[str] = None
    country: Optional[str] = None
    year: Optional[str] = None
    format: Optional[str] = None
    catalog_number: Optional[str] = None
    barcode: Optional[str] = None
    track: Optional[str] = None
    submitter: Optional[str] = None
    contributor: Optional[str] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {
            "q": self.query,
            "type": self.type,
            "title": self.title,
            "release_title": self.release_title,
            "credit": self.credit,
            "artist": self.artist,
            "anv": self.anv,
            "label": self.label,
            "genre": self.genre,
            "style": self.style,
            "country": self.country,
            "year": self.year,
            "format": self.format,
            "catno": self.catalog_number,
            "barcode": self.barcode,
            "track": self.track,
            "submitter": self.submitter,
            "contributor": self.contributor,
        }


# Responses
class GetReleaseResponse(Release):
    pass


class UserReleaseRating(DiscogsModel):
    username: Optional[str] = None
    release_id: Optional[int] = None
    rating: Optional[int] = Field(default=None, description="0 when the user has not rated")


class GetUserReleaseRatingResponse(UserReleaseRating):
    pass


class UpdateUserReleaseRatingResponse(UserReleaseRating):
    pass


class GetCommunityReleaseRatingResponse(DiscogsModel):
    release_id: Optional[int] = None
    rating: Optional[CommunityRating] = None


class MasterRelease(ReleaseContentBase):
    """A master release grouping every version of the same recording."""

    main_release: Optional[int] = None
    main_release_url: Optional[str] = None
    most_recent_release: Optional[int] = None
    most_recent_release_url: Optional[str] = None
    versions_url: Optional[str] = None


class GetMasterReleaseResponse(MasterRelease):
    pass


class MasterReleaseVersion(DiscogsModel):
    id: int
    title: Optional[str] = None
    status: Optional[str] = None
    stats: Optional[ReleaseStats] = None
    thumb: Optional[str] = None
    format: Optional[str] = None
    country: Optional[str] = None
    label: Optional[str] = None
    released: Optional[str] = None
    major_formats: List[str] = Field(default_factory=list)
    catalog_number: Optional[str] = Field(default=None, alias="catno")
    resource_url: Optional[str] = None


class GetMasterReleaseVersionsResponse(PaginatedResponse[MasterReleaseVersion]):
    items_field = "versions"

    versions: List[MasterReleaseVersion] = Field(default_factory=list)


class ArtistReference(DiscogsModel):
    """Alias, member or group reference of an artist."""

    id: Optional[int] = None
    name: Optional[str] = None
    resource_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    active: Optional[bool] = None


class ArtistInformation(DiscogsModel):
    id: int
    name: Optional[str] = None
    real_name: Optional[str] = Field(default=None, alias="realname")
    profile: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    releases_url: Optional[str] = None
    images: List[Image] = Field(default_factory=list)
    urls: List[str] = Field(default_factory=list)
    name_variations: List[str] = Field(default_factory=list, alias="namevariations")
    aliases: List[ArtistReference] = Field(default_factory=list)
    members: List[ArtistReference] = Field(default_factory=list)
    groups: List[ArtistReference] = Field(default_factory=list)
    data_quality: Optional[str] = None


class GetArtistResponse(ArtistInformation):
    pass


class ArtistRelease(DiscogsModel):
    id: int
    title: Optional[str] = None
    type: Optional[str] = Field(default=None, description="release or master")
    main_release: Optional[int] = None
    artist: Optional[str] = None
    role: Optional[str] = None
    format: Optional[str] = None
    label: Optional[str] = None
    year: Optional[int] = None
    status: Optional[str] = None
    thumb: Optional[str] = None
    resource_url: Optional[str] = None
    stats: Optional[ReleaseStats] = None


class GetArtistReleasesResponse(PaginatedResponse[ArtistRelease]):
    items_field = "releases"

    releases: List[ArtistRelease] = Field(default_factory=list)


class LabelInformation(DiscogsModel):
    id: int
    name: Optional[str] = None
    profile: Optional[str] = None
    contact_info: Optional[str] = None
    parent_label: Optional[CatalogEntity] = None
    sublabels: List[CatalogEntity] = Field(default_factory=list)
    urls: List[str] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    releases_url: Optional[str] = None
    data_quality: Optional[str] = None


class GetLabelResponse(LabelInformation):
    pass


class LabelRelease(DiscogsModel):
    id: int
    title: Optional[str] = None
    artist: Optional[str] = None
    catalog_number: Optional[str] = Field(default=None, alias="catno")
    format: Optional[str] = None
    year: Optional[int] = None
    status: Optional[str] = None
    thumb: Optional[str] = None
    resource_url: Optional[str] = None
    stats: Optional[ReleaseStats] = None


class GetLabelReleasesResponse(PaginatedResponse[LabelRelease]):
    items_field = "releases"

    releases: List[LabelRelease] = Field(default_factory=list)


class SearchResultCommunity(DiscogsModel):
    have: Optional[int] = None
    want: Optional[int] = None


class SearchResultUserData(DiscogsModel):
    in_want_list: Optional[bool] = Field(default=None, alias="in_wantlist")
    in_collection: Optional[bool] = None


class SearchResult(DiscogsModel):
    """One database search hit; which fields are set depends on ``type``."""

    id: int
    type: LenientSearchType = None
    title: Optional[str] = None
    thumb: Optional[str] = None
    cover_image: Optional[str] = None
    resource_url: Optional[str] = None
    uri: Optional[str] = None
    country: Optional[str] = None
    year: Optional[str] = None
    format: List[str] = Field(default_factory=list)
    label: List[str] = Field(default_factory=list)
    genre: List[str] = Field(default_factory=list)
    style: List[str] = Field(default_factory=list)
    barcode: List[str] = Field(default_factory=list)
    catalog_number: Optional[str] = Field(default=None, alias="catno")
    community: Optional[SearchResultCommunity] = None
    user_data: Optional[SearchResultUserData] = None
    master_id: Optional[int] = None
    master_url: Optional[str] = None
    format_quantity: Optional[int] = None
    formats: List[Format] = Field(default_factory=list)


class SearchResponse(PaginatedResponse[SearchResult]):
    items_field = "results"

    results: List[SearchResult] = Field(default_factory=list)
