"""Request and response models for the User Identity API."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import (
    DiscogsModel,
    DiscogsRequest,
    NonBlankStr,
    PaginatedRequest,
    PaginatedResponse,
    build_body,
)
from .database import ArtistInformation, LabelInformation
from .types import Currency, LenientCurrency, Release, SortOrder


class ContributionsSortKey(str, Enum):
    LABEL = "label"
    ARTIST = "artist"
    TITLE = "title"
    CATALOG_NUMBER = "catno"
    FORMAT = "format"
    RATING = "rating"
    YEAR = "year"
    ADDED = "added"


# Requests
class GetUserProfileRequest(DiscogsRequest):
    username: NonBlankStr


class EditUserProfileRequest(DiscogsRequest):
    username: NonBlankStr
    name: Optional[str] = None
    home_page: Optional[str] = None
    location: Optional[str] = None
    profile: Optional[str] = None
    curr_abbr: Optional[Currency] = None

    def to_body(self) -> Dict[str, Any]:
        return build_body(
            {
                "username": self.username,
                "name": self.name,
                "home_page": self.home_page,
                "location": self.location,
                "profile": self.profile,
                "curr_abbr": self.curr_abbr,
            }
        )


class GetUserSubmissionsRequest(PaginatedRequest):
    username: NonBlankStr


class GetUserContributionsRequest(PaginatedRequest):
    username: NonBlankStr
    sort: Optional[ContributionsSortKey] = None
    sort_order: Optional[SortOrder] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {"sort": self.sort, "sort_order": self.sort_order}


# Responses
class AuthenticatedUser(DiscogsModel):
    """Identity of the user the credentials belong to."""

    id: int
    username: str
    resource_url: Optional[str] = None
    consumer_name: Optional[str] = None


class GetIdentityResponse(AuthenticatedUser):
    pass


class UserProfile(DiscogsModel):
    id: int
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = Field(default=None, description="Only visible to the profile owner")
    profile: Optional[str] = None
    home_page: Optional[str] = None
    location: Optional[str] = None
    registered: Optional[datetime] = None
    rank: Optional[float] = None
    num_pending: Optional[int] = None
    num_for_sale: Optional[int] = None
    num_lists: Optional[int] = None
    num_collection: Optional[int] = None
    num_want_list: Optional[int] = Field(default=None, alias="num_wantlist")
    releases_contributed: Optional[int] = None
    releases_rated: Optional[int] = None
    rating_avg: Optional[float] = None
    buyer_rating: Optional[float] = None
    buyer_rating_stars: Optional[float] = None
    buyer_num_ratings: Optional[int] = None
    seller_rating: Optional[float] = None
    seller_rating_stars: Optional[float] = None
    seller_num_ratings: Optional[int] = None
    curr_abbr: LenientCurrency = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    avatar_url: Optional[str] = None
    banner_url: Optional[str] = None
    inventory_url: Optional[str] = None
    want_list_url: Optional[str] = Field(default=None, alias="wantlist_url")
    collection_folders_url: Optional[str] = None
    collection_fields_url: Optional[str] = None


class GetUserProfileResponse(UserProfile):
    pass


class EditUserProfileResponse(UserProfile):
    pass


class Submissions(DiscogsModel):
    artists: List[ArtistInformation] = Field(default_factory=list)
    labels: List[LabelInformation] = Field(default_factory=list)
    releases: List[Release] = Field(default_factory=list)


class GetUserSubmissionsResponse(PaginatedResponse[Submissions]):
    items_field = "submission_pages"

    submissions: Submissions = Field(default_factory=Submissions)

    @property
    def submission_pages(self) -> List[Submissions]:
        return [self.submissions]


class GetUserContributionsResponse(PaginatedResponse[Release]):
    items_field = "contributions"

    contributions: List[Release] = Field(default_factory=list)
