"""Request and response models for the User Collection API."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import (
    DiscogsModel,
    DiscogsRequest,
    NonBlankStr,
    NonNegativeId,
    PaginatedRequest,
    PaginatedResponse,
    PositiveId,
    Rating,
    build_body,
)
from .types import BasicInformation, Note, SortOrder


class CollectionSortKey(str, Enum):
    LABEL = "label"
    ARTIST = "artist"
    TITLE = "title"
    CATALOG_NUMBER = "catno"
    FORMAT = "format"
    RATING = "rating"
    ADDED = "added"
    YEAR = "year"


# Requests
class GetFoldersRequest(DiscogsRequest):
    username: NonBlankStr


class CreateFolderRequest(DiscogsRequest):
    username: NonBlankStr
    name: NonBlankStr

    def to_body(self) -> Dict[str, Any]:
        return build_body({"name": self.name})


class GetFolderRequest(DiscogsRequest):
    username: NonBlankStr
    folder_id: NonNegativeId = Field(description="0 is the 'All' folder")


class RenameFolderRequest(DiscogsRequest):
    username: NonBlankStr
    folder_id: NonNegativeId
    name: NonBlankStr

    def to_body(self) -> Dict[str, Any]:
        return build_body({"name": self.name})


class DeleteFolderRequest(DiscogsRequest):
    """Only empty folders can be deleted."""

    username: NonBlankStr
    folder_id: NonNegativeId


class GetCollectionItemsByReleaseRequest(PaginatedRequest):
    username: NonBlankStr
    release_id: PositiveId


class GetCollectionItemsByFolderRequest(PaginatedRequest):
    username: NonBlankStr
    folder_id: NonNegativeId
    sort: Optional[CollectionSortKey] = None
    sort_order: Optional[SortOrder] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {"sort": self.sort, "sort_order": self.sort_order}


class AddToFolderRequest(DiscogsRequest):
    username: NonBlankStr
    folder_id: NonNegativeId
    release_id: PositiveId


class _InstanceRequest(DiscogsRequest):
    username: NonBlankStr
    folder_id: NonNegativeId
    release_id: PositiveId
    instance_id: PositiveId


class ChangeReleaseRatingRequest(_InstanceRequest):
    rating: Rating

    def to_body(self) -> Dict[str, Any]:
        return build_body({"rating": self.rating})


class MoveReleaseRequest(_InstanceRequest):
    destination_folder_id: NonNegativeId

    def to_body(self) -> Dict[str, Any]:
        return build_body({"folder_id": self.destination_folder_id})


class DeleteInstanceRequest(_InstanceRequest):
    pass


class GetCustomFieldsRequest(DiscogsRequest):
    username: NonBlankStr


class EditInstanceFieldRequest(_InstanceRequest):
    field_id: PositiveId
    value: str = Field(description="New value; must match a dropdown option for dropdown fields")

    def query_parameters(self) -> Dict[str, Any]:
        return {"value": self.value}


class GetCollectionValueRequest(DiscogsRequest):
    username: NonBlankStr


# Responses
class Folder(DiscogsModel):
    id: int
    name: Optional[str] = None
    count: Optional[int] = None
    resource_url: Optional[str] = None


class GetFoldersResponse(DiscogsModel):
    folders: List[Folder] = Field(default_factory=list)


class CreateFolderResponse(Folder):
    pass


class GetFolderResponse(Folder):
    pass


class RenameFolderResponse(Folder):
    pass


class CollectionRelease(DiscogsModel):
    """One instance of a release in a user's collection."""

    id: Optional[int] = None
    instance_id: Optional[int] = None
    folder_id: Optional[int] = None
    rating: Optional[int] = None
    date_added: Optional[datetime] = None
    basic_information: Optional[BasicInformation] = None
    notes: List[Note] = Field(default_factory=list)
    resource_url: Optional[str] = None


class GetCollectionItemsByReleaseResponse(PaginatedResponse[CollectionRelease]):
    items_field = "releases"

    releases: List[CollectionRelease] = Field(default_factory=list)


class GetCollectionItemsByFolderResponse(PaginatedResponse[CollectionRelease]):
    items_field = "releases"

    releases: List[CollectionRelease] = Field(default_factory=list)


class AddToFolderResponse(DiscogsModel):
    instance_id: int
    resource_url: Optional[str] = None


class CustomField(DiscogsModel):
    """User-defined collection field (dropdown or textarea)."""

    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    options: List[str] = Field(default_factory=list)
    position: Optional[int] = None
    lines: Optional[int] = None
    is_public: Optional[bool] = Field(default=None, alias="public")


class GetCustomFieldsResponse(DiscogsModel):
    fields: List[CustomField] = Field(default_factory=list)


class GetCollectionValueResponse(DiscogsModel):
    """Formatted collection value estimates, e.g. "$25.00"."""

    minimum: Optional[str] = None
    median: Optional[str] = None
    maximum: Optional[str] = None
