"""Request and response models for the User Lists API."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import (
    DiscogsModel,
    DiscogsRequest,
    NonBlankStr,
    PaginatedRequest,
    PaginatedResponse,
    PositiveId,
)


class GetUserListsRequest(PaginatedRequest):
    username: NonBlankStr


class GetListRequest(DiscogsRequest):
    list_id: PositiveId


class UserListSummary(DiscogsModel):
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    is_public: Optional[bool] = Field(default=None, alias="public")
    date_added: Optional[datetime] = None
    date_changed: Optional[datetime] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None


class GetUserListsResponse(PaginatedResponse[UserListSummary]):
    items_field = "lists"

    lists: List[UserListSummary] = Field(default_factory=list)


class UserListItem(DiscogsModel):
    """A release, master, artist or label entry on a list."""

    id: Optional[int] = None
    type: Optional[str] = None
    display_title: Optional[str] = None
    comment: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    image_url: Optional[str] = None


class ListOwner(DiscogsModel):
    id: Optional[int] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    resource_url: Optional[str] = None


class UserList(UserListSummary):
    image_url: Optional[str] = None
    user: Optional[ListOwner] = None
    items: List[UserListItem] = Field(default_factory=list)


class GetListResponse(UserList):
    pass
