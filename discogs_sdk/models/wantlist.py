"""Request and response models for the User Want List API."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import (
    DiscogsModel,
    DiscogsRequest,
    NonBlankStr,
    PaginatedRequest,
    PaginatedResponse,
    PositiveId,
)
from .types import BasicInformation


class GetWantListRequest(PaginatedRequest):
    username: NonBlankStr


class _WantRequest(DiscogsRequest):
    username: NonBlankStr
    release_id: PositiveId


class AddToWantListRequest(_WantRequest):
    notes: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=0, le=5, description="0 clears the rating")

    def query_parameters(self) -> Dict[str, Any]:
        return {"notes": self.notes, "rating": self.rating}


class EditReleaseInWantListRequest(AddToWantListRequest):
    pass


class DeleteFromWantListRequest(_WantRequest):
    pass


class Want(DiscogsModel):
    id: int
    rating: Optional[int] = None
    notes: Optional[str] = None
    date_added: Optional[datetime] = None
    resource_url: Optional[str] = None
    basic_information: Optional[BasicInformation] = None


class GetWantListResponse(PaginatedResponse[Want]):
    items_field = "wants"

    wants: List[Want] = Field(default_factory=list)


class AddToWantListResponse(Want):
    pass


class EditReleaseInWantListResponse(Want):
    pass
