"""Request, response and entity models for the Discogs API."""

from . import collection, database, identity, inventory, lists, marketplace, wantlist
from .base import (
    DiscogsModel,
    DiscogsRequest,
    PaginatedRequest,
    PaginatedResponse,
    Pagination,
    fetch_page,
)
from .types import (
    Artist,
    BasicInformation,
    CatalogEntity,
    Community,
    Condition,
    Currency,
    Format,
    Image,
    ListingStatus,
    OrderStatus,
    OriginalPrice,
    Price,
    Release,
    SearchType,
    SleeveCondition,
    SortOrder,
    TrackInformation,
    Video,
)

__all__ = [
    # Area modules
    "collection",
    "database",
    "identity",
    "inventory",
    "lists",
    "marketplace",
    "wantlist",
    # Base
    "DiscogsModel",
    "DiscogsRequest",
    "PaginatedRequest",
    "PaginatedResponse",
    "Pagination",
    "fetch_page",
    # Types
    "Artist",
    "BasicInformation",
    "CatalogEntity",
    "Community",
    "Condition",
    "Currency",
    "Format",
    "Image",
    "ListingStatus",
    "OrderStatus",
    "OriginalPrice",
    "Price",
    "Release",
    "SearchType",
    "SleeveCondition",
    "SortOrder",
    "TrackInformation",
    "Video",
]
