"""API facades, one per Discogs API area."""

from .base import ApiBase
from .collection import UserCollectionApi
from .database import DatabaseApi
from .identity import UserIdentityApi
from .inventory_export import InventoryExportApi
from .inventory_upload import InventoryUploadApi
from .lists import UserListsApi
from .marketplace import MarketplaceApi
from .wantlist import UserWantListApi

__all__ = [
    "ApiBase",
    "DatabaseApi",
    "InventoryExportApi",
    "InventoryUploadApi",
    "MarketplaceApi",
    "UserCollectionApi",
    "UserIdentityApi",
    "UserListsApi",
    "UserWantListApi",
]
