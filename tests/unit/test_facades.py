"""Tests shared by every API facade."""

import pytest
import respx

from discogs_sdk.api import (
    DatabaseApi,
    InventoryExportApi,
    InventoryUploadApi,
    MarketplaceApi,
    UserCollectionApi,
    UserIdentityApi,
    UserListsApi,
    UserWantListApi,
)

REQUEST_METHODS = [
    (UserCollectionApi, "get_folders"),
    (UserCollectionApi, "create_folder"),
    (UserCollectionApi, "get_folder"),
    (UserCollectionApi, "rename_folder"),
    (UserCollectionApi, "delete_folder"),
    (UserCollectionApi, "get_collection_items_by_release"),
    (UserCollectionApi, "get_collection_items_by_folder"),
    (UserCollectionApi, "add_to_folder"),
    (UserCollectionApi, "change_release_rating"),
    (UserCollectionApi, "move_release"),
    (UserCollectionApi, "delete_instance"),
    (UserCollectionApi, "get_custom_fields"),
    (UserCollectionApi, "edit_instance_field"),
    (UserCollectionApi, "get_collection_value"),
    (DatabaseApi, "get_release"),
    (DatabaseApi, "get_user_release_rating"),
    (DatabaseApi, "update_user_release_rating"),
    (DatabaseApi, "delete_user_release_rating"),
    (DatabaseApi, "get_community_release_rating"),
    (DatabaseApi, "get_master_release"),
    (DatabaseApi, "get_master_release_versions"),
    (DatabaseApi, "get_artist"),
    (DatabaseApi, "get_artist_releases"),
    (DatabaseApi, "get_label"),
    (DatabaseApi, "get_label_releases"),
    (DatabaseApi, "search"),
    (UserIdentityApi, "get_user_profile"),
    (UserIdentityApi, "edit_user_profile"),
    (UserIdentityApi, "get_user_submissions"),
    (UserIdentityApi, "get_user_contributions"),
    (InventoryExportApi, "get_recent_exports"),
    (InventoryExportApi, "get_export"),
    (InventoryExportApi, "download_export"),
    (InventoryUploadApi, "add_inventory"),
    (InventoryUploadApi, "change_inventory"),
    (InventoryUploadApi, "delete_inventory"),
    (InventoryUploadApi, "get_recent_uploads"),
    (InventoryUploadApi, "get_upload"),
    (UserListsApi, "get_user_lists"),
    (UserListsApi, "get_list"),
    (MarketplaceApi, "get_inventory"),
    (MarketplaceApi, "get_listing"),
    (MarketplaceApi, "update_listing"),
    (MarketplaceApi, "delete_listing"),
    (MarketplaceApi, "create_listing"),
    (MarketplaceApi, "get_order"),
    (MarketplaceApi, "update_order"),
    (MarketplaceApi, "get_orders"),
    (MarketplaceApi, "get_order_messages"),
    (MarketplaceApi, "add_order_message"),
    (MarketplaceApi, "get_fee"),
    (MarketplaceApi, "get_price_suggestions"),
    (MarketplaceApi, "get_release_statistics"),
    (UserWantListApi, "get_want_list"),
    (UserWantListApi, "add_to_want_list"),
    (UserWantListApi, "edit_release_in_want_list"),
    (UserWantListApi, "delete_from_want_list"),
]


class TestNoneRequest:
    """Every request-taking facade method rejects None before any I/O."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "api_type,method_name",
        REQUEST_METHODS,
        ids=[f"{api_type.__name__}.{name}" for api_type, name in REQUEST_METHODS],
    )
    async def test_none_request_rejected(self, connection, api_type, method_name):
        """Test that passing None raises TypeError and sends nothing."""
        with respx.mock(assert_all_called=False) as respx_mock:
            route = respx_mock.route()

            method = getattr(api_type(connection), method_name)
            with pytest.raises(TypeError, match="request must not be None"):
                await method(None)

        assert route.call_count == 0

    def test_every_request_method_listed(self):
        """Test that the list above covers each public facade coroutine."""
        listed = set(REQUEST_METHODS)
        no_request = {(UserIdentityApi, "get_identity"), (InventoryExportApi, "export_inventory")}

        for api_type in {api_type for api_type, _ in REQUEST_METHODS}:
            for name in dir(api_type):
                if name.startswith("_") or not callable(getattr(api_type, name)):
                    continue
                if (api_type, name) in no_request:
                    continue
                assert (api_type, name) in listed, f"{api_type.__name__}.{name}"
