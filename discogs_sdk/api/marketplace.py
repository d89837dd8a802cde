"""Marketplace API: inventory, listings, orders, fees and price data."""

from ..connection.verifier import authentication_optional, authentication_required
from ..models.marketplace import (
    AddOrderMessageRequest,
    AddOrderMessageResponse,
    CreateListingRequest,
    CreateListingResponse,
    DeleteListingRequest,
    GetFeeRequest,
    GetFeeResponse,
    GetInventoryRequest,
    GetInventoryResponse,
    GetListingRequest,
    GetListingResponse,
    GetOrderMessagesRequest,
    GetOrderMessagesResponse,
    GetOrderRequest,
    GetOrderResponse,
    GetOrdersRequest,
    GetOrdersResponse,
    GetPriceSuggestionsRequest,
    GetPriceSuggestionsResponse,
    GetReleaseStatisticsRequest,
    GetReleaseStatisticsResponse,
    UpdateListingRequest,
    UpdateOrderRequest,
    UpdateOrderResponse,
)
from .base import ApiBase, encode_path_segment, require_request

MARKETPLACE_PATH = "/marketplace"


class MarketplaceApi(ApiBase):
    """
    Client for the Discogs marketplace endpoints.

    Everything except inventory browsing, listing lookup and release
    statistics requires an authenticated seller or buyer.
    """

    async def get_inventory(self, request: GetInventoryRequest) -> GetInventoryResponse:
        """
        List a user's marketplace inventory.

        Private fields (weight, location, external_id, ...) are only returned
        when the authenticated user owns the inventory.

        Args:
            request: Username, optional status filter, sort and pagination

        Returns:
            Paginated GetInventoryResponse
        """
        require_request(request)
        self.logger.info(
            "discogs_get_inventory",
            username=request.username,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"/users/{encode_path_segment(request.username)}/inventory"
        return await self._get(path, request, GetInventoryResponse)

    async def get_listing(self, request: GetListingRequest) -> GetListingResponse:
        """Get a single marketplace listing."""
        require_request(request)
        self.logger.info("discogs_get_listing", listing_id=request.listing_id)

        path = f"{MARKETPLACE_PATH}/listings/{request.listing_id}"
        return await self._get(path, request, GetListingResponse)

    @authentication_required
    async def update_listing(self, request: UpdateListingRequest) -> None:
        """
        Replace the data of an existing listing.

        Args:
            request: Listing ID plus the full listing body (release, condition, price, ...)

        Raises:
            AuthError: If the client is not authenticated
        """
        require_request(request)
        self.logger.info(
            "discogs_update_listing",
            listing_id=request.listing_id,
            release_id=request.release_id,
        )

        path = f"{MARKETPLACE_PATH}/listings/{request.listing_id}"
        await self._post(path, request)

    @authentication_required
    async def delete_listing(self, request: DeleteListingRequest) -> None:
        require_request(request)
        self.logger.info("discogs_delete_listing", listing_id=request.listing_id)

        path = f"{MARKETPLACE_PATH}/listings/{request.listing_id}"
        await self._delete(path, request)

    @authentication_required
    async def create_listing(self, request: CreateListingRequest) -> CreateListingResponse:
        """
        Create a marketplace listing.

        Args:
            request: Release ID, media condition and price; status defaults to For Sale

        Returns:
            CreateListingResponse with the new listing_id
        """
        require_request(request)
        self.logger.info(
            "discogs_create_listing",
            release_id=request.release_id,
            condition=request.condition.value,
            price=request.price,
        )

        return await self._post(f"{MARKETPLACE_PATH}/listings", request, CreateListingResponse)

    @authentication_required
    async def get_order(self, request: GetOrderRequest) -> GetOrderResponse:
        require_request(request)
        self.logger.info("discogs_get_order", order_id=request.order_id)

        path = f"{MARKETPLACE_PATH}/orders/{encode_path_segment(request.order_id)}"
        return await self._get(path, request, GetOrderResponse)

    @authentication_required
    async def update_order(self, request: UpdateOrderRequest) -> UpdateOrderResponse:
        """
        Change an order's status or shipping amount.

        Valid status transitions are listed in the order's ``next_status``.
        """
        require_request(request)
        self.logger.info(
            "discogs_update_order",
            order_id=request.order_id,
            status=request.status.value if request.status else None,
        )

        path = f"{MARKETPLACE_PATH}/orders/{encode_path_segment(request.order_id)}"
        return await self._post(path, request, UpdateOrderResponse)

    @authentication_required
    async def get_orders(self, request: GetOrdersRequest) -> GetOrdersResponse:
        """
        List the authenticated seller's orders.

        Args:
            request: Optional status, created_after/created_before, archived,
                sort and pagination

        Returns:
            Paginated GetOrdersResponse
        """
        require_request(request)
        self.logger.info(
            "discogs_get_orders",
            status=request.status.value if request.status else None,
            page=request.page,
            per_page=request.per_page,
        )

        return await self._get(f"{MARKETPLACE_PATH}/orders", request, GetOrdersResponse)

    @authentication_required
    async def get_order_messages(self, request: GetOrderMessagesRequest) -> GetOrderMessagesResponse:
        require_request(request)
        self.logger.info(
            "discogs_get_order_messages",
            order_id=request.order_id,
            page=request.page,
        )

        path = f"{MARKETPLACE_PATH}/orders/{encode_path_segment(request.order_id)}/messages"
        return await self._get(path, request, GetOrderMessagesResponse)

    @authentication_required
    async def add_order_message(self, request: AddOrderMessageRequest) -> AddOrderMessageResponse:
        """Post a message to an order, optionally changing its status."""
        require_request(request)
        self.logger.info(
            "discogs_add_order_message",
            order_id=request.order_id,
            status=request.status.value if request.status else None,
        )

        path = f"{MARKETPLACE_PATH}/orders/{encode_path_segment(request.order_id)}/messages"
        return await self._post(path, request, AddOrderMessageResponse)

    @authentication_required
    async def get_fee(self, request: GetFeeRequest) -> GetFeeResponse:
        """
        Calculate the Discogs fee for selling an item at a given price.

        Args:
            request: Price and optional currency (seller's currency when omitted)

        Returns:
            GetFeeResponse with value and currency
        """
        require_request(request)
        self.logger.info(
            "discogs_get_fee",
            price=request.price,
            currency=request.currency.value if request.currency else None,
        )

        path = f"{MARKETPLACE_PATH}/fee/{request.price}"
        if request.currency is not None:
            path = f"{path}/{request.currency.value}"
        return await self._get(path, request, GetFeeResponse)

    @authentication_required
    async def get_price_suggestions(
        self, request: GetPriceSuggestionsRequest
    ) -> GetPriceSuggestionsResponse:
        """
        Get suggested prices for a release, one per media condition.

        Requires seller settings to be filled out on the authenticated account.
        """
        require_request(request)
        self.logger.info("discogs_get_price_suggestions", release_id=request.release_id)

        path = f"{MARKETPLACE_PATH}/price_suggestions/{request.release_id}"
        return await self._get(path, request, GetPriceSuggestionsResponse)

    @authentication_optional
    async def get_release_statistics(
        self, request: GetReleaseStatisticsRequest
    ) -> GetReleaseStatisticsResponse:
        """
        Get marketplace statistics for a release.

        Authenticated users see prices in their configured currency;
        unauthenticated users get USD unless ``curr_abbr`` is set.
        """
        require_request(request)
        self.logger.info("discogs_get_release_statistics", release_id=request.release_id)

        path = f"{MARKETPLACE_PATH}/stats/{request.release_id}"
        return await self._get(path, request, GetReleaseStatisticsResponse)
