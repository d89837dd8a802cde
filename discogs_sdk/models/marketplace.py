"""Request and response models for the Marketplace API."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, model_validator

from .base import (
    DiscogsModel,
    DiscogsRequest,
    NonBlankStr,
    PaginatedRequest,
    PaginatedResponse,
    PositiveId,
    build_body,
)
from .types import (
    Condition,
    Currency,
    Image,
    LenientCondition,
    LenientListingStatus,
    LenientOrderStatus,
    LenientSleeveCondition,
    ListingStatus,
    OrderStatus,
    OriginalPrice,
    Price,
    ReleaseStats,
    SleeveCondition,
    SortOrder,
)


class InventorySortKey(str, Enum):
    LISTED = "listed"
    PRICE = "price"
    ITEM = "item"
    ARTIST = "artist"
    LABEL = "label"
    CATALOG_NUMBER = "catno"
    AUDIO = "audio"
    STATUS = "status"
    LOCATION = "location"


class OrdersSortKey(str, Enum):
    ID = "id"
    BUYER = "buyer"
    CREATED = "created"
    STATUS = "status"
    LAST_ACTIVITY = "last_activity"


# Requests
class GetInventoryRequest(PaginatedRequest):
    username: NonBlankStr
    status: Optional[ListingStatus] = None
    sort: Optional[InventorySortKey] = None
    sort_order: Optional[SortOrder] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {"status": self.status, "sort": self.sort, "sort_order": self.sort_order}


class GetListingRequest(DiscogsRequest):
    listing_id: PositiveId
    curr_abbr: Optional[Currency] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {"curr_abbr": self.curr_abbr}


class _ListingBody(DiscogsRequest):
    release_id: PositiveId = Field(description="Release being sold")
    condition: Condition = Field(description="Media condition")
    price: float = Field(ge=0, description="Price in the seller's currency")
    status: Optional[ListingStatus] = Field(
        default=None, description="For Sale or Draft (Discogs defaults to For Sale)"
    )
    sleeve_condition: Optional[SleeveCondition] = None
    comments: Optional[str] = None
    allow_offers: Optional[bool] = None
    external_id: Optional[str] = Field(default=None, description="Private seller reference")
    location: Optional[str] = Field(default=None, description="Private storage location")
    weight: Optional[Union[int, str]] = Field(
        default=None, description="Weight in grams, or 'auto'"
    )
    format_quantity: Optional[Union[int, str]] = Field(
        default=None, description="Number of items counted for shipping, or 'auto'"
    )

    def to_body(self) -> Dict[str, Any]:
        return build_body(
            {
                "release_id": self.release_id,
                "condition": self.condition,
                "price": self.price,
                "status": self.status,
                "sleeve_condition": self.sleeve_condition,
                "comments": self.comments,
                "allow_offers": self.allow_offers,
                "external_id": self.external_id,
                "location": self.location,
                "weight": self.weight,
                "format_quantity": self.format_quantity,
            }
        )


class CreateListingRequest(_ListingBody):
    pass


class UpdateListingRequest(_ListingBody):
    listing_id: PositiveId


class DeleteListingRequest(DiscogsRequest):
    listing_id: PositiveId


class GetOrderRequest(DiscogsRequest):
    order_id: NonBlankStr = Field(description="Order ID such as 1-1")


class UpdateOrderRequest(DiscogsRequest):
    order_id: NonBlankStr
    status: Optional[OrderStatus] = None
    shipping: Optional[float] = Field(default=None, ge=0, description="Shipping amount")

    def to_body(self) -> Dict[str, Any]:
        return build_body({"status": self.status, "shipping": self.shipping})


class GetOrdersRequest(PaginatedRequest):
    status: Optional[OrderStatus] = None
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
    archived: Optional[bool] = None
    sort: Optional[OrdersSortKey] = None
    sort_order: Optional[SortOrder] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "created_after": self.created_after,
            "created_before": self.created_before,
            "archived": self.archived,
            "sort": self.sort,
            "sort_order": self.sort_order,
        }


class GetOrderMessagesRequest(PaginatedRequest):
    order_id: NonBlankStr


class AddOrderMessageRequest(DiscogsRequest):
    """Message and/or status change posted to an order."""

    order_id: NonBlankStr
    message: Optional[str] = None
    status: Optional[OrderStatus] = None

    @model_validator(mode="after")
    def validate_content(self) -> "AddOrderMessageRequest":
        if not (self.message and self.message.strip()) and self.status is None:
            raise ValueError("message or status must be provided")
        return self

    def to_body(self) -> Dict[str, Any]:
        return build_body({"message": self.message, "status": self.status})


class GetFeeRequest(DiscogsRequest):
    price: float = Field(gt=0, description="Item price")
    currency: Optional[Currency] = None


class GetPriceSuggestionsRequest(DiscogsRequest):
    release_id: PositiveId


class GetReleaseStatisticsRequest(DiscogsRequest):
    release_id: PositiveId
    curr_abbr: Optional[Currency] = None

    def query_parameters(self) -> Dict[str, Any]:
        return {"curr_abbr": self.curr_abbr}


# Responses
class SellerStats(DiscogsModel):
    rating: Optional[str] = None
    stars: Optional[float] = None
    total: Optional[int] = None


class Seller(DiscogsModel):
    id: Optional[int] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    resource_url: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    uid: Optional[int] = None
    shipping: Optional[str] = None
    payment: Optional[str] = None
    min_order_total: Optional[float] = None
    stats: Optional[SellerStats] = None


class ListingRelease(DiscogsModel):
    """Release summary embedded in a listing."""

    id: Optional[int] = None
    catalog_number: Optional[str] = Field(default=None, alias="catno")
    year: Optional[int] = None
    description: Optional[str] = None
    artist: Optional[str] = None
    title: Optional[str] = None
    format: Optional[str] = None
    label: Optional[str] = None
    thumbnail: Optional[str] = None
    resource_url: Optional[str] = None
    images: List[Image] = Field(default_factory=list)
    stats: Optional[ReleaseStats] = None


class Listing(DiscogsModel):
    id: int
    resource_url: Optional[str] = None
    uri: Optional[str] = None
    status: LenientListingStatus = None
    price: Optional[Price] = None
    original_price: Optional[OriginalPrice] = None
    shipping_price: Optional[Price] = None
    original_shipping_price: Optional[OriginalPrice] = None
    allow_offers: Optional[bool] = None
    offer_submitted: Optional[bool] = None
    condition: LenientCondition = None
    sleeve_condition: LenientSleeveCondition = None
    posted: Optional[datetime] = None
    ships_from: Optional[str] = None
    comments: Optional[str] = None
    seller: Optional[Seller] = None
    release: Optional[ListingRelease] = None
    audio: Optional[bool] = None
    weight: Optional[float] = None
    format_quantity: Optional[Union[int, str]] = None
    external_id: Optional[str] = None
    location: Optional[str] = None
    quantity: Optional[int] = None
    in_cart: Optional[bool] = None


class GetInventoryResponse(PaginatedResponse[Listing]):
    items_field = "listings"

    listings: List[Listing] = Field(default_factory=list)


class GetListingResponse(Listing):
    pass


class CreateListingResponse(DiscogsModel):
    listing_id: int
    resource_url: Optional[str] = None


class OrderItemRelease(DiscogsModel):
    id: Optional[int] = None
    description: Optional[str] = None
    resource_url: Optional[str] = None
    thumbnail: Optional[str] = None


class OrderItem(DiscogsModel):
    id: Optional[int] = None
    release: Optional[OrderItemRelease] = None
    price: Optional[Price] = None
    media_condition: LenientCondition = None
    sleeve_condition: LenientSleeveCondition = None


class ShippingChargeAmount(DiscogsModel):
    currency: Optional[str] = None
    method: Optional[str] = None
    value: Optional[float] = None


class Buyer(DiscogsModel):
    id: Optional[int] = None
    username: Optional[str] = None
    resource_url: Optional[str] = None


class Order(DiscogsModel):
    id: str
    resource_url: Optional[str] = None
    messages_url: Optional[str] = None
    uri: Optional[str] = None
    status: LenientOrderStatus = None
    next_status: List[LenientOrderStatus] = Field(default_factory=list)
    fee: Optional[Price] = None
    created: Optional[datetime] = None
    last_activity: Optional[datetime] = None
    items: List[OrderItem] = Field(default_factory=list)
    shipping: Optional[ShippingChargeAmount] = None
    shipping_address: Optional[str] = None
    additional_instructions: Optional[str] = None
    archived: Optional[bool] = None
    seller: Optional[Seller] = None
    buyer: Optional[Buyer] = None
    total: Optional[Price] = None


class GetOrderResponse(Order):
    pass


class UpdateOrderResponse(Order):
    pass


class GetOrdersResponse(PaginatedResponse[Order]):
    items_field = "orders"

    orders: List[Order] = Field(default_factory=list)


class OrderReference(DiscogsModel):
    id: Optional[str] = None
    resource_url: Optional[str] = None


class OrderRefund(DiscogsModel):
    amount: Optional[float] = None
    order: Optional[OrderReference] = None


class OrderMessage(DiscogsModel):
    subject: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = Field(default=None, description="message, status, shipping, refund_sent, ...")
    timestamp: Optional[datetime] = None
    order: Optional[OrderReference] = None
    refund: Optional[OrderRefund] = None
    from_user: Optional[Buyer] = Field(default=None, alias="from")
    status_id: Optional[int] = None


class GetOrderMessagesResponse(PaginatedResponse[OrderMessage]):
    items_field = "messages"

    messages: List[OrderMessage] = Field(default_factory=list)


class AddOrderMessageResponse(OrderMessage):
    pass


class GetFeeResponse(Price):
    pass


class GetPriceSuggestionsResponse(DiscogsModel):
    """Suggested prices keyed by media condition."""

    suggestions: Dict[Condition, Price] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def wrap_condition_map(cls, data: Any) -> Any:
        # The endpoint returns the condition map as the top-level object
        if isinstance(data, dict) and "suggestions" not in data:
            known = {condition.value for condition in Condition}
            return {"suggestions": {k: v for k, v in data.items() if k in known}}
        return data

    def for_condition(self, condition: Condition) -> Optional[Price]:
        return self.suggestions.get(condition)


class GetReleaseStatisticsResponse(DiscogsModel):
    lowest_price: Optional[Price] = None
    num_for_sale: Optional[int] = None
    blocked_from_sale: Optional[bool] = None
