"""Enumerations and entity models shared across Discogs API areas."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DiscogsModel, lenient_enum


# Enumerations
class Currency(str, Enum):
    """Currencies supported by the Discogs marketplace."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"
    CHF = "CHF"
    MXN = "MXN"
    BRL = "BRL"
    NZD = "NZD"
    SEK = "SEK"
    ZAR = "ZAR"


class Condition(str, Enum):
    """Media condition grades."""

    MINT = "Mint (M)"
    NEAR_MINT = "Near Mint (NM or M-)"
    VERY_GOOD_PLUS = "Very Good Plus (VG+)"
    VERY_GOOD = "Very Good (VG)"
    GOOD_PLUS = "Good Plus (G+)"
    GOOD = "Good (G)"
    FAIR = "Fair (F)"
    POOR = "Poor (P)"


class SleeveCondition(str, Enum):
    """Sleeve condition grades: media grades plus sleeve-only values."""

    MINT = "Mint (M)"
    NEAR_MINT = "Near Mint (NM or M-)"
    VERY_GOOD_PLUS = "Very Good Plus (VG+)"
    VERY_GOOD = "Very Good (VG)"
    GOOD_PLUS = "Good Plus (G+)"
    GOOD = "Good (G)"
    FAIR = "Fair (F)"
    POOR = "Poor (P)"
    GENERIC = "Generic"
    NOT_GRADED = "Not Graded"
    NO_COVER = "No Cover"


class ListingStatus(str, Enum):
    FOR_SALE = "For Sale"
    DRAFT = "Draft"
    EXPIRED = "Expired"
    SOLD = "Sold"
    DELETED = "Deleted"


class OrderStatus(str, Enum):
    NEW_ORDER = "New Order"
    BUYER_CONTACTED = "Buyer Contacted"
    INVOICE_SENT = "Invoice Sent"
    PAYMENT_PENDING = "Payment Pending"
    PAYMENT_RECEIVED = "Payment Received"
    IN_PROGRESS = "In Progress"
    SHIPPED = "Shipped"
    REFUND_SENT = "Refund Sent"
    CANCELLED_NON_PAYING_BUYER = "Cancelled (Non-Paying Buyer)"
    CANCELLED_ITEM_UNAVAILABLE = "Cancelled (Item Unavailable)"
    CANCELLED_PER_BUYERS_REQUEST = "Cancelled (Per Buyer's Request)"
    MERGED = "Merged"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchType(str, Enum):
    RELEASE = "release"
    MASTER = "master"
    ARTIST = "artist"
    LABEL = "label"


LenientCurrency = lenient_enum(Currency)
LenientCondition = lenient_enum(Condition)
LenientSleeveCondition = lenient_enum(SleeveCondition)
LenientListingStatus = lenient_enum(ListingStatus)
LenientOrderStatus = lenient_enum(OrderStatus)
LenientSearchType = lenient_enum(SearchType)


# Shared entities
class Artist(DiscogsModel):
    """Artist credit as it appears on a release."""

    id: Optional[int] = Field(default=None, description="Discogs artist ID")
    name: Optional[str] = Field(default=None, description="Artist name")
    anv: Optional[str] = Field(
        default=None, description="Artist name variation on this release"
    )
    join: Optional[str] = Field(
        default=None, description="Join phrase connecting to next artist"
    )
    role: Optional[str] = Field(default=None, description="Artist role on this release")
    tracks: Optional[str] = Field(
        default=None, description="Tracks this artist appears on"
    )
    resource_url: Optional[str] = Field(
        default=None, description="API URL for artist details"
    )
    thumbnail_url: Optional[str] = Field(
        default=None, description="Artist thumbnail image URL"
    )


class Image(DiscogsModel):
    type: Optional[str] = Field(default=None, description="primary or secondary")
    uri: Optional[str] = None
    uri150: Optional[str] = None
    resource_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Video(DiscogsModel):
    uri: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, description="Duration in seconds")
    embed: Optional[bool] = None


class TrackInformation(DiscogsModel):
    """A single entry of a release tracklist."""

    position: Optional[str] = Field(default=None, description="Track position (A1, 1, etc.)")
    type_: Optional[str] = Field(
        default=None, description="track, heading or index"
    )
    title: Optional[str] = Field(default=None, description="Track title")
    duration: Optional[str] = Field(default=None, description="Duration as mm:ss")
    artists: List[Artist] = Field(default_factory=list)
    extraartists: List[Artist] = Field(default_factory=list)


class Format(DiscogsModel):
    name: Optional[str] = Field(default=None, description="Format name (Vinyl, CD, ...)")
    qty: Optional[str] = Field(default=None, description="Quantity of this format")
    text: Optional[str] = None
    descriptions: List[str] = Field(default_factory=list)


class CatalogEntity(DiscogsModel):
    """Label, series or company credit on a release."""

    id: Optional[int] = None
    name: Optional[str] = None
    catalog_number: Optional[str] = Field(default=None, alias="catno")
    entity_type: Optional[str] = None
    entity_type_name: Optional[str] = None
    resource_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class ReleaseIdentifier(DiscogsModel):
    type: Optional[str] = Field(default=None, description="Barcode, Matrix / Runout, ...")
    value: Optional[str] = None
    description: Optional[str] = None


class CommunityMember(DiscogsModel):
    username: Optional[str] = None
    resource_url: Optional[str] = None


class CommunityRating(DiscogsModel):
    average: Optional[float] = None
    count: Optional[int] = None


class Community(DiscogsModel):
    """Community statistics for a release."""

    contributors: List[CommunityMember] = Field(default_factory=list)
    data_quality: Optional[str] = None
    have: Optional[int] = None
    want: Optional[int] = None
    rating: Optional[CommunityRating] = None
    status: Optional[str] = None
    submitter: Optional[CommunityMember] = None


class Price(DiscogsModel):
    """A monetary amount."""

    currency: LenientCurrency = None
    value: Optional[float] = None


class OriginalPrice(DiscogsModel):
    """Listing price in the seller's currency, optionally converted."""

    currency: LenientCurrency = Field(default=None, alias="curr_abbr")
    currency_id: Optional[int] = Field(default=None, alias="curr_id")
    formatted: Optional[str] = None
    value: Optional[float] = None
    converted: Optional["OriginalPrice"] = None


class Stats(DiscogsModel):
    """Collection and want list counts for a release."""

    in_collection: Optional[int] = None
    in_want_list: Optional[int] = Field(default=None, alias="in_wantlist")


class ReleaseStats(DiscogsModel):
    """Community and user-specific counts attached to a release summary."""

    community: Optional[Stats] = None
    user: Optional[Stats] = None


class ReleaseContentBase(DiscogsModel):
    """Fields shared by releases and master releases."""

    id: int = Field(description="Discogs ID")
    title: Optional[str] = None
    year: Optional[int] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    artists: List[Artist] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    videos: List[Video] = Field(default_factory=list)
    tracklist: List[TrackInformation] = Field(default_factory=list)
    data_quality: Optional[str] = None
    date_added: Optional[datetime] = None
    date_changed: Optional[datetime] = None
    estimated_weight: Optional[int] = None
    lowest_price: Optional[float] = None
    num_for_sale: Optional[int] = None
    thumb: Optional[str] = None


class Release(ReleaseContentBase):
    """A specific physical or digital release."""

    artists_sort: Optional[str] = None
    community: Optional[Community] = None
    companies: List[CatalogEntity] = Field(default_factory=list)
    country: Optional[str] = None
    extra_artists: List[Artist] = Field(default_factory=list, alias="extraartists")
    format_quantity: Optional[int] = None
    formats: List[Format] = Field(default_factory=list)
    identifiers: List[ReleaseIdentifier] = Field(default_factory=list)
    is_blocked_from_sale: Optional[bool] = Field(default=None, alias="blocked_from_sale")
    is_offensive: Optional[bool] = None
    labels: List[CatalogEntity] = Field(default_factory=list)
    master_id: Optional[int] = None
    master_url: Optional[str] = None
    notes: Optional[str] = None
    # Discogs uses "00" for unknown month/day, so this is not a date
    released: Optional[str] = None
    released_formatted: Optional[str] = None
    series: List[CatalogEntity] = Field(default_factory=list)
    status: Optional[str] = None


class BasicInformation(DiscogsModel):
    """Release summary embedded in collection, want list and order items."""

    id: int
    master_id: Optional[int] = None
    master_url: Optional[str] = None
    resource_url: Optional[str] = None
    title: Optional[str] = None
    year: Optional[int] = None
    thumb: Optional[str] = None
    cover_image: Optional[str] = None
    formats: List[Format] = Field(default_factory=list)
    labels: List[CatalogEntity] = Field(default_factory=list)
    artists: List[Artist] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)


class Note(DiscogsModel):
    field_id: Optional[int] = None
    value: Optional[str] = None
