"""Base classes for Discogs request and response models."""

from datetime import date, datetime
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    AsyncIterator,
    ClassVar,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)

import structlog
from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, PrivateAttr

if TYPE_CHECKING:
    from ..connection.connection import DiscogsConnection

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Enum)
ItemT = TypeVar("ItemT")
P = TypeVar("P", bound="PaginatedResponse")


def _require_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_require_not_blank)]
PositiveId = Annotated[int, Field(gt=0)]
NonNegativeId = Annotated[int, Field(ge=0)]
Rating = Annotated[int, Field(ge=1, le=5)]


def lenient_enum(enum_type: Type[E]) -> Any:
    """
    Build an annotated optional enum type that reads unknown values as None.

    Discogs adds new status strings from time to time; a single unrecognized
    value should not make an entire listing or order unreadable.
    """

    def _coerce(value: Any) -> Any:
        if value is None or isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError:
            logger.warning(
                "discogs_unknown_enum_value",
                enum=enum_type.__name__,
                value=value,
            )
            return None

    return Annotated[Optional[enum_type], BeforeValidator(_coerce)]


def render_query_value(value: Any) -> Optional[str]:
    """Render a query parameter value, returning None for null or blank values."""
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    rendered = str(value)
    return rendered if rendered.strip() else None


def build_body(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Render a JSON body, dropping None values and unwrapping enums."""
    body: Dict[str, Any] = {}
    for name, value in fields.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        body[name] = value
    return body


class DiscogsModel(BaseModel):
    """Base for entity and response models parsed from Discogs JSON."""

    model_config = {
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }


class DiscogsRequest(BaseModel):
    """
    Base for per-operation request parameters.

    Fields are validated when the request is constructed, so an invalid
    request can never reach the network. Subclasses list their query
    parameters in ``query_parameters`` and their JSON body in ``to_body``;
    path parameters are read directly by the facade building the URL.
    """

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    def query_parameters(self) -> Dict[str, Any]:
        """Return query parameter names mapped to raw field values."""
        return {}

    def populate_query_parameters(self, params: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Add this request's query parameters to ``params``.

        None and blank values are skipped; enums render as their values.

        Args:
            params: Mapping to fill (a new dict when omitted)

        Returns:
            The populated mapping
        """
        params = {} if params is None else params
        for name, value in self.query_parameters().items():
            rendered = render_query_value(value)
            if rendered is not None:
                params[name] = rendered
        return params

    def to_body(self) -> Optional[Dict[str, Any]]:
        """Return the JSON body, or None for requests without one."""
        return None


class PaginatedRequest(DiscogsRequest):
    """Request that accepts ``page`` and ``per_page``."""

    page: Optional[int] = Field(default=None, ge=1, description="Page number (1-based)")
    per_page: Optional[int] = Field(
        default=None, ge=1, le=100, description="Items per page (max 100)"
    )

    def populate_query_parameters(self, params: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        params = super().populate_query_parameters(params)
        if self.page is not None:
            params["page"] = str(self.page)
        if self.per_page is not None:
            params["per_page"] = str(self.per_page)
        return params


class Pagination(DiscogsModel):
    """Pagination envelope returned with list responses."""

    page: int = Field(description="Current page number")
    pages: int = Field(description="Total number of pages")
    per_page: int = Field(description="Results per page")
    items: int = Field(description="Total number of items")
    urls: Dict[str, str] = Field(
        default_factory=dict, description="URLs for first/prev/next/last pages"
    )

    @property
    def has_next(self) -> bool:
        return bool(self.urls.get("next"))

    @property
    def has_previous(self) -> bool:
        return bool(self.urls.get("prev"))


async def fetch_page(
    connection: Optional["DiscogsConnection"],
    pagination: Pagination,
    key: str,
    response_type: Type[P],
) -> Optional[P]:
    """
    Fetch the page referenced by ``pagination.urls[key]``.

    Args:
        connection: Connection that produced the current page
        pagination: Pagination envelope of the current page
        key: One of "next", "prev", "first", "last"
        response_type: Response model of the page

    Returns:
        The requested page, or None when the envelope has no such URL

    Raises:
        RuntimeError: If the response was not produced by a connection
    """
    url = pagination.urls.get(key)
    if not url:
        return None
    if connection is None:
        raise RuntimeError("Response is not bound to a connection")
    return await connection.get(url, response_type)


class PaginatedResponse(DiscogsModel, Generic[ItemT]):
    """
    Response carrying a pagination envelope and one list of items.

    Subclasses name their item list in ``items_field``; ``entries`` returns
    it regardless of the JSON key Discogs uses for that endpoint.
    """

    items_field: ClassVar[str] = "items"

    pagination: Pagination = Field(description="Pagination envelope")

    _connection: Optional[Any] = PrivateAttr(default=None)

    def bind_connection(self, connection: "DiscogsConnection") -> None:
        self._connection = connection

    @property
    def entries(self) -> List[ItemT]:
        return list(getattr(self, self.items_field) or [])

    @property
    def has_next(self) -> bool:
        return self.pagination.has_next

    @property
    def has_previous(self) -> bool:
        return self.pagination.has_previous

    async def next_page(self: P) -> Optional[P]:
        return await fetch_page(self._connection, self.pagination, "next", type(self))

    async def previous_page(self: P) -> Optional[P]:
        return await fetch_page(self._connection, self.pagination, "prev", type(self))

    async def first_page(self: P) -> Optional[P]:
        return await fetch_page(self._connection, self.pagination, "first", type(self))

    async def last_page(self: P) -> Optional[P]:
        return await fetch_page(self._connection, self.pagination, "last", type(self))

    async def iter_pages(self: P) -> AsyncIterator[P]:
        """Yield this page followed by every subsequent page."""
        page: Optional[P] = self
        while page is not None:
            yield page
            page = await page.next_page()
