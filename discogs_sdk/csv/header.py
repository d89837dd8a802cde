"""Inventory CSV columns and their value validators."""

from enum import Enum
from typing import Callable, Dict, List, Optional, Type

from ..models.types import Condition, SleeveCondition

YES = "Y"
NO = "N"

ValueCheck = Callable[[str], Optional[str]]


class InventoryRecordType(str, Enum):
    """What an inventory CSV file is used for."""

    NEW = "new"
    UPDATE = "update"
    DELETE = "delete"


def _int_check(minimum: int) -> ValueCheck:
    def check(value: str) -> Optional[str]:
        try:
            parsed = int(value)
        except ValueError:
            return "value is not an integer"
        if parsed < minimum:
            return f"value must be >= {minimum}" if minimum == 0 else "value must be > 0"
        return None

    return check


def _price_check(value: str) -> Optional[str]:
    try:
        parsed = float(value)
    except ValueError:
        return "value is not a number"
    if parsed < 0:
        return "value must be >= 0"
    return None


def _enum_check(enum_type: Type[Enum]) -> ValueCheck:
    allowed = [member.value for member in enum_type]

    def check(value: str) -> Optional[str]:
        if value not in allowed:
            return f"value must be one of {allowed}"
        return None

    return check


def _yes_no_check(value: str) -> Optional[str]:
    if value not in (YES, NO):
        return f"value must be {YES} or {NO}"
    return None


def _any_value(value: str) -> Optional[str]:
    return None


class InventoryHeader(str, Enum):
    """
    Columns accepted by the Discogs inventory upload endpoints.

    Values are the literal CSV header names. Required columns reject blank
    values; optional columns accept them.
    """

    RELEASE_ID = "release_id"
    PRICE = "price"
    MEDIA_CONDITION = "media_condition"
    COMMENTS = "comments"
    SLEEVE_CONDITION = "sleeve_condition"
    ACCEPT_OFFER = "accept_offer"
    LOCATION = "location"
    EXTERNAL_ID = "external_id"
    WEIGHT = "weight"
    FORMAT_QUANTITY = "format_quantity"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["InventoryHeader"]:
        """Return the header named ``value``, or None when it is blank or unknown."""
        if value is None or not value.strip():
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None

    @classmethod
    def required_for(cls, record_type: InventoryRecordType) -> List["InventoryHeader"]:
        if record_type is InventoryRecordType.NEW:
            return [cls.RELEASE_ID, cls.PRICE, cls.MEDIA_CONDITION]
        return [cls.RELEASE_ID]

    @property
    def is_required(self) -> bool:
        return self in _ALWAYS_REQUIRED

    def format_message(self, message: str) -> str:
        return f"[{self.value}] {message}"

    def check(self, value: Optional[str]) -> Optional[str]:
        """
        Validate a raw CSV value for this column.

        Returns:
            A ``[header] message`` string describing the problem, or None when valid
        """
        if value is None or not value.strip():
            if self.is_required:
                return self.format_message("value must not be blank")
            return None

        error = _CHECKS[self](value.strip())
        return self.format_message(error) if error else None


_ALWAYS_REQUIRED = frozenset(
    {InventoryHeader.RELEASE_ID, InventoryHeader.PRICE, InventoryHeader.MEDIA_CONDITION}
)

_CHECKS: Dict[InventoryHeader, ValueCheck] = {
    InventoryHeader.RELEASE_ID: _int_check(1),
    InventoryHeader.PRICE: _price_check,
    InventoryHeader.MEDIA_CONDITION: _enum_check(Condition),
    InventoryHeader.COMMENTS: _any_value,
    InventoryHeader.SLEEVE_CONDITION: _enum_check(SleeveCondition),
    InventoryHeader.ACCEPT_OFFER: _yes_no_check,
    InventoryHeader.LOCATION: _any_value,
    InventoryHeader.EXTERNAL_ID: _any_value,
    InventoryHeader.WEIGHT: _int_check(0),
    InventoryHeader.FORMAT_QUANTITY: _int_check(0),
}
