"""A single inventory CSV row."""

from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import ValidationError
from ..models.types import Condition, SleeveCondition
from .header import InventoryHeader, InventoryRecordType


@dataclass(frozen=True)
class InventoryRecord:
    """One listing in an inventory upload file.

    Discogs-specific rules (positive release IDs, Y/N offers, required
    columns per record type) are checked by ``validate`` rather than on
    construction, so every problem in a record is reported at once.

    Attributes:
        release_id: Release being listed
        price: Price in the seller's currency
        media_condition: Media grade
        sleeve_condition: Sleeve grade
        comments: Public comments
        accept_offer: Y or N
        location: Private storage location
        external_id: Private seller reference
        weight: Weight in grams
        format_quantity: Number of items counted for shipping

    Example:
        >>> record = InventoryRecord(
        ...     release_id=249504,
        ...     price=25.0,
        ...     media_condition=Condition.VERY_GOOD_PLUS,
        ...     accept_offer="Y",
        ... )
        >>> record.validate(InventoryRecordType.NEW)
    """

    release_id: int
    price: Optional[float] = None
    media_condition: Optional[Condition] = None
    sleeve_condition: Optional[SleeveCondition] = None
    comments: Optional[str] = None
    accept_offer: Optional[str] = None
    location: Optional[str] = None
    external_id: Optional[str] = None
    weight: Optional[int] = None
    format_quantity: Optional[int] = None

    def __post_init__(self) -> None:
        if self.release_id is None:
            raise TypeError("release_id must not be None")

    def defined_headers(self) -> List[InventoryHeader]:
        """Return the columns this record has values for, in canonical order."""
        return [
            header
            for header in InventoryHeader
            if header is InventoryHeader.RELEASE_ID or getattr(self, header.value) is not None
        ]

    def value_for(self, header: InventoryHeader) -> str:
        """Render the CSV cell for ``header`` (empty string when unset)."""
        value = getattr(self, header.value)
        if value is None:
            return ""
        if isinstance(value, (Condition, SleeveCondition)):
            return value.value
        return str(value)

    def validate(self, record_type: InventoryRecordType) -> None:
        """
        Check the record against the column rules for ``record_type``.

        Raises:
            ValidationError: With one ``[header] message`` entry per problem
        """
        defined = self.defined_headers()
        missing = [h for h in InventoryHeader.required_for(record_type) if h not in defined]
        if missing:
            raise ValidationError(
                f"Record is missing required values for {record_type.name}",
                [header.format_message("value is required") for header in missing],
            )

        errors = []
        for header in defined:
            error = header.check(self.value_for(header))
            if error:
                errors.append(error)

        if errors:
            raise ValidationError("Record failed validation", errors)

    def to_csv_row(
        self, headers: List[InventoryHeader], record_type: InventoryRecordType
    ) -> List[str]:
        """
        Render the record as a row in the column order of ``headers``.

        Raises:
            ValueError: If ``headers`` lacks a column required for ``record_type``
        """
        missing = [h for h in InventoryHeader.required_for(record_type) if h not in headers]
        if missing:
            raise ValueError(
                f"headers are missing required columns for {record_type.name}: "
                f"{[h.value for h in missing]}"
            )
        return [self.value_for(header) for header in headers]

    def __str__(self) -> str:
        return ",".join(self.value_for(header) for header in self.defined_headers())
