"""Validates existing inventory CSV files before upload."""

import csv
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import structlog

from ..exceptions import ValidationError
from .header import InventoryHeader, InventoryRecordType

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CsvValidationError:
    """
    One problem found in a CSV file.

    Attributes:
        row: 1-based data row, or 0 for the header row
        column: Header name of the offending column
        message: ``[header] message`` description
        value: Raw cell value, when there is one
    """

    row: int
    column: str
    message: str
    value: Optional[str] = None


class InventoryCsvValidator:
    """
    Check an inventory CSV file against the rules for a record type.

    Header problems (unknown columns, missing required columns) are reported
    on row 0 and stop validation, since cell values cannot be trusted to line
    up. Otherwise every cell of every recognized column is checked.

    Example:
        >>> validator = InventoryCsvValidator(InventoryRecordType.NEW, max_errors=50)
        >>> for error in validator.validate(Path("inventory.csv")):
        ...     print(error.row, error.message)
    """

    def __init__(
        self,
        record_type: InventoryRecordType = InventoryRecordType.NEW,
        max_errors: Optional[int] = None,
    ):
        if max_errors is not None and max_errors < 1:
            raise ValueError("max_errors must be >= 1")
        self.record_type = record_type
        self.max_errors = max_errors

    def validate(self, csv_file: Path) -> List[CsvValidationError]:
        """
        Validate ``csv_file``.

        Args:
            csv_file: CSV file to check

        Returns:
            Problems found, in file order (empty when the file is valid)

        Raises:
            ValueError: If the file does not exist or is not readable
        """
        csv_file = Path(csv_file)
        if not csv_file.is_file():
            raise ValueError(f"csv_file does not exist: {csv_file}")
        if not os.access(csv_file, os.R_OK):
            raise ValueError(f"csv_file must be readable: {csv_file}")

        with open(csv_file, "r", newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            header_row = next(reader, [])

            errors = self._check_headers(header_row)
            if not errors:
                errors = self._scan(reader, [InventoryHeader(h.strip()) for h in header_row])

        logger.info(
            "inventory_csv_validated",
            path=str(csv_file),
            record_type=self.record_type.value,
            error_count=len(errors),
        )
        return errors

    def validate_or_raise(self, csv_file: Path) -> None:
        """
        Validate ``csv_file`` and raise when any problem is found.

        Raises:
            ValidationError: With one ``[header] message`` entry per problem
        """
        errors = self.validate(csv_file)
        if errors:
            raise ValidationError(
                f"File [{Path(csv_file).name}] failed validation",
                [error.message for error in errors],
            )

    def _check_headers(self, header_row: List[str]) -> List[CsvValidationError]:
        errors = []
        names = [value.strip() for value in header_row]

        for header in InventoryHeader.required_for(self.record_type):
            if header.value not in names:
                errors.append(
                    CsvValidationError(
                        row=0,
                        column=header.value,
                        message=header.format_message(
                            f"column is required for {self.record_type.name}"
                        ),
                    )
                )

        for value in header_row:
            if InventoryHeader.from_value(value) is None:
                errors.append(
                    CsvValidationError(
                        row=0,
                        column=value,
                        message=f"[{value}] unrecognized header",
                        value=value,
                    )
                )

        return self._limit(errors)

    def _scan(self, reader, headers: List[InventoryHeader]) -> List[CsvValidationError]:
        errors: List[CsvValidationError] = []
        for row_number, row in enumerate(reader, start=1):
            if not any(cell.strip() for cell in row):
                continue

            for col, header in enumerate(headers):
                value = row[col] if col < len(row) else ""
                message = header.check(value)
                if message:
                    errors.append(
                        CsvValidationError(
                            row=row_number,
                            column=header.value,
                            message=message,
                            value=value,
                        )
                    )
                    if self._reached_limit(errors):
                        return errors
        return errors

    def _reached_limit(self, errors: List[CsvValidationError]) -> bool:
        return self.max_errors is not None and len(errors) >= self.max_errors

    def _limit(self, errors: List[CsvValidationError]) -> List[CsvValidationError]:
        if self.max_errors is None:
            return errors
        return errors[: self.max_errors]
