"""Writes inventory upload CSV files."""

import csv
import os
from pathlib import Path
from typing import IO, Any, Iterable, List, Optional

import structlog

from ..exceptions import ValidationError
from .header import InventoryHeader, InventoryRecordType
from .record import InventoryRecord

logger = structlog.get_logger(__name__)


class InventoryCsvWriter:
    """
    Write validated inventory records to a CSV file.

    Every record is validated for the writer's record type before it is
    written, so a finished file can be passed straight to
    ``InventoryUploadApi``.

    Example:
        >>> headers = [InventoryHeader.RELEASE_ID, InventoryHeader.PRICE, InventoryHeader.MEDIA_CONDITION]
        >>> with InventoryCsvWriter(Path("new.csv"), headers) as writer:
        ...     writer.write(InventoryRecord(release_id=1, price=9.99, media_condition=Condition.MINT))
    """

    def __init__(
        self,
        path: Path,
        headers: List[InventoryHeader],
        record_type: InventoryRecordType = InventoryRecordType.NEW,
        append: bool = False,
    ):
        """
        Initialize the writer.

        Args:
            path: CSV file to write
            headers: Columns to include, in order
            record_type: What the file is used for; decides the required columns
            append: Add rows to an existing file instead of replacing it

        Raises:
            ValidationError: If ``headers`` lacks a required column
            ValueError: If ``append`` is set and the file is missing or not writable
        """
        if path is None or headers is None:
            raise TypeError("path and headers must not be None")

        missing = [h for h in InventoryHeader.required_for(record_type) if h not in headers]
        if missing:
            raise ValidationError(
                f"Headers are missing required columns for {record_type.name}",
                [header.format_message("column is required") for header in missing],
            )

        self.path = Path(path)
        self.headers = list(headers)
        self.record_type = record_type
        self.append = append
        self.rows_written = 0
        self._file: Optional[IO[str]] = None
        self._writer: Optional[Any] = None

        if append:
            if not self.path.is_file():
                raise ValueError(f"CSV file must already exist and be a regular file: {self.path}")
            if not os.access(self.path, os.W_OK):
                raise ValueError(f"CSV file must be writable: {self.path}")

    def __enter__(self) -> "InventoryCsvWriter":
        self.open()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def open(self) -> None:
        """Open the file, writing the header row unless appending."""
        if self._file is not None:
            return

        if self.append:
            self._file = open(self.path, "a", newline="", encoding="utf-8")
            self._writer = csv.writer(self._file)
        else:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, "w", newline="", encoding="utf-8")
            self._writer = csv.writer(self._file)
            self._writer.writerow([header.value for header in self.headers])

        logger.debug(
            "inventory_csv_opened",
            path=str(self.path),
            record_type=self.record_type.value,
            append=self.append,
        )

    def write(self, record: InventoryRecord) -> None:
        """
        Validate and write one record.

        Raises:
            ValidationError: If the record fails validation (nothing is written)
        """
        if record is None:
            raise TypeError("record must not be None")
        if self._writer is None:
            raise RuntimeError("Writer not opened. Use with context manager.")

        record.validate(self.record_type)
        self._writer.writerow(record.to_csv_row(self.headers, self.record_type))
        self.rows_written += 1

    def write_all(self, records: Iterable[InventoryRecord]) -> int:
        """Write every record, returning how many were written."""
        count = 0
        for record in records:
            self.write(record)
            count += 1
        return count

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None
            logger.info(
                "inventory_csv_written",
                path=str(self.path),
                rows=self.rows_written,
            )

    def __repr__(self) -> str:
        return f"InventoryCsvWriter [{self.record_type.name}]: {self.path}"
