"""Inventory CSV writing and validation for the inventory upload endpoints."""

from .header import NO, YES, InventoryHeader, InventoryRecordType
from .record import InventoryRecord
from .validator import CsvValidationError, InventoryCsvValidator
from .writer import InventoryCsvWriter

__all__ = [
    "CsvValidationError",
    "InventoryCsvValidator",
    "InventoryCsvWriter",
    "InventoryHeader",
    "InventoryRecord",
    "InventoryRecordType",
    "NO",
    "YES",
]
