"""Fixtures specific to unit tests."""

from pathlib import Path

import pytest

from discogs_sdk.connection import TransferProgressCallback


class RecordingCallback:
    """Collects transfer progress notifications for assertions."""

    def __init__(self):
        self.updates = []
        self.failures = []
        self.completed = []

    def as_callback(self) -> TransferProgressCallback:
        return TransferProgressCallback(
            on_update=lambda transferred, total: self.updates.append((transferred, total)),
            on_failure=self.failures.append,
            on_complete=self.completed.append,
        )


@pytest.fixture
def recording_callback() -> RecordingCallback:
    """Provide a progress callback that records every notification."""
    return RecordingCallback()


@pytest.fixture
def inventory_csv(tmp_path: Path) -> Path:
    """Provide a valid inventory CSV file for NEW listings."""
    csv_file = tmp_path / "inventory.csv"
    csv_file.write_text(
        "release_id,price,media_condition,accept_offer\n"
        "249504,25.00,Mint (M),Y\n"
        "1867708,12.5,Very Good Plus (VG+),N\n",
        encoding="utf-8",
    )
    return csv_file
