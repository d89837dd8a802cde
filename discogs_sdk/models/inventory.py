"""Request and response models for the Inventory Export and Upload APIs."""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import Field, InstanceOf, field_validator

from ..connection.transfer import (
    DownloadInformation,
    TransferProgressCallback,
    UploadInformation,
)
from .base import (
    DiscogsModel,
    DiscogsRequest,
    PaginatedRequest,
    PaginatedResponse,
    PositiveId,
)

__all__ = [
    "AddInventoryRequest",
    "ChangeInventoryRequest",
    "DeleteInventoryRequest",
    "DownloadExportRequest",
    "DownloadInformation",
    "ExportInventoryResponse",
    "ExportItem",
    "GetExportRequest",
    "GetExportResponse",
    "GetRecentExportsRequest",
    "GetRecentExportsResponse",
    "GetRecentUploadsRequest",
    "GetRecentUploadsResponse",
    "GetUploadRequest",
    "GetUploadResponse",
    "InventoryUploadRequest",
    "UploadInformation",
    "UploadItem",
]


# Export requests
class GetRecentExportsRequest(PaginatedRequest):
    pass


class GetExportRequest(DiscogsRequest):
    export_id: PositiveId


class DownloadExportRequest(DiscogsRequest):
    """Download a finished export into an existing, writable folder."""

    export_id: PositiveId
    folder_path: Path = Field(description="Destination folder")
    callback: Optional[InstanceOf[TransferProgressCallback]] = Field(
        default=None, description="Progress hooks"
    )

    @field_validator("folder_path")
    @classmethod
    def validate_folder(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"{v} does not exist")
        if not v.is_dir():
            raise ValueError(f"{v} must be a directory")
        if not os.access(v, os.W_OK):
            raise ValueError(f"{v} is not writable")
        return v


# Upload requests
class InventoryUploadRequest(DiscogsRequest):
    """CSV file to upload; must be a regular, readable file."""

    csv_file: Path = Field(description="Inventory CSV file")
    callback: Optional[InstanceOf[TransferProgressCallback]] = Field(
        default=None, description="Progress hooks"
    )

    @field_validator("csv_file")
    @classmethod
    def validate_file(cls, v: Path) -> Path:
        if not v.is_file():
            raise ValueError(f"{v} must be a regular file")
        if not os.access(v, os.R_OK):
            raise ValueError(f"{v} is not readable")
        return v


class AddInventoryRequest(InventoryUploadRequest):
    pass


class ChangeInventoryRequest(InventoryUploadRequest):
    pass


class DeleteInventoryRequest(InventoryUploadRequest):
    pass


class GetRecentUploadsRequest(PaginatedRequest):
    pass


class GetUploadRequest(DiscogsRequest):
    upload_id: PositiveId


# Responses
class ExportInventoryResponse(DiscogsModel):
    location: Optional[str] = Field(
        default=None, description="URL of the queued export job"
    )


class ExportItem(DiscogsModel):
    id: int
    status: Optional[str] = None
    created_ts: Optional[datetime] = None
    finished_ts: Optional[datetime] = None
    url: Optional[str] = None
    download_url: Optional[str] = None
    filename: Optional[str] = None


class GetRecentExportsResponse(PaginatedResponse[ExportItem]):
    items_field = "items"

    items: List[ExportItem] = Field(default_factory=list)


class GetExportResponse(ExportItem):
    pass


class UploadItem(DiscogsModel):
    id: int
    status: Optional[str] = None
    type: Optional[str] = Field(default=None, description="add, change or delete")
    results: Optional[str] = None
    filename: Optional[str] = None
    created_ts: Optional[datetime] = None
    finished_ts: Optional[datetime] = None


class GetRecentUploadsResponse(PaginatedResponse[UploadItem]):
    items_field = "items"

    items: List[UploadItem] = Field(default_factory=list)


class GetUploadResponse(UploadItem):
    pass
