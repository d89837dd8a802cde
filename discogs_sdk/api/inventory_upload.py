"""Inventory Upload API: bulk add, change or delete listings from a CSV file."""

from ..connection.connection import TEXT_CSV_TYPE
from ..connection.verifier import authentication_required
from ..models.inventory import (
    AddInventoryRequest,
    ChangeInventoryRequest,
    DeleteInventoryRequest,
    GetRecentUploadsRequest,
    GetRecentUploadsResponse,
    GetUploadRequest,
    GetUploadResponse,
    InventoryUploadRequest,
    UploadInformation,
)
from .base import ApiBase, require_request

UPLOAD_PATH = "/inventory/upload"
UPLOAD_FIELD = "upload"


class InventoryUploadApi(ApiBase):
    """
    Client for inventory uploads.

    Uploads are processed asynchronously; the returned location points at
    the upload job, whose status is available through ``get_upload``.
    Use ``discogs_sdk.csv.InventoryCsvWriter`` to build files in the format
    each mode expects.
    """

    @authentication_required
    async def add_inventory(self, request: AddInventoryRequest) -> UploadInformation:
        """
        Upload a CSV of new listings.

        Required columns: release_id, price, media_condition.

        Args:
            request: Path to the CSV file

        Returns:
            UploadInformation with the Location of the upload job
        """
        return await self._upload("add", request)

    @authentication_required
    async def change_inventory(self, request: ChangeInventoryRequest) -> UploadInformation:
        """Upload a CSV of changes to existing listings (release_id required)."""
        return await self._upload("change", request)

    @authentication_required
    async def delete_inventory(self, request: DeleteInventoryRequest) -> UploadInformation:
        """Upload a CSV of listings to delete (release_id required)."""
        return await self._upload("delete", request)

    @authentication_required
    async def get_recent_uploads(self, request: GetRecentUploadsRequest) -> GetRecentUploadsResponse:
        require_request(request)
        self.logger.info("discogs_get_recent_uploads", page=request.page, per_page=request.per_page)

        return await self._get(UPLOAD_PATH, request, GetRecentUploadsResponse)

    @authentication_required
    async def get_upload(self, request: GetUploadRequest) -> GetUploadResponse:
        require_request(request)
        self.logger.info("discogs_get_upload", upload_id=request.upload_id)

        return await self._get(f"{UPLOAD_PATH}/{request.upload_id}", request, GetUploadResponse)

    async def _upload(self, mode: str, request: InventoryUploadRequest) -> UploadInformation:
        require_request(request)
        filename = request.csv_file.name
        self.logger.info("discogs_upload_inventory", mode=mode, filename=filename)

        upload = await self.connection.upload(
            f"{UPLOAD_PATH}/{mode}",
            request.csv_file,
            field_name=UPLOAD_FIELD,
            content_type=TEXT_CSV_TYPE,
            callback=request.callback,
        )

        self.logger.info(
            "discogs_upload_inventory_queued",
            mode=mode,
            filename=filename,
            location=upload.location,
        )
        return upload
