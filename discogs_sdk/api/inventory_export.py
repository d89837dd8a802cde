"""Inventory Export API: request, inspect and download CSV exports of a seller's inventory."""

from ..connection.connection import LOCATION, TEXT_CSV_TYPE
from ..connection.verifier import authentication_required
from ..models.inventory import (
    DownloadExportRequest,
    DownloadInformation,
    ExportInventoryResponse,
    GetExportRequest,
    GetExportResponse,
    GetRecentExportsRequest,
    GetRecentExportsResponse,
)
from .base import ApiBase, require_request

EXPORT_PATH = "/inventory/export"


class InventoryExportApi(ApiBase):
    """
    Client for inventory exports.

    Exports are produced asynchronously by Discogs: ``export_inventory``
    queues a job, ``get_export`` reports its status, and once finished
    ``download_export`` streams the CSV to disk.

    Example:
        >>> queued = await discogs.inventory_export.export_inventory()
        >>> recent = await discogs.inventory_export.get_recent_exports(GetRecentExportsRequest())
        >>> info = await discogs.inventory_export.download_export(
        ...     DownloadExportRequest(export_id=recent.items[0].id, folder_path=Path("./exports"))
        ... )
        >>> print(info.download_path)
    """

    @authentication_required
    async def export_inventory(self) -> ExportInventoryResponse:
        """
        Queue an export of the authenticated seller's inventory.

        Returns:
            ExportInventoryResponse with the Location of the export job
        """
        self.logger.info("discogs_export_inventory")

        http_request = self.connection.new_request("POST", EXPORT_PATH)
        response = await self.connection.execute(http_request)
        return ExportInventoryResponse(location=response.headers.get(LOCATION))

    @authentication_required
    async def get_recent_exports(self, request: GetRecentExportsRequest) -> GetRecentExportsResponse:
        require_request(request)
        self.logger.info("discogs_get_recent_exports", page=request.page, per_page=request.per_page)

        return await self._get(EXPORT_PATH, request, GetRecentExportsResponse)

    @authentication_required
    async def get_export(self, request: GetExportRequest) -> GetExportResponse:
        require_request(request)
        self.logger.info("discogs_get_export", export_id=request.export_id)

        return await self._get(f"{EXPORT_PATH}/{request.export_id}", request, GetExportResponse)

    @authentication_required
    async def download_export(self, request: DownloadExportRequest) -> DownloadInformation:
        """
        Download a finished export as a CSV file.

        The file name is taken from the response's Content-Disposition header
        and the file is written inside ``request.folder_path``.

        Args:
            request: Export ID, destination folder and optional progress callback

        Returns:
            DownloadInformation with the written path and byte counts

        Raises:
            RequestError: On 4xx responses, transport failures or file I/O errors
            ValueError: If the response headers are malformed
        """
        require_request(request)
        self.logger.info(
            "discogs_download_export",
            export_id=request.export_id,
            folder_path=str(request.folder_path),
        )

        http_request = self.connection.new_request(
            "GET", f"{EXPORT_PATH}/{request.export_id}/download", accept=TEXT_CSV_TYPE
        )
        return await self.connection.download(http_request, request.folder_path, request.callback)
