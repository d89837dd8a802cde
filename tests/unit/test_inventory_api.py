"""Tests for the inventory export and upload facades."""

import httpx
import pytest
import respx
from pydantic import ValidationError

from discogs_sdk.api import InventoryExportApi, InventoryUploadApi
from discogs_sdk.exceptions import AuthError, RequestError
from discogs_sdk.models.inventory import (
    AddInventoryRequest,
    ChangeInventoryRequest,
    DeleteInventoryRequest,
    DownloadExportRequest,
    GetExportRequest,
    GetRecentExportsRequest,
    GetRecentUploadsRequest,
    GetUploadRequest,
)

BASE_URL = "https://api.discogs.com"
EXPORT_FILE = "cburmeister-inventory-20180927-1259.csv"
EXPORT_CSV = b"listing_id,artist,title\n150899904,LCD Soundsystem,The Long Goodbye\n"


class TestInventoryExportApi:
    """Test suite for InventoryExportApi."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_export_inventory(self, connection):
        """Test that queuing an export returns the job location."""
        route = respx.post(f"{BASE_URL}/inventory/export").mock(
            return_value=httpx.Response(
                200, headers={"Location": "https://api.discogs.com/inventory/export/599632"}
            )
        )

        api = InventoryExportApi(connection)
        result = await api.export_inventory()

        assert route.called
        assert result.location == "https://api.discogs.com/inventory/export/599632"

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_export_requires_auth(self, anonymous_connection):
        """Test that exports need credentials."""
        route = respx.post(f"{BASE_URL}/inventory/export")

        api = InventoryExportApi(anonymous_connection)
        with pytest.raises(AuthError):
            await api.export_inventory()

        assert route.call_count == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_recent_exports(self, connection, load_fixture):
        """Test listing recent exports."""
        respx.get(f"{BASE_URL}/inventory/export").mock(
            return_value=httpx.Response(200, json=load_fixture("exports"))
        )

        api = InventoryExportApi(connection)
        exports = await api.get_recent_exports(GetRecentExportsRequest())

        item = exports.items[0]
        assert item.id == 599632
        assert item.status == "success"
        assert item.filename == EXPORT_FILE

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_export(self, connection, load_fixture):
        """Test fetching one export."""
        respx.get(f"{BASE_URL}/inventory/export/599632").mock(
            return_value=httpx.Response(200, json=load_fixture("exports")["items"][0])
        )

        api = InventoryExportApi(connection)
        export = await api.get_export(GetExportRequest(export_id=599632))

        assert export.download_url.endswith("/599632/download")

    @pytest.mark.asyncio
    @respx.mock
    async def test_download_export(self, connection, tmp_path, recording_callback):
        """Test streaming an export to disk with progress notifications."""
        route = respx.get(f"{BASE_URL}/inventory/export/599632/download").mock(
            return_value=httpx.Response(
                200,
                content=EXPORT_CSV,
                headers={
                    "Content-Disposition": f"attachment; filename={EXPORT_FILE}",
                    "Content-Length": str(len(EXPORT_CSV)),
                },
            )
        )

        api = InventoryExportApi(connection)
        info = await api.download_export(
            DownloadExportRequest(
                export_id=599632,
                folder_path=tmp_path,
                callback=recording_callback.as_callback(),
            )
        )

        assert route.calls.last.request.headers["Accept"] == "text/csv; charset=utf-8"
        assert info.file_name == EXPORT_FILE
        assert info.size_bytes == len(EXPORT_CSV)
        assert info.downloaded_bytes == len(EXPORT_CSV)
        assert info.download_path == tmp_path.resolve() / EXPORT_FILE
        assert info.download_path.read_bytes() == EXPORT_CSV

        assert recording_callback.updates[-1] == (len(EXPORT_CSV), len(EXPORT_CSV))
        assert recording_callback.completed == [len(EXPORT_CSV)]
        assert recording_callback.failures == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_download_export_not_found(self, connection, tmp_path, recording_callback):
        """Test that a 404 download reports failure to the callback."""
        respx.get(f"{BASE_URL}/inventory/export/1/download").mock(
            return_value=httpx.Response(404, json={"message": "Export not found."})
        )

        api = InventoryExportApi(connection)
        with pytest.raises(RequestError):
            await api.download_export(
                DownloadExportRequest(
                    export_id=1, folder_path=tmp_path, callback=recording_callback.as_callback()
                )
            )

        assert len(recording_callback.failures) == 1
        assert recording_callback.completed == []

    def test_download_request_rejects_missing_folder(self, tmp_path):
        """Test that the destination folder must exist."""
        with pytest.raises(ValidationError):
            DownloadExportRequest(export_id=1, folder_path=tmp_path / "missing")

    def test_download_request_rejects_file(self, tmp_path):
        """Test that the destination must be a directory."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(ValidationError):
            DownloadExportRequest(export_id=1, folder_path=file_path)


class TestInventoryUploadApi:
    """Test suite for InventoryUploadApi."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_inventory(self, connection, inventory_csv):
        """Test uploading a CSV as multipart form data."""
        route = respx.post(f"{BASE_URL}/inventory/upload/add").mock(
            return_value=httpx.Response(
                200, headers={"Location": "https://api.discogs.com/inventory/upload/119615"}
            )
        )

        api = InventoryUploadApi(connection)
        upload = await api.add_inventory(AddInventoryRequest(csv_file=inventory_csv))

        assert upload.filename == "inventory.csv"
        assert upload.location == "https://api.discogs.com/inventory/upload/119615"

        request = route.calls.last.request
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="upload"' in request.content
        assert b'filename="inventory.csv"' in request.content
        assert b"249504,25.00,Mint (M),Y" in request.content

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "mode,request_type",
        [("change", ChangeInventoryRequest), ("delete", DeleteInventoryRequest)],
    )
    @respx.mock
    async def test_upload_modes(self, connection, inventory_csv, mode, request_type):
        """Test that each upload mode posts to its own endpoint."""
        route = respx.post(f"{BASE_URL}/inventory/upload/{mode}").mock(
            return_value=httpx.Response(200, headers={"Location": f"{BASE_URL}/inventory/upload/1"})
        )

        api = InventoryUploadApi(connection)
        method = getattr(api, f"{mode}_inventory")
        upload = await method(request_type(csv_file=inventory_csv))

        assert route.called
        assert upload.location.endswith("/inventory/upload/1")

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_upload_requires_auth(self, anonymous_connection, inventory_csv):
        """Test that uploads need credentials."""
        route = respx.post(f"{BASE_URL}/inventory/upload/add")

        api = InventoryUploadApi(anonymous_connection)
        with pytest.raises(AuthError):
            await api.add_inventory(AddInventoryRequest(csv_file=inventory_csv))

        assert route.call_count == 0

    def test_upload_request_rejects_missing_file(self, tmp_path):
        """Test that the CSV must exist."""
        with pytest.raises(ValidationError):
            AddInventoryRequest(csv_file=tmp_path / "missing.csv")

    @pytest.mark.asyncio
    @respx.mock
    async def test_upload_progress(self, connection, inventory_csv, recording_callback):
        """Test that the request's callback sees the file being sent."""
        respx.post(f"{BASE_URL}/inventory/upload/add").mock(return_value=httpx.Response(200))
        size = inventory_csv.stat().st_size

        api = InventoryUploadApi(connection)
        await api.add_inventory(
            AddInventoryRequest(csv_file=inventory_csv, callback=recording_callback.as_callback())
        )

        assert recording_callback.updates[-1] == (size, size)
        assert recording_callback.completed == [size]

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_upload_file_removed_after_validation(
        self, connection, inventory_csv, recording_callback
    ):
        """Test that a file deleted after the request was built raises RequestError."""
        route = respx.post(f"{BASE_URL}/inventory/upload/add")
        request = AddInventoryRequest(
            csv_file=inventory_csv, callback=recording_callback.as_callback()
        )
        inventory_csv.unlink()

        api = InventoryUploadApi(connection)
        with pytest.raises(RequestError, match="Error reading file to upload"):
            await api.add_inventory(request)

        assert route.call_count == 0
        assert isinstance(recording_callback.failures[0], RequestError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_recent_uploads(self, connection, load_fixture):
        """Test listing recent uploads."""
        respx.get(f"{BASE_URL}/inventory/upload").mock(
            return_value=httpx.Response(200, json=load_fixture("uploads"))
        )

        api = InventoryUploadApi(connection)
        uploads = await api.get_recent_uploads(GetRecentUploadsRequest(per_page=10))

        item = uploads.items[0]
        assert item.id == 119615
        assert item.type == "add"
        assert item.filename == "add.csv"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_upload(self, connection, load_fixture):
        """Test fetching one upload."""
        respx.get(f"{BASE_URL}/inventory/upload/119615").mock(
            return_value=httpx.Response(200, json=load_fixture("uploads")["items"][0])
        )

        api = InventoryUploadApi(connection)
        upload = await api.get_upload(GetUploadRequest(upload_id=119615))

        assert upload.status == "success"
