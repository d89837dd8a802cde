"""Async HTTP connection to the Discogs API."""

import secrets
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional, Type, TypeVar, Union

import aiofiles
import aiofiles.os
import httpx
import pydantic
import structlog

from ..common.config import DEFAULT_BASE_URL, HTTPConfig
from ..exceptions import (
    ParseError,
    RequestError,
    ResponseError,
    ThrottledError,
)
from ..models.base import PaginatedResponse
from .auth import AuthManager, UnauthenticatedAuthManager
from .transfer import (
    DownloadInformation,
    TransferProgressCallback,
    UploadInformation,
    call_hook,
    logging_progress_callback,
)
from .verifier import AuthVerifier, NoOpAuthVerifier

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=pydantic.BaseModel)

JSON_TYPE = "application/json"
TEXT_CSV_TYPE = "text/csv; charset=utf-8"
LOCATION = "Location"
CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_LENGTH = "Content-Length"
_ATTACHMENT_PREFIX = "attachment; filename="


def default_user_agent() -> str:
    """Return the User-Agent sent when the caller does not provide one."""
    try:
        sdk_version = version("discogs-sdk")
    except PackageNotFoundError:
        sdk_version = "0.1.0"
    return f"discogs-sdk/{sdk_version} +https://github.com/discogs-sdk/discogs-sdk"


def parse_file_name(header_value: Optional[str]) -> str:
    """
    Extract the file name from a ``Content-Disposition`` header.

    Only the ``attachment; filename=<name>`` form returned by the inventory
    export download endpoint is accepted.

    Raises:
        ValueError: If the header is blank or not in the expected form
    """
    if header_value is None or not header_value.strip():
        raise ValueError("Content-Disposition header value must not be blank")

    error_message = f"Content-Disposition header value contains unexpected format: {header_value}"
    if not header_value.startswith(_ATTACHMENT_PREFIX):
        raise ValueError(error_message)

    tokens = header_value.split("=")
    if len(tokens) != 2:
        raise ValueError(error_message)

    # Never let the server choose a directory
    file_name = Path(tokens[1].strip().strip('"')).name
    if not file_name:
        raise ValueError(error_message)
    return file_name


class DiscogsConnection:
    """
    Shared HTTP connection used by every API facade.

    Attaches the User-Agent and authentication headers, sends requests through
    a pooled httpx.AsyncClient, maps HTTP status codes to typed exceptions and
    parses JSON bodies into pydantic models. There are no retries: each call
    is exactly one round trip.

    Status mapping:
    - 2xx: success, body parsed when a response type is given
    - 429: ThrottledError (a RequestError)
    - other 4xx: RequestError
    - 5xx and anything else: ResponseError

    Example:
        >>> from discogs_sdk.connection import DiscogsConnection, TokenAuthManager, TokenAuthInfo
        >>>
        >>> async def main():
        ...     auth = TokenAuthManager(TokenAuthInfo(token="abc"))
        ...     async with DiscogsConnection(auth, user_agent="MyApp/1.0") as connection:
        ...         request = connection.new_request("GET", "/oauth/identity")
        ...         response = await connection.execute(request)
    """

    def __init__(
        self,
        auth_manager: Optional[AuthManager] = None,
        user_agent: Optional[str] = None,
        http_config: Optional[HTTPConfig] = None,
        base_url: str = DEFAULT_BASE_URL,
        auth_verifier: Optional[Union[AuthVerifier, NoOpAuthVerifier]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the connection.

        Args:
            auth_manager: Produces Authorization headers (unauthenticated when omitted)
            user_agent: User-Agent header value, required by Discogs
            http_config: HTTP client settings (defaults when omitted)
            base_url: API base URL
            auth_verifier: Checks endpoint auth requirements (disabled when omitted)
            transport: Custom httpx transport, mainly for tests
        """
        if user_agent is not None and not user_agent.strip():
            raise ValueError("user_agent must not be blank")

        self.auth_manager = auth_manager or UnauthenticatedAuthManager()
        self.user_agent = user_agent or default_user_agent()
        self.http_config = http_config or HTTPConfig()
        self.base_url = base_url.rstrip("/")
        self.auth_verifier = auth_verifier or NoOpAuthVerifier()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self.logger = logger.bind(component="discogs_connection")

    async def __aenter__(self) -> "DiscogsConnection":
        """Enter async context manager."""
        await self.open()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def open(self) -> None:
        """Create the underlying httpx client if it does not exist yet."""
        if self._client is not None:
            return

        limits = httpx.Limits(
            max_connections=self.http_config.max_connections,
            max_keepalive_connections=self.http_config.max_keepalive_connections,
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(float(self.http_config.timeout)),
            limits=limits,
            follow_redirects=True,
            max_redirects=self.http_config.max_redirects,
            verify=self.http_config.verify_ssl,
            transport=self._transport,
        )

        self.logger.info(
            "discogs_connection_opened",
            base_url=self.base_url,
            timeout=self.http_config.timeout,
            authenticated=self.auth_manager.is_authenticated,
            user_agent=self.user_agent,
        )

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            self.logger.info("discogs_connection_closed")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Connection not opened. Use async with context manager.")
        return self._client

    @property
    def is_authenticated(self) -> bool:
        return self.auth_manager.is_authenticated

    def new_request(
        self,
        method: str,
        path_or_url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        content: Optional[Union[bytes, AsyncIterator[bytes]]] = None,
        headers: Optional[Dict[str, str]] = None,
        accept: str = JSON_TYPE,
    ) -> httpx.Request:
        """
        Build a request carrying the User-Agent, Accept and auth headers.

        Args:
            method: HTTP method
            path_or_url: Path relative to the base URL, or an absolute URL
            params: Query parameters
            json: JSON body
            content: Raw body, or an async iterator streaming it
            headers: Extra headers (e.g. Content-Type for ``content``)
            accept: Accept header value

        Returns:
            Unsent httpx.Request
        """
        request_headers = {"User-Agent": self.user_agent, "Accept": accept}
        request_headers.update(headers or {})
        request_headers.update(self.auth_manager.auth_headers())

        return self.client.build_request(
            method.upper(),
            path_or_url,
            params=params or None,
            json=json,
            content=content,
            headers=request_headers,
        )

    async def execute(
        self,
        request: httpx.Request,
        response_type: Optional[Type[T]] = None,
    ) -> Any:
        """
        Send a request and classify the response status.

        Args:
            request: Request built with ``new_request``
            response_type: Model to parse a successful body into; when omitted
                the raw httpx.Response is returned

        Returns:
            Parsed model instance, or the raw response

        Raises:
            TypeError: If request is None
            AuthError: If the calling endpoint requires credentials the client lacks
            RequestError: On 4xx statuses and transport failures
            ResponseError: On 5xx and other unexpected statuses
            ParseError: If the body cannot be parsed into ``response_type``
        """
        if request is None:
            raise TypeError("request must not be None")

        self.auth_verifier.check(self.auth_manager)

        response = await self._send(request)
        self._raise_for_status(response)

        if response_type is None:
            return response
        return self.parse(response, response_type)

    async def get(self, path_or_url: str, response_type: Type[T], params: Optional[Dict[str, Any]] = None) -> T:
        """Build and execute a GET request in one step."""
        return await self.execute(self.new_request("GET", path_or_url, params=params), response_type)

    def parse(self, response: httpx.Response, response_type: Type[T]) -> T:
        """
        Parse a successful response body into ``response_type``.

        Paginated responses are bound to this connection so their page
        navigation methods can issue follow-up requests.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Unable to parse response body: {e}", body=response.text) from e

        try:
            parsed = response_type.model_validate(data)
        except pydantic.ValidationError as e:
            raise ParseError(
                f"Response does not match {response_type.__name__}: {e}",
                body=response.text,
            ) from e

        if isinstance(parsed, PaginatedResponse):
            parsed.bind_connection(self)
        return parsed

    async def download(
        self,
        request: httpx.Request,
        folder_path: Union[str, Path],
        callback: Optional[TransferProgressCallback] = None,
    ) -> DownloadInformation:
        """
        Stream a file response into ``folder_path``.

        The file name comes from the ``Content-Disposition`` header and the
        expected size from ``Content-Length``. The folder is created when it
        does not exist.

        Args:
            request: Request built with ``new_request(..., accept=TEXT_CSV_TYPE)``
            folder_path: Destination folder
            callback: Progress hooks (logs progress when omitted)

        Returns:
            DownloadInformation describing the written file

        Raises:
            TypeError: If request or folder_path is None
            ValueError: If the headers are malformed or folder_path is a file
            RequestError: On 4xx statuses, transport failures and file I/O errors
            ResponseError: On 5xx statuses
        """
        if request is None:
            raise TypeError("request must not be None")
        if folder_path is None:
            raise TypeError("folder_path must not be None")

        callback = callback or logging_progress_callback(str(request.url))
        self.auth_verifier.check(self.auth_manager)

        try:
            response = await self._send(request, stream=True)
        except RequestError as e:
            await call_hook(callback.on_failure, e)
            raise

        download_path: Optional[Path] = None
        try:
            if not response.is_success:
                await response.aread()
                self._raise_for_status(response)

            file_name = parse_file_name(response.headers.get(CONTENT_DISPOSITION))
            content_length = response.headers.get(CONTENT_LENGTH)
            if content_length is None:
                raise RequestError(
                    "Response does not define a Content-Length header",
                    status_code=response.status_code,
                    url=str(request.url),
                )
            size_bytes = int(content_length)

            download_path = await self._destination_path(Path(folder_path), file_name)
            downloaded_bytes = await self._write_stream(
                response, download_path, size_bytes, callback
            )
        except (httpx.HTTPError, OSError) as e:
            error = RequestError(f"Unable to download file: {e}", url=str(request.url))
            await self._abort_download(download_path, callback, error)
            raise error from e
        except Exception as e:
            await self._abort_download(download_path, callback, e)
            raise
        finally:
            await response.aclose()

        self.logger.debug(
            "discogs_download_complete",
            path=str(download_path),
            size_bytes=size_bytes,
            downloaded_bytes=downloaded_bytes,
        )
        return DownloadInformation(
            file_name=file_name,
            size_bytes=size_bytes,
            downloaded_bytes=downloaded_bytes,
            download_path=download_path,
        )

    async def upload(
        self,
        path_or_url: str,
        file_path: Union[str, Path],
        field_name: str = "upload",
        content_type: str = TEXT_CSV_TYPE,
        callback: Optional[TransferProgressCallback] = None,
    ) -> UploadInformation:
        """
        Stream a file as a ``multipart/form-data`` POST body.

        The file is read in ``http_config.chunk_size`` pieces while the body
        is sent, so it is never held in memory whole. ``on_update`` receives
        the file bytes sent so far and the file size.

        Args:
            path_or_url: Upload endpoint
            file_path: Local file to send
            field_name: Form field carrying the file
            content_type: Content-Type of the file part
            callback: Progress hooks (logs progress when omitted)

        Returns:
            UploadInformation with the Location header of the upload job

        Raises:
            TypeError: If file_path is None
            AuthError: If the calling endpoint requires credentials the client lacks
            RequestError: On 4xx statuses, transport failures and file I/O errors
            ResponseError: On 5xx statuses
        """
        if file_path is None:
            raise TypeError("file_path must not be None")

        file_path = Path(file_path)
        callback = callback or logging_progress_callback(file_path.name)
        self.auth_verifier.check(self.auth_manager)

        try:
            size_bytes = (await aiofiles.os.stat(file_path)).st_size
        except OSError as e:
            error = RequestError(f"Error reading file to upload: {e}", url=path_or_url)
            await call_hook(callback.on_failure, error)
            raise error from e

        boundary = secrets.token_hex(16)
        head = (
            f"--{boundary}\r\n"
            f'Content-Disposition: form-data; name="{field_name}"; filename="{file_path.name}"\r\n'
            f"Content-Type: {content_type}\r\n\r\n"
        ).encode()
        tail = f"\r\n--{boundary}--\r\n".encode()
        transferred = 0

        async def body() -> AsyncIterator[bytes]:
            nonlocal transferred
            yield head
            async with aiofiles.open(file_path, "rb") as f:
                while True:
                    chunk = await f.read(self.http_config.chunk_size)
                    if not chunk:
                        break
                    yield chunk
                    transferred += len(chunk)
                    await call_hook(callback.on_update, transferred, size_bytes)
            yield tail

        # An explicit length keeps httpx from falling back to chunked encoding
        request = self.new_request(
            "POST",
            path_or_url,
            content=body(),
            headers={
                "Content-Type": f"multipart/form-data; boundary={boundary}",
                CONTENT_LENGTH: str(len(head) + size_bytes + len(tail)),
            },
        )

        try:
            response = await self._send(request)
            self._raise_for_status(response)
        except OSError as e:
            error = RequestError(f"Error reading file to upload: {e}", url=str(request.url))
            await call_hook(callback.on_failure, error)
            raise error from e
        except Exception as e:
            await call_hook(callback.on_failure, e)
            raise

        await call_hook(callback.on_complete, transferred)
        self.logger.debug(
            "discogs_upload_complete", file=str(file_path), size_bytes=size_bytes
        )
        return UploadInformation(filename=file_path.name, location=response.headers.get(LOCATION))

    async def _send(self, request: httpx.Request, stream: bool = False) -> httpx.Response:
        self.logger.debug("http_request", method=request.method, url=str(request.url))
        try:
            response = await self.client.send(request, stream=stream)
        except httpx.HTTPError as e:
            raise RequestError(
                f"Unable to execute request: {e}", url=str(request.url)
            ) from e

        self._log_rate_limit(response)
        return response

    def _log_rate_limit(self, response: httpx.Response) -> None:
        rate_limit = response.headers.get("X-Discogs-Ratelimit")
        if rate_limit:
            self.logger.debug(
                "discogs_rate_limit_headers",
                total=rate_limit,
                used=response.headers.get("X-Discogs-Ratelimit-Used"),
                remaining=response.headers.get("X-Discogs-Ratelimit-Remaining"),
            )

    def _raise_for_status(self, response: httpx.Response) -> None:
        status_code = response.status_code
        if 200 <= status_code < 300:
            return

        body = response.text
        url = str(response.request.url)
        message = f"HTTP {status_code} from {url}: {self._error_message(response)}"

        self.logger.warning("discogs_request_failed", status_code=status_code, url=url)

        if status_code == 429:
            raise ThrottledError(
                message,
                response_body=body,
                url=url,
                rate_limit=_int_header(response, "X-Discogs-Ratelimit"),
                rate_limit_remaining=_int_header(response, "X-Discogs-Ratelimit-Remaining"),
            )
        if 400 <= status_code < 500:
            raise RequestError(message, status_code=status_code, response_body=body, url=url)
        raise ResponseError(message, status_code=status_code, response_body=body, url=url)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # Discogs error bodies look like {"message": "..."}
        try:
            data = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return response.text

    @staticmethod
    async def _destination_path(folder_path: Path, file_name: str) -> Path:
        folder = folder_path.expanduser().absolute().resolve()
        if folder.exists() and not folder.is_dir():
            raise ValueError(f"{folder} must not already exist as a file")

        await aiofiles.os.makedirs(folder, exist_ok=True)
        return folder / file_name

    @staticmethod
    async def _abort_download(
        download_path: Optional[Path],
        callback: TransferProgressCallback,
        error: Exception,
    ) -> None:
        # Never leave a truncated file behind
        if download_path is not None and await aiofiles.os.path.exists(download_path):
            await aiofiles.os.remove(download_path)
        await call_hook(callback.on_failure, error)

    async def _write_stream(
        self,
        response: httpx.Response,
        download_path: Path,
        size_bytes: int,
        callback: TransferProgressCallback,
    ) -> int:
        transferred = 0
        async with aiofiles.open(download_path, "wb") as f:
            async for chunk in response.aiter_bytes(chunk_size=self.http_config.chunk_size):
                await f.write(chunk)
                transferred += len(chunk)
                await call_hook(callback.on_update, transferred, size_bytes)

        await call_hook(callback.on_complete, transferred)
        return transferred


def _int_header(response: httpx.Response, name: str) -> Optional[int]:
    value = response.headers.get(name)
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None
