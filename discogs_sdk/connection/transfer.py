"""File transfer results and progress notification hooks."""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Union

import structlog
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)


class DownloadInformation(BaseModel):
    """Result of streaming a file to local disk."""

    file_name: str = Field(description="File name taken from Content-Disposition")
    size_bytes: int = Field(description="Size advertised by Content-Length")
    downloaded_bytes: int = Field(description="Bytes actually written")
    download_path: Path = Field(description="Absolute path of the written file")

    model_config = {"frozen": True}


class UploadInformation(BaseModel):
    """Result of a multipart file upload."""

    filename: str = Field(description="Name of the uploaded file")
    location: Optional[str] = Field(
        default=None, description="URL of the created upload job (Location header)"
    )

    model_config = {"frozen": True}


@dataclass
class TransferProgressCallback:
    """Lifecycle hooks for a file transfer.

    All callbacks can be either sync or async functions.

    Attributes:
        on_update: Called after each chunk with (transferred_bytes, total_bytes)
        on_failure: Called with the exception if the transfer fails
        on_complete: Called with the total bytes transferred on success

    Example:
        >>> def on_update(transferred: int, total: int):
        ...     print(f"{transferred}/{total}")
        >>>
        >>> callback = TransferProgressCallback(on_update=on_update)
        >>> await inventory_export.download_export(request, callback=callback)
    """

    on_update: Optional[Callable[[int, int], Union[None, Awaitable[None]]]] = None
    on_failure: Optional[Callable[[Exception], Union[None, Awaitable[None]]]] = None
    on_complete: Optional[Callable[[int], Union[None, Awaitable[None]]]] = None


def logging_progress_callback(name: str = "transfer") -> TransferProgressCallback:
    """Return a callback that reports progress through structlog."""
    log = logger.bind(component="transfer", transfer=name)

    def on_update(transferred: int, total: int) -> None:
        log.debug("transfer_progress", transferred=transferred, total=total)

    def on_failure(error: Exception) -> None:
        log.error("transfer_failed", error=str(error))

    def on_complete(total: int) -> None:
        log.info("transfer_complete", total=total)

    return TransferProgressCallback(
        on_update=on_update,
        on_failure=on_failure,
        on_complete=on_complete,
    )


async def call_hook(hook: Optional[Callable[..., Any]], *args: Any) -> None:
    """
    Call a hook function, handling both sync and async callbacks.

    Args:
        hook: Callback function (sync or async)
        *args: Arguments to pass to the callback

    Raises:
        Exception: Any exception raised by the hook
    """
    if hook is None:
        return

    try:
        result = hook(*args)
        if asyncio.iscoroutine(result):
            await result
    except Exception as e:
        logger.error("hook_error", hook=getattr(hook, "__name__", repr(hook)), error=str(e))
        raise
