"""Shared plumbing for the Discogs API facades."""

from typing import Any, Optional, Type, TypeVar
from urllib.parse import quote

import pydantic
import structlog

from ..connection.connection import DiscogsConnection
from ..models.base import DiscogsRequest

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=pydantic.BaseModel)


def encode_path_segment(value: Any) -> str:
    """URL-encode a path parameter, including any ``/`` it contains."""
    return quote(str(value), safe="")


def require_request(request: Optional[DiscogsRequest]) -> DiscogsRequest:
    if request is None:
        raise TypeError("request must not be None")
    return request


class ApiBase:
    """
    Base class for API facades.

    Each facade method builds the endpoint path, logs a structured event and
    hands the request to the shared connection. Query parameters come from
    ``populate_query_parameters`` and the JSON body from ``to_body``.
    """

    def __init__(self, connection: DiscogsConnection):
        if connection is None:
            raise TypeError("connection must not be None")
        self.connection = connection
        self.logger = logger.bind(component=type(self).__name__)

    async def _execute(
        self,
        method: str,
        path: str,
        request: Optional[DiscogsRequest] = None,
        response_type: Optional[Type[T]] = None,
        send_body: bool = False,
    ) -> Any:
        params = request.populate_query_parameters() if request is not None else None
        body = request.to_body() if (send_body and request is not None) else None

        http_request = self.connection.new_request(method, path, params=params, json=body)
        return await self.connection.execute(http_request, response_type)

    async def _get(
        self, path: str, request: Optional[DiscogsRequest], response_type: Type[T]
    ) -> T:
        return await self._execute("GET", path, request, response_type)

    async def _post(
        self,
        path: str,
        request: Optional[DiscogsRequest],
        response_type: Optional[Type[T]] = None,
    ) -> Any:
        result = await self._execute("POST", path, request, response_type, send_body=True)
        return result if response_type is not None else None

    async def _put(
        self,
        path: str,
        request: Optional[DiscogsRequest],
        response_type: Optional[Type[T]] = None,
    ) -> Any:
        result = await self._execute("PUT", path, request, response_type, send_body=True)
        return result if response_type is not None else None

    async def _delete(self, path: str, request: Optional[DiscogsRequest] = None) -> None:
        await self._execute("DELETE", path, request)
