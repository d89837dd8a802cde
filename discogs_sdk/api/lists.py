"""User Lists API."""

from ..connection.verifier import authentication_optional
from ..models.lists import (
    GetListRequest,
    GetListResponse,
    GetUserListsRequest,
    GetUserListsResponse,
)
from .base import ApiBase, encode_path_segment, require_request


class UserListsApi(ApiBase):
    """Client for user-curated lists. Private lists are only visible to their owner."""

    @authentication_optional
    async def get_user_lists(self, request: GetUserListsRequest) -> GetUserListsResponse:
        require_request(request)
        self.logger.info(
            "discogs_get_user_lists",
            username=request.username,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"/users/{encode_path_segment(request.username)}/lists"
        return await self._get(path, request, GetUserListsResponse)

    @authentication_optional
    async def get_list(self, request: GetListRequest) -> GetListResponse:
        """Get a list with its items."""
        require_request(request)
        self.logger.info("discogs_get_list", list_id=request.list_id)

        return await self._get(f"/lists/{request.list_id}", request, GetListResponse)
