"""User Want List API."""

from ..connection.verifier import authentication_required
from ..models.wantlist import (
    AddToWantListRequest,
    AddToWantListResponse,
    DeleteFromWantListRequest,
    EditReleaseInWantListRequest,
    EditReleaseInWantListResponse,
    GetWantListRequest,
    GetWantListResponse,
)
from .base import ApiBase, encode_path_segment, require_request


def _want_path(username: str, release_id: int) -> str:
    return f"/users/{encode_path_segment(username)}/wants/{release_id}"


class UserWantListApi(ApiBase):
    """
    Client for a user's want list.

    Notes and ratings on wants are sent as query parameters rather than a
    JSON body, matching what the Discogs API accepts for these endpoints.
    """

    @authentication_required
    async def get_want_list(self, request: GetWantListRequest) -> GetWantListResponse:
        """
        List the releases in a user's want list.

        Args:
            request: Username and pagination

        Returns:
            Paginated GetWantListResponse
        """
        require_request(request)
        self.logger.info(
            "discogs_get_want_list",
            username=request.username,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"/users/{encode_path_segment(request.username)}/wants"
        return await self._get(path, request, GetWantListResponse)

    @authentication_required
    async def add_to_want_list(self, request: AddToWantListRequest) -> AddToWantListResponse:
        require_request(request)
        self.logger.info(
            "discogs_add_to_want_list",
            username=request.username,
            release_id=request.release_id,
        )

        path = _want_path(request.username, request.release_id)
        return await self._put(path, request, AddToWantListResponse)

    @authentication_required
    async def edit_release_in_want_list(
        self, request: EditReleaseInWantListRequest
    ) -> EditReleaseInWantListResponse:
        """Change the notes or rating of a release already in the want list."""
        require_request(request)
        self.logger.info(
            "discogs_edit_release_in_want_list",
            username=request.username,
            release_id=request.release_id,
        )

        path = _want_path(request.username, request.release_id)
        return await self._post(path, request, EditReleaseInWantListResponse)

    @authentication_required
    async def delete_from_want_list(self, request: DeleteFromWantListRequest) -> None:
        require_request(request)
        self.logger.info(
            "discogs_delete_from_want_list",
            username=request.username,
            release_id=request.release_id,
        )

        await self._delete(_want_path(request.username, request.release_id), request)
