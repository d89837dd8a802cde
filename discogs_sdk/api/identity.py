"""User Identity API: the authenticated identity, profiles, submissions and contributions."""

from ..connection.verifier import authentication_required
from ..models.identity import (
    EditUserProfileRequest,
    EditUserProfileResponse,
    GetIdentityResponse,
    GetUserContributionsRequest,
    GetUserContributionsResponse,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserSubmissionsRequest,
    GetUserSubmissionsResponse,
)
from .base import ApiBase, encode_path_segment, require_request


class UserIdentityApi(ApiBase):
    """
    Client for user identity and profile endpoints.

    Identity and profiles need credentials; submissions and contributions
    are public.
    """

    @authentication_required
    async def get_identity(self) -> GetIdentityResponse:
        """
        Get basic information about the authenticated user.

        Useful for checking that credentials work and for discovering the
        username to pass to other endpoints.

        Returns:
            GetIdentityResponse with id, username and consumer_name
        """
        self.logger.info("discogs_get_identity")
        return await self._get("/oauth/identity", None, GetIdentityResponse)

    @authentication_required
    async def get_user_profile(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        require_request(request)
        self.logger.info("discogs_get_user_profile", username=request.username)

        path = f"/users/{encode_path_segment(request.username)}"
        return await self._get(path, request, GetUserProfileResponse)

    @authentication_required
    async def edit_user_profile(self, request: EditUserProfileRequest) -> EditUserProfileResponse:
        """
        Edit the authenticated user's profile.

        Args:
            request: Username plus any of name, home_page, location, profile, curr_abbr

        Returns:
            EditUserProfileResponse with the updated profile
        """
        require_request(request)
        self.logger.info("discogs_edit_user_profile", username=request.username)

        path = f"/users/{encode_path_segment(request.username)}"
        return await self._post(path, request, EditUserProfileResponse)

    async def get_user_submissions(
        self, request: GetUserSubmissionsRequest
    ) -> GetUserSubmissionsResponse:
        """List the artists, labels and releases a user submitted (paginated)."""
        require_request(request)
        self.logger.info(
            "discogs_get_user_submissions",
            username=request.username,
            page=request.page,
        )

        path = f"/users/{encode_path_segment(request.username)}/submissions"
        return await self._get(path, request, GetUserSubmissionsResponse)

    async def get_user_contributions(
        self, request: GetUserContributionsRequest
    ) -> GetUserContributionsResponse:
        require_request(request)
        self.logger.info(
            "discogs_get_user_contributions",
            username=request.username,
            page=request.page,
        )

        path = f"/users/{encode_path_segment(request.username)}/contributions"
        return await self._get(path, request, GetUserContributionsResponse)
