"""Database API: releases, masters, artists, labels and search."""

from ..connection.verifier import authentication_required
from ..models.database import (
    DeleteUserReleaseRatingRequest,
    GetArtistReleasesRequest,
    GetArtistReleasesResponse,
    GetArtistRequest,
    GetArtistResponse,
    GetCommunityReleaseRatingRequest,
    GetCommunityReleaseRatingResponse,
    GetLabelReleasesRequest,
    GetLabelReleasesResponse,
    GetLabelRequest,
    GetLabelResponse,
    GetMasterReleaseRequest,
    GetMasterReleaseResponse,
    GetMasterReleaseVersionsRequest,
    GetMasterReleaseVersionsResponse,
    GetReleaseRequest,
    GetReleaseResponse,
    GetUserReleaseRatingRequest,
    GetUserReleaseRatingResponse,
    SearchRequest,
    SearchResponse,
    UpdateUserReleaseRatingRequest,
    UpdateUserReleaseRatingResponse,
)
from .base import ApiBase, encode_path_segment, require_request


class DatabaseApi(ApiBase):
    """
    Client for the Discogs database endpoints.

    Release, master, artist and label lookups work without authentication;
    search and user ratings require it. The release statistics endpoint
    (/releases/{id}/stats) is intentionally not exposed because Discogs
    returns unreliable data for it.

    Example:
        >>> async with Discogs.new_token("TOKEN", "MyApp/1.0") as discogs:
        ...     release = await discogs.database.get_release(
        ...         GetReleaseRequest(release_id=249504, curr_abbr=Currency.USD)
        ...     )
        ...     print(f"{release.title} ({release.year})")
        ...
        ...     results = await discogs.database.search(
        ...         SearchRequest(artist="nirvana", type=SearchType.MASTER)
        ...     )
        ...     for result in results.results:
        ...         print(result.title)
    """

    async def get_release(self, request: GetReleaseRequest) -> GetReleaseResponse:
        """
        Get a release: a particular physical or digital object released by one or more artists.

        Args:
            request: Release ID and optional currency for marketplace data

        Returns:
            GetReleaseResponse with artists, labels, formats, tracklist, images, etc.

        Raises:
            TypeError: If request is None
            RequestError: If the release does not exist (404) or the request is invalid
            ResponseError: If Discogs fails to respond

        Example:
            >>> release = await database.get_release(GetReleaseRequest(release_id=249504))
            >>> print(release.formats[0].name)
        """
        require_request(request)
        self.logger.info("discogs_get_release", release_id=request.release_id)

        path = f"/releases/{request.release_id}"
        return await self._get(path, request, GetReleaseResponse)

    async def get_user_release_rating(
        self, request: GetUserReleaseRatingRequest
    ) -> GetUserReleaseRatingResponse:
        """
        Get the rating a user gave a release.

        Args:
            request: Release ID and username

        Returns:
            GetUserReleaseRatingResponse (rating is 0 when the user has not rated)
        """
        require_request(request)
        self.logger.info(
            "discogs_get_user_release_rating",
            release_id=request.release_id,
            username=request.username,
        )

        path = f"/releases/{request.release_id}/rating/{encode_path_segment(request.username)}"
        return await self._get(path, request, GetUserReleaseRatingResponse)

    @authentication_required
    async def update_user_release_rating(
        self, request: UpdateUserReleaseRatingRequest
    ) -> UpdateUserReleaseRatingResponse:
        """
        Set the authenticated user's rating for a release.

        Args:
            request: Release ID, username and a rating from 1 to 5

        Returns:
            UpdateUserReleaseRatingResponse echoing the stored rating

        Raises:
            AuthError: If the client is not authenticated
        """
        require_request(request)
        self.logger.info(
            "discogs_update_user_release_rating",
            release_id=request.release_id,
            username=request.username,
            rating=request.rating,
        )

        path = f"/releases/{request.release_id}/rating/{encode_path_segment(request.username)}"
        return await self._put(path, request, UpdateUserReleaseRatingResponse)

    @authentication_required
    async def delete_user_release_rating(self, request: DeleteUserReleaseRatingRequest) -> None:
        """Remove the authenticated user's rating for a release."""
        require_request(request)
        self.logger.info(
            "discogs_delete_user_release_rating",
            release_id=request.release_id,
            username=request.username,
        )

        path = f"/releases/{request.release_id}/rating/{encode_path_segment(request.username)}"
        await self._delete(path, request)

    async def get_community_release_rating(
        self, request: GetCommunityReleaseRatingRequest
    ) -> GetCommunityReleaseRatingResponse:
        """Get the average community rating and number of votes for a release."""
        require_request(request)
        self.logger.info("discogs_get_community_release_rating", release_id=request.release_id)

        path = f"/releases/{request.release_id}/rating"
        return await self._get(path, request, GetCommunityReleaseRatingResponse)

    async def get_master_release(self, request: GetMasterReleaseRequest) -> GetMasterReleaseResponse:
        """
        Get a master release: the set of similar releases of the same recording.

        Args:
            request: Master release ID

        Returns:
            GetMasterReleaseResponse with main_release, versions_url, tracklist, etc.
        """
        require_request(request)
        self.logger.info("discogs_get_master", master_id=request.master_id)

        path = f"/masters/{request.master_id}"
        return await self._get(path, request, GetMasterReleaseResponse)

    async def get_master_release_versions(
        self, request: GetMasterReleaseVersionsRequest
    ) -> GetMasterReleaseVersionsResponse:
        """
        List every release that belongs to a master.

        Args:
            request: Master ID plus optional format/label/released/country
                filters, sorting and pagination

        Returns:
            Paginated GetMasterReleaseVersionsResponse
        """
        require_request(request)
        self.logger.info(
            "discogs_get_master_versions",
            master_id=request.master_id,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"/masters/{request.master_id}/versions"
        return await self._get(path, request, GetMasterReleaseVersionsResponse)

    async def get_artist(self, request: GetArtistRequest) -> GetArtistResponse:
        """Get an artist: a person or group credited on releases."""
        require_request(request)
        self.logger.info("discogs_get_artist", artist_id=request.artist_id)

        path = f"/artists/{request.artist_id}"
        return await self._get(path, request, GetArtistResponse)

    async def get_artist_releases(
        self, request: GetArtistReleasesRequest
    ) -> GetArtistReleasesResponse:
        """
        List the releases and masters credited to an artist.

        Args:
            request: Artist ID, optional sort (year, title, format), sort order and pagination

        Returns:
            Paginated GetArtistReleasesResponse

        Example:
            >>> releases = await database.get_artist_releases(
            ...     GetArtistReleasesRequest(artist_id=125246, sort=ArtistReleasesSortKey.YEAR)
            ... )
            >>> print(f"Total: {releases.pagination.items} releases")
        """
        require_request(request)
        self.logger.info(
            "discogs_get_artist_releases",
            artist_id=request.artist_id,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"/artists/{request.artist_id}/releases"
        return await self._get(path, request, GetArtistReleasesResponse)

    async def get_label(self, request: GetLabelRequest) -> GetLabelResponse:
        """Get a label, company, recording studio or similar entity."""
        require_request(request)
        self.logger.info("discogs_get_label", label_id=request.label_id)

        path = f"/labels/{request.label_id}"
        return await self._get(path, request, GetLabelResponse)

    async def get_label_releases(self, request: GetLabelReleasesRequest) -> GetLabelReleasesResponse:
        """List the releases associated with a label (paginated)."""
        require_request(request)
        self.logger.info(
            "discogs_get_label_releases",
            label_id=request.label_id,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"/labels/{request.label_id}/releases"
        return await self._get(path, request, GetLabelReleasesResponse)

    @authentication_required
    async def search(self, request: SearchRequest) -> SearchResponse:
        """
        Search the Discogs database.

        Args:
            request: Any combination of query, type, title, artist, label,
                genre, style, country, year, format, catalog number, barcode,
                track, submitter and contributor, plus pagination

        Returns:
            Paginated SearchResponse

        Raises:
            AuthError: If the client is not authenticated

        Example:
            >>> results = await database.search(
            ...     SearchRequest(artist="nirvana", track="smells like teen spirit", type=SearchType.MASTER)
            ... )
            >>> for result in results.results:
            ...     print(f"{result.title} ({result.year})")
        """
        require_request(request)
        self.logger.info(
            "discogs_search",
            query=request.query,
            type=request.type.value if request.type else None,
            page=request.page,
            per_page=request.per_page,
        )

        return await self._get("/database/search", request, SearchResponse)
