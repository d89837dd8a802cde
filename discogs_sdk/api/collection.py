"""User Collection API: folders, collection items, custom fields and value."""

from ..connection.verifier import authentication_optional, authentication_required
from ..models.collection import (
    AddToFolderRequest,
    AddToFolderResponse,
    ChangeReleaseRatingRequest,
    CreateFolderRequest,
    CreateFolderResponse,
    DeleteFolderRequest,
    DeleteInstanceRequest,
    EditInstanceFieldRequest,
    GetCollectionItemsByFolderRequest,
    GetCollectionItemsByFolderResponse,
    GetCollectionItemsByReleaseRequest,
    GetCollectionItemsByReleaseResponse,
    GetCollectionValueRequest,
    GetCollectionValueResponse,
    GetCustomFieldsRequest,
    GetCustomFieldsResponse,
    GetFolderRequest,
    GetFolderResponse,
    GetFoldersRequest,
    GetFoldersResponse,
    MoveReleaseRequest,
    RenameFolderRequest,
    RenameFolderResponse,
)
from .base import ApiBase, encode_path_segment, require_request


def _collection_path(username: str) -> str:
    return f"/users/{encode_path_segment(username)}/collection"


def _instance_path(request) -> str:
    return (
        f"{_collection_path(request.username)}/folders/{request.folder_id}"
        f"/releases/{request.release_id}/instances/{request.instance_id}"
    )


class UserCollectionApi(ApiBase):
    """
    Client for a user's collection.

    Folder 0 ("All") and folder 1 ("Uncategorized") always exist. Private
    folders and fields are only visible to the authenticated owner.
    """

    @authentication_optional
    async def get_folders(self, request: GetFoldersRequest) -> GetFoldersResponse:
        """
        List a user's collection folders.

        Without authentication only folder 0 is returned, and only when the
        collection is public.
        """
        require_request(request)
        self.logger.info("discogs_get_folders", username=request.username)

        path = f"{_collection_path(request.username)}/folders"
        return await self._get(path, request, GetFoldersResponse)

    @authentication_required
    async def create_folder(self, request: CreateFolderRequest) -> CreateFolderResponse:
        require_request(request)
        self.logger.info("discogs_create_folder", username=request.username, name=request.name)

        path = f"{_collection_path(request.username)}/folders"
        return await self._post(path, request, CreateFolderResponse)

    @authentication_optional
    async def get_folder(self, request: GetFolderRequest) -> GetFolderResponse:
        require_request(request)
        self.logger.info(
            "discogs_get_folder", username=request.username, folder_id=request.folder_id
        )

        path = f"{_collection_path(request.username)}/folders/{request.folder_id}"
        return await self._get(path, request, GetFolderResponse)

    @authentication_required
    async def rename_folder(self, request: RenameFolderRequest) -> RenameFolderResponse:
        require_request(request)
        self.logger.info(
            "discogs_rename_folder",
            username=request.username,
            folder_id=request.folder_id,
            name=request.name,
        )

        path = f"{_collection_path(request.username)}/folders/{request.folder_id}"
        return await self._post(path, request, RenameFolderResponse)

    @authentication_required
    async def delete_folder(self, request: DeleteFolderRequest) -> None:
        """Delete a folder. Discogs rejects the call unless the folder is empty."""
        require_request(request)
        self.logger.info(
            "discogs_delete_folder", username=request.username, folder_id=request.folder_id
        )

        path = f"{_collection_path(request.username)}/folders/{request.folder_id}"
        await self._delete(path, request)

    @authentication_optional
    async def get_collection_items_by_release(
        self, request: GetCollectionItemsByReleaseRequest
    ) -> GetCollectionItemsByReleaseResponse:
        """Find every instance of a release in a user's collection."""
        require_request(request)
        self.logger.info(
            "discogs_get_collection_items_by_release",
            username=request.username,
            release_id=request.release_id,
        )

        path = f"{_collection_path(request.username)}/releases/{request.release_id}"
        return await self._get(path, request, GetCollectionItemsByReleaseResponse)

    @authentication_optional
    async def get_collection_items_by_folder(
        self, request: GetCollectionItemsByFolderRequest
    ) -> GetCollectionItemsByFolderResponse:
        """
        List the releases in a collection folder.

        Args:
            request: Username, folder ID, optional sort/sort_order and pagination

        Returns:
            Paginated GetCollectionItemsByFolderResponse
        """
        require_request(request)
        self.logger.info(
            "discogs_get_collection_items_by_folder",
            username=request.username,
            folder_id=request.folder_id,
            page=request.page,
            per_page=request.per_page,
        )

        path = f"{_collection_path(request.username)}/folders/{request.folder_id}/releases"
        return await self._get(path, request, GetCollectionItemsByFolderResponse)

    @authentication_required
    async def add_to_folder(self, request: AddToFolderRequest) -> AddToFolderResponse:
        """Add a release to a folder, returning the new instance ID."""
        require_request(request)
        self.logger.info(
            "discogs_add_to_folder",
            username=request.username,
            folder_id=request.folder_id,
            release_id=request.release_id,
        )

        path = (
            f"{_collection_path(request.username)}/folders/{request.folder_id}"
            f"/releases/{request.release_id}"
        )
        return await self._post(path, request, AddToFolderResponse)

    @authentication_required
    async def change_release_rating(self, request: ChangeReleaseRatingRequest) -> None:
        require_request(request)
        self.logger.info(
            "discogs_change_release_rating",
            username=request.username,
            instance_id=request.instance_id,
            rating=request.rating,
        )

        await self._post(_instance_path(request), request)

    @authentication_required
    async def move_release(self, request: MoveReleaseRequest) -> None:
        """Move a release instance from ``folder_id`` to ``destination_folder_id``."""
        require_request(request)
        self.logger.info(
            "discogs_move_release",
            username=request.username,
            instance_id=request.instance_id,
            folder_id=request.folder_id,
            destination_folder_id=request.destination_folder_id,
        )

        await self._post(_instance_path(request), request)

    @authentication_required
    async def delete_instance(self, request: DeleteInstanceRequest) -> None:
        require_request(request)
        self.logger.info(
            "discogs_delete_instance",
            username=request.username,
            instance_id=request.instance_id,
        )

        await self._delete(_instance_path(request), request)

    @authentication_optional
    async def get_custom_fields(self, request: GetCustomFieldsRequest) -> GetCustomFieldsResponse:
        """List custom collection fields; private fields need the owner's credentials."""
        require_request(request)
        self.logger.info("discogs_get_custom_fields", username=request.username)

        path = f"{_collection_path(request.username)}/fields"
        return await self._get(path, request, GetCustomFieldsResponse)

    @authentication_required
    async def edit_instance_field(self, request: EditInstanceFieldRequest) -> None:
        """
        Set the value of a custom field on a release instance.

        Args:
            request: Instance coordinates, the field ID and its new value
                (sent as the ``value`` query parameter)
        """
        require_request(request)
        self.logger.info(
            "discogs_edit_instance_field",
            username=request.username,
            instance_id=request.instance_id,
            field_id=request.field_id,
        )

        path = f"{_instance_path(request)}/fields/{request.field_id}"
        await self._post(path, request)

    @authentication_required
    async def get_collection_value(
        self, request: GetCollectionValueRequest
    ) -> GetCollectionValueResponse:
        """Get the minimum, median and maximum value of a user's collection."""
        require_request(request)
        self.logger.info("discogs_get_collection_value", username=request.username)

        path = f"{_collection_path(request.username)}/value"
        return await self._get(path, request, GetCollectionValueResponse)
