"""Top-level Discogs client exposing every API facade over one connection."""

from typing import Any, Optional

import structlog

from .api.collection import UserCollectionApi
from .api.database import DatabaseApi
from .api.identity import UserIdentityApi
from .api.inventory_export import InventoryExportApi
from .api.inventory_upload import InventoryUploadApi
from .api.lists import UserListsApi
from .api.marketplace import MarketplaceApi
from .api.wantlist import UserWantListApi
from .common.config import DEFAULT_BASE_URL, DiscogsConfig, HTTPConfig
from .connection.auth import (
    AuthManager,
    KeySecretAuthInfo,
    KeySecretAuthManager,
    OAuthInfo,
    OAuthManager,
    TokenAuthInfo,
    TokenAuthManager,
    UnauthenticatedAuthManager,
)
from .connection.connection import DiscogsConnection
from .connection.verifier import AuthVerifier, NoOpAuthVerifier

logger = structlog.get_logger(__name__)


def _require_user_agent(user_agent: str) -> str:
    if user_agent is None or not user_agent.strip():
        raise ValueError("user_agent must not be blank")
    return user_agent


class Discogs:
    """
    Entry point for the Discogs API.

    Each API area is a facade sharing the same connection. Use one of the
    ``new_*`` factories (or ``from_config``) and the client as an async
    context manager so the underlying HTTP pool is opened and closed.

    Example:
        >>> import asyncio
        >>> from discogs_sdk import Discogs
        >>> from discogs_sdk.models.database import GetArtistRequest
        >>>
        >>> async def main():
        ...     async with Discogs.new_token("TOKEN", "MyApp/1.0") as discogs:
        ...         identity = await discogs.user_identity.get_identity()
        ...         artist = await discogs.database.get_artist(GetArtistRequest(artist_id=108713))
        ...         print(identity.username, artist.name)
        >>>
        >>> asyncio.run(main())
    """

    def __init__(self, connection: DiscogsConnection):
        if connection is None:
            raise TypeError("connection must not be None")

        self.connection = connection
        self._database = DatabaseApi(connection)
        self._marketplace = MarketplaceApi(connection)
        self._user_collection = UserCollectionApi(connection)
        self._user_identity = UserIdentityApi(connection)
        self._user_lists = UserListsApi(connection)
        self._user_want_list = UserWantListApi(connection)
        self._inventory_export = InventoryExportApi(connection)
        self._inventory_upload = InventoryUploadApi(connection)

    async def __aenter__(self) -> "Discogs":
        await self.connection.open()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self.connection.close()

    @property
    def is_authenticated(self) -> bool:
        return self.connection.is_authenticated

    @property
    def database(self) -> DatabaseApi:
        return self._database

    @property
    def marketplace(self) -> MarketplaceApi:
        return self._marketplace

    @property
    def user_collection(self) -> UserCollectionApi:
        return self._user_collection

    @property
    def user_identity(self) -> UserIdentityApi:
        return self._user_identity

    @property
    def user_lists(self) -> UserListsApi:
        return self._user_lists

    @property
    def user_want_list(self) -> UserWantListApi:
        return self._user_want_list

    @property
    def inventory_export(self) -> InventoryExportApi:
        return self._inventory_export

    @property
    def inventory_upload(self) -> InventoryUploadApi:
        return self._inventory_upload

    @classmethod
    def _create(
        cls,
        auth_manager: AuthManager,
        user_agent: Optional[str],
        http_config: Optional[HTTPConfig] = None,
        base_url: str = DEFAULT_BASE_URL,
        verify_auth: bool = True,
    ) -> "Discogs":
        connection = DiscogsConnection(
            auth_manager=auth_manager,
            user_agent=user_agent,
            http_config=http_config,
            base_url=base_url,
            auth_verifier=AuthVerifier() if verify_auth else NoOpAuthVerifier(),
        )
        logger.debug(
            "discogs_client_created",
            auth=type(auth_manager).__name__,
            base_url=base_url,
        )
        return cls(connection)

    @classmethod
    def new_unauthenticated(cls, user_agent: str, **kwargs: Any) -> "Discogs":
        """
        Create a client without credentials.

        Endpoints marked as requiring authentication raise AuthError before
        sending anything.
        """
        return cls._create(UnauthenticatedAuthManager(), _require_user_agent(user_agent), **kwargs)

    @classmethod
    def new_key_secret(cls, key: str, secret: str, user_agent: str, **kwargs: Any) -> "Discogs":
        """
        Create a client authenticated with an application's consumer key and secret.

        Args:
            key: Consumer key
            secret: Consumer secret
            user_agent: User-Agent header value
            **kwargs: http_config, base_url or verify_auth overrides

        Raises:
            ValueError: If any argument is blank
        """
        auth_info = KeySecretAuthInfo(key=key, secret=secret)
        return cls._create(KeySecretAuthManager(auth_info), _require_user_agent(user_agent), **kwargs)

    @classmethod
    def new_token(cls, token: str, user_agent: str, **kwargs: Any) -> "Discogs":
        """Create a client authenticated with a personal access token."""
        auth_info = TokenAuthInfo(token=token)
        return cls._create(TokenAuthManager(auth_info), _require_user_agent(user_agent), **kwargs)

    @classmethod
    def new_oauth(
        cls,
        consumer: KeySecretAuthInfo,
        user_agent: str,
        oauth_info: OAuthInfo,
        **kwargs: Any,
    ) -> "Discogs":
        """
        Create a client acting on behalf of a user through OAuth 1.0a.

        Args:
            consumer: Application consumer key and secret
            user_agent: User-Agent header value
            oauth_info: Access token from ``OAuthFlow.fetch_access_token``
        """
        if consumer is None or oauth_info is None:
            raise TypeError("consumer and oauth_info must not be None")
        return cls._create(
            OAuthManager(consumer, oauth_info), _require_user_agent(user_agent), **kwargs
        )

    @classmethod
    def from_config(cls, config: DiscogsConfig) -> "Discogs":
        """
        Create a client from DiscogsConfig.

        Credentials are chosen by ``config.auth.method``. DISCOGS_API_KEY,
        DISCOGS_API_SECRET and DISCOGS_TOKEN override the configured values.

        Args:
            config: Discogs configuration (usually ``get_config().discogs``)

        Returns:
            Configured Discogs client

        Raises:
            ValueError: If the selected method is missing credentials

        Example:
            >>> config = Config.from_yaml(Path("config.yaml"))
            >>> async with Discogs.from_config(config.discogs) as discogs:
            ...     identity = await discogs.user_identity.get_identity()
        """
        if config is None:
            raise TypeError("config must not be None")

        auth = config.auth.resolved()
        kwargs = {
            "http_config": config.http,
            "base_url": config.base_url,
            "verify_auth": config.verify_auth,
        }
        user_agent = config.user_agent or None

        if auth.method == "key_secret":
            manager: AuthManager = KeySecretAuthManager(
                KeySecretAuthInfo(key=auth.key or "", secret=auth.secret or "")
            )
        elif auth.method == "token":
            manager = TokenAuthManager(TokenAuthInfo(token=auth.token or ""))
        elif auth.method == "oauth":
            manager = OAuthManager(
                KeySecretAuthInfo(key=auth.key or "", secret=auth.secret or ""),
                OAuthInfo(
                    token=auth.oauth_token or "",
                    token_secret=auth.oauth_token_secret or "",
                ),
            )
        else:
            manager = UnauthenticatedAuthManager()

        logger.info("discogs_client_from_config", auth_method=auth.method)
        return cls._create(manager, user_agent, **kwargs)
