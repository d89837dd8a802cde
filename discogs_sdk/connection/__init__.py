"""HTTP connection, authentication and file transfer support."""

from .auth import (
    AuthManager,
    KeySecretAuthInfo,
    KeySecretAuthManager,
    OAuthInfo,
    OAuthManager,
    TokenAuthInfo,
    TokenAuthManager,
    UnauthenticatedAuthManager,
    build_oauth_header,
)
from .connection import TEXT_CSV_TYPE, DiscogsConnection, default_user_agent, parse_file_name
from .oauth import AccessTokenResponse, OAuthFlow, RequestTokenResponse
from .transfer import (
    DownloadInformation,
    TransferProgressCallback,
    UploadInformation,
    logging_progress_callback,
)
from .verifier import (
    AuthVerifier,
    NoOpAuthVerifier,
    authentication_optional,
    authentication_required,
)

__all__ = [
    "AccessTokenResponse",
    "AuthManager",
    "AuthVerifier",
    "DiscogsConnection",
    "DownloadInformation",
    "KeySecretAuthInfo",
    "KeySecretAuthManager",
    "NoOpAuthVerifier",
    "OAuthFlow",
    "OAuthInfo",
    "OAuthManager",
    "RequestTokenResponse",
    "TEXT_CSV_TYPE",
    "TokenAuthInfo",
    "TokenAuthManager",
    "TransferProgressCallback",
    "UnauthenticatedAuthManager",
    "UploadInformation",
    "authentication_optional",
    "authentication_required",
    "build_oauth_header",
    "default_user_agent",
    "logging_progress_callback",
    "parse_file_name",
]
