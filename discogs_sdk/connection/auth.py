"""Authentication managers that produce Discogs Authorization headers."""

import secrets
import string
import time
from typing import Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field, field_validator

_NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_LENGTH = 12


def _not_blank(value: str, name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{name} must not be blank")
    return value


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """Return a random alphanumeric string for ``oauth_nonce``."""
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(length))


class KeySecretAuthInfo(BaseModel):
    """Consumer key and secret registered for a Discogs application."""

    key: str = Field(description="Consumer key")
    secret: str = Field(description="Consumer secret")

    model_config = {"frozen": True}

    @field_validator("key", "secret")
    @classmethod
    def validate_not_blank(cls, v: str, info) -> str:
        return _not_blank(v, info.field_name)

    def __repr__(self) -> str:
        return f"KeySecretAuthInfo(key={self.key!r}, secret='***')"


class TokenAuthInfo(BaseModel):
    """Personal access token generated from the Discogs developer settings."""

    token: str = Field(description="Personal access token")

    model_config = {"frozen": True}

    @field_validator("token")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return _not_blank(v, "token")

    def __repr__(self) -> str:
        return "TokenAuthInfo(token='***')"


class OAuthInfo(BaseModel):
    """OAuth 1.0a access token and secret obtained from the handshake."""

    token: str = Field(description="OAuth access token")
    token_secret: str = Field(description="OAuth access token secret")

    model_config = {"frozen": True}

    @field_validator("token", "token_secret")
    @classmethod
    def validate_not_blank(cls, v: str, info) -> str:
        return _not_blank(v, info.field_name)

    def __repr__(self) -> str:
        return f"OAuthInfo(token={self.token!r}, token_secret='***')"


class AuthManager:
    """Base class for objects that attach credentials to outgoing requests."""

    is_authenticated: bool = False

    @property
    def auth_info(self) -> Optional[BaseModel]:
        return None

    def auth_headers(self) -> Dict[str, str]:
        """Return the headers to add to a request."""
        return {}


class UnauthenticatedAuthManager(AuthManager):
    """Sends requests without credentials. Only public endpoints will succeed."""

    pass


class KeySecretAuthManager(AuthManager):
    """Authenticates with the application's consumer key and secret.

    Key/secret auth unlocks image URLs and database search but does not
    identify a user, so user-scoped endpoints still require a token or OAuth.
    """

    is_authenticated = True

    def __init__(self, auth_info: KeySecretAuthInfo):
        if auth_info is None:
            raise TypeError("auth_info must not be None")
        self._auth_info = auth_info

    @property
    def auth_info(self) -> KeySecretAuthInfo:
        return self._auth_info

    def auth_headers(self) -> Dict[str, str]:
        key = quote(self._auth_info.key, safe="")
        secret = quote(self._auth_info.secret, safe="")
        return {"Authorization": f"Discogs key={key}, secret={secret}"}


class TokenAuthManager(AuthManager):
    """Authenticates as a single user with a personal access token."""

    is_authenticated = True

    def __init__(self, auth_info: TokenAuthInfo):
        if auth_info is None:
            raise TypeError("auth_info must not be None")
        self._auth_info = auth_info

    @property
    def auth_info(self) -> TokenAuthInfo:
        return self._auth_info

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Discogs token={self._auth_info.token}"}


class OAuthManager(AuthManager):
    """Signs requests with OAuth 1.0a using the PLAINTEXT signature method.

    Discogs accepts PLAINTEXT over HTTPS, so the signature is simply the
    consumer secret and token secret joined with ``&``.
    """

    is_authenticated = True

    def __init__(self, consumer: KeySecretAuthInfo, oauth_info: OAuthInfo):
        if consumer is None:
            raise TypeError("consumer must not be None")
        if oauth_info is None:
            raise TypeError("oauth_info must not be None")
        self.consumer = consumer
        self._auth_info = oauth_info

    @property
    def auth_info(self) -> OAuthInfo:
        return self._auth_info

    def auth_headers(self) -> Dict[str, str]:
        return {
            "Authorization": build_oauth_header(
                consumer_key=self.consumer.key,
                consumer_secret=self.consumer.secret,
                token=self._auth_info.token,
                token_secret=self._auth_info.token_secret,
            )
        }


def build_oauth_header(
    consumer_key: str,
    consumer_secret: str,
    token: Optional[str] = None,
    token_secret: Optional[str] = None,
    callback: Optional[str] = None,
    verifier: Optional[str] = None,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> str:
    """
    Build an OAuth 1.0a Authorization header value with a PLAINTEXT signature.

    Args:
        consumer_key: Application consumer key
        consumer_secret: Application consumer secret
        token: Request or access token (omitted during the request-token step)
        token_secret: Secret paired with ``token``
        callback: Callback URL (request-token step only)
        verifier: Verifier code returned by the authorize page (access-token step only)
        nonce: Fixed nonce, generated when omitted
        timestamp: Fixed epoch seconds, current time when omitted

    Returns:
        Header value starting with ``OAuth``

    Example:
        >>> build_oauth_header("ck", "cs", token="t", token_secret="ts", nonce="abc", timestamp=1)
        'OAuth oauth_consumer_key="ck", oauth_nonce="abc", oauth_signature_method="PLAINTEXT", oauth_timestamp="1", oauth_token="t", oauth_signature="cs&ts"'
    """
    params = [
        ("oauth_consumer_key", consumer_key),
        ("oauth_nonce", nonce or generate_nonce()),
        ("oauth_signature_method", "PLAINTEXT"),
        ("oauth_timestamp", str(timestamp if timestamp is not None else int(time.time()))),
    ]
    if token:
        params.append(("oauth_token", token))
    if callback:
        params.append(("oauth_callback", quote(callback, safe="")))
    if verifier:
        params.append(("oauth_verifier", verifier))
    params.append(("oauth_signature", f"{consumer_secret}&{token_secret or ''}"))

    return "OAuth " + ", ".join(f'{name}="{value}"' for name, value in params)
