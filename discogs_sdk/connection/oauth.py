"""Discogs OAuth 1.0a handshake (request token, authorize, access token)."""

import json
import os
from pathlib import Path
from typing import Optional
from urllib.parse import parse_qs, urlencode

import httpx
import structlog
from pydantic import BaseModel, Field

from ..exceptions import AuthError
from .auth import KeySecretAuthInfo, OAuthInfo, build_oauth_header

logger = structlog.get_logger(__name__)

REQUEST_TOKEN_URL = "https://api.discogs.com/oauth/request_token"
AUTHORIZE_URL = "https://www.discogs.com/oauth/authorize"
ACCESS_TOKEN_URL = "https://api.discogs.com/oauth/access_token"


class RequestTokenResponse(BaseModel):
    """Temporary credentials returned by the request-token step."""

    token: str = Field(description="oauth_token")
    token_secret: str = Field(description="oauth_token_secret")
    callback_confirmed: bool = Field(default=False, description="oauth_callback_confirmed")

    model_config = {"frozen": True}


class AccessTokenResponse(BaseModel):
    """Long-lived credentials returned by the access-token step."""

    token: str = Field(description="oauth_token")
    token_secret: str = Field(description="oauth_token_secret")

    model_config = {"frozen": True}

    def to_oauth_info(self) -> OAuthInfo:
        return OAuthInfo(token=self.token, token_secret=self.token_secret)


def _parse_form(body: str) -> dict:
    return {key: values[0] for key, values in parse_qs(body).items() if values}


class OAuthFlow:
    """
    Runs the three-legged Discogs OAuth 1.0a handshake.

    No local callback receiver is started. The caller sends the user to
    ``authorize_url``, then passes the verifier code shown by Discogs (or
    delivered to their own callback endpoint) to ``fetch_access_token``.

    Access tokens do not expire, so they can be cached to disk and reused
    with ``Discogs.new_oauth``.

    Example:
        >>> async def main():
        ...     flow = OAuthFlow(KeySecretAuthInfo(key="ck", secret="cs"), user_agent="MyApp/1.0")
        ...     request_token = await flow.fetch_request_token("oob")
        ...     print(flow.authorize_url(request_token))
        ...     verifier = input("Verifier: ")
        ...     oauth_info = await flow.fetch_access_token(request_token, verifier)
    """

    def __init__(
        self,
        consumer: KeySecretAuthInfo,
        user_agent: str,
        token_cache_path: Optional[Path] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the handshake.

        Args:
            consumer: Application consumer key and secret
            user_agent: User-Agent header value, required by Discogs
            token_cache_path: File to persist the access token (optional)
            http_client: Client to reuse; a short-lived one is created per call when omitted
        """
        if consumer is None:
            raise TypeError("consumer must not be None")
        if not user_agent or not user_agent.strip():
            raise ValueError("user_agent must not be blank")

        self.consumer = consumer
        self.user_agent = user_agent
        self.token_cache_path = token_cache_path
        self._http_client = http_client

    async def fetch_request_token(self, callback_url: str = "oob") -> RequestTokenResponse:
        """
        Obtain temporary request credentials.

        Args:
            callback_url: Where Discogs redirects after authorization, or "oob"

        Returns:
            RequestTokenResponse

        Raises:
            AuthError: If Discogs rejects the consumer credentials
        """
        logger.info("discogs_oauth_requesting_request_token")

        header = build_oauth_header(
            consumer_key=self.consumer.key,
            consumer_secret=self.consumer.secret,
            callback=callback_url,
        )
        data = await self._send("GET", REQUEST_TOKEN_URL, header)

        try:
            token = RequestTokenResponse(
                token=data["oauth_token"],
                token_secret=data["oauth_token_secret"],
                callback_confirmed=data.get("oauth_callback_confirmed") == "true",
            )
        except KeyError as e:
            raise AuthError(f"Request token response is missing {e}") from e

        logger.info(
            "discogs_oauth_request_token_obtained",
            callback_confirmed=token.callback_confirmed,
        )
        return token

    def authorize_url(self, request_token: RequestTokenResponse) -> str:
        """Return the page where the user grants the application access."""
        return f"{AUTHORIZE_URL}?{urlencode({'oauth_token': request_token.token})}"

    async def fetch_access_token(
        self, request_token: RequestTokenResponse, verifier: str
    ) -> OAuthInfo:
        """
        Exchange the request token and verifier for access credentials.

        Args:
            request_token: Result of ``fetch_request_token``
            verifier: Verifier code from the authorize step

        Returns:
            OAuthInfo for ``OAuthManager``

        Raises:
            ValueError: If verifier is blank
            AuthError: If Discogs rejects the exchange
        """
        if request_token is None:
            raise TypeError("request_token must not be None")
        if not verifier or not verifier.strip():
            raise ValueError("verifier must not be blank")

        logger.info("discogs_oauth_requesting_access_token")

        header = build_oauth_header(
            consumer_key=self.consumer.key,
            consumer_secret=self.consumer.secret,
            token=request_token.token,
            token_secret=request_token.token_secret,
            verifier=verifier.strip(),
        )
        data = await self._send("POST", ACCESS_TOKEN_URL, header)

        try:
            access = AccessTokenResponse(
                token=data["oauth_token"], token_secret=data["oauth_token_secret"]
            )
        except KeyError as e:
            raise AuthError(f"Access token response is missing {e}") from e

        logger.info("discogs_oauth_access_token_obtained")

        oauth_info = access.to_oauth_info()
        if self.token_cache_path:
            self.save_token(oauth_info)
        return oauth_info

    def load_token(self) -> Optional[OAuthInfo]:
        """Return the cached access token, or None when no usable cache exists."""
        if not self.token_cache_path or not self.token_cache_path.exists():
            return None

        try:
            with open(self.token_cache_path, "r") as f:
                data = json.load(f)
            oauth_info = OAuthInfo(token=data["token"], token_secret=data["token_secret"])
        except (OSError, ValueError, KeyError) as e:
            logger.warning(
                "discogs_oauth_token_cache_load_failed",
                error=str(e),
                cache_path=str(self.token_cache_path),
            )
            return None

        logger.info("discogs_oauth_token_loaded_from_cache", cache_path=str(self.token_cache_path))
        return oauth_info

    def save_token(self, oauth_info: OAuthInfo) -> None:
        """Persist the access token to ``token_cache_path``."""
        if not self.token_cache_path:
            raise ValueError("token_cache_path is not configured")

        self.token_cache_path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only: the file holds a live token secret
        fd = os.open(self.token_cache_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            # O_CREAT only applies the mode to new files
            os.chmod(self.token_cache_path, 0o600)
            json.dump(
                {"token": oauth_info.token, "token_secret": oauth_info.token_secret},
                f,
                indent=2,
            )

        logger.debug("discogs_oauth_token_cached", cache_path=str(self.token_cache_path))

    async def _send(self, method: str, url: str, authorization: str) -> dict:
        headers = {
            "Authorization": authorization,
            "User-Agent": self.user_agent,
            "Content-Type": "application/x-www-form-urlencoded",
        }
        try:
            if self._http_client is not None:
                response = await self._http_client.request(method, url, headers=headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(method, url, headers=headers)
        except httpx.HTTPError as e:
            raise AuthError(f"OAuth request to {url} failed: {e}") from e

        if not response.is_success:
            logger.warning(
                "discogs_oauth_request_failed",
                url=url,
                status_code=response.status_code,
            )
            raise AuthError(
                f"OAuth request to {url} failed with HTTP {response.status_code}: {response.text}"
            )

        return _parse_form(response.text)
