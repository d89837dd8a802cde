"""Per-endpoint authentication requirements and the check run before each call."""

import functools
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog

from ..exceptions import AuthError
from .auth import AuthManager

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class AuthRequirement(Enum):
    """How an endpoint treats unauthenticated callers."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    NONE = "none"


@dataclass(frozen=True)
class ApiCall:
    """The facade method currently executing."""

    api_name: str
    method_name: str
    requirement: AuthRequirement


_current_call: ContextVar[Optional[ApiCall]] = ContextVar("discogs_api_call", default=None)


def current_api_call() -> Optional[ApiCall]:
    """Return the facade method executing in this task, if any."""
    return _current_call.get()


def _mark(requirement: AuthRequirement) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            token = _current_call.set(
                ApiCall(
                    api_name=type(self).__name__,
                    method_name=func.__name__,
                    requirement=requirement,
                )
            )
            try:
                return await func(self, *args, **kwargs)
            finally:
                _current_call.reset(token)

        wrapper.auth_requirement = requirement  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


authentication_required = _mark(AuthRequirement.REQUIRED)
authentication_required.__doc__ = "Mark a facade method as requiring an authenticated client."

authentication_optional = _mark(AuthRequirement.OPTIONAL)
authentication_optional.__doc__ = (
    "Mark a facade method whose response is richer when the client is authenticated."
)


class NoOpAuthVerifier:
    """Skips authentication checks; the API decides what to reject."""

    def check(self, auth_manager: Optional[AuthManager]) -> None:
        return None


class AuthVerifier:
    """
    Check the executing facade method's requirement against the auth manager.

    Required endpoints raise AuthError before any request is sent when the
    client has no credentials. Optional endpoints only log, since the API
    still answers with a reduced payload.
    """

    def __init__(self) -> None:
        self.logger = logger.bind(component="auth_verifier")

    def check(self, auth_manager: Optional[AuthManager]) -> None:
        call = current_api_call()
        if call is None or call.requirement is AuthRequirement.NONE:
            return
        if auth_manager is not None and auth_manager.is_authenticated:
            return

        message = (
            f"Client authorization is not configured to access "
            f"{call.api_name}::{call.method_name}"
        )
        if call.requirement is AuthRequirement.REQUIRED:
            raise AuthError(message)

        self.logger.info(
            "discogs_auth_optional_unauthenticated",
            api=call.api_name,
            method=call.method_name,
        )
