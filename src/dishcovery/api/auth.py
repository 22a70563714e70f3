"""Bearer-token authentication for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from dishcovery.config import parse_bearer_token
from dishcovery.domain.auth import AuthenticatedUser  # noqa: TC001
from dishcovery.errors import AuthenticationRequiredError

if TYPE_CHECKING:
    from dishcovery.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> AuthenticatedUser:
    """Resolve the Supabase access token to the acting user or fail with 401."""
    token = parse_bearer_token(authorization)
    if token is None:
        raise AuthenticationRequiredError()
    user = get_container(request).auth_client.get_user(token)
    if user is None:
        raise AuthenticationRequiredError()
    return user
