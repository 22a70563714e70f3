"""Access token verification against Supabase Auth."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from supabase import AuthError, Client

from dishcovery.domain.auth import AuthenticatedUser

logger = logging.getLogger(__name__)


class AuthClient(Protocol):
    """Interface for resolving an access token to a user."""

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        """Return the user for a valid token, or None."""


@dataclass
class SupabaseAuthClient(AuthClient):
    """Auth client that asks Supabase Auth who owns a JWT."""

    client: Client

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        """Verify the token with Supabase and return the user it belongs to."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        user = getattr(response, "user", None) if response else None
        if user is None:
            return None
        return AuthenticatedUser(id=UUID(str(user.id)), email=user.email)
