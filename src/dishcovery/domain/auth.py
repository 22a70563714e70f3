"""Authenticated user identity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthenticatedUser:
    """The user behind a verified access token."""

    id: UUID
    email: str | None
