"""Repository interfaces (ports) for the External bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from external.ports.jsonplaceholder_models import JsonPlaceholderUser


@runtime_checkable
class IExternalUserRepository(Protocol):
    """Read-only access to the third-party user resource.

    Implementations are bound to a fixed base URL and a bounded timeout.
    """

    def get_user(self, user_id: str) -> JsonPlaceholderUser:
        """Fetch one user (`GET /users/{user_id}`).

        Raises:
            ExternalFetchError: If the request fails or the body does not parse
        """
        ...

    def list_users(self) -> list[JsonPlaceholderUser]:
        """Fetch all users (`GET /users`).

        Raises:
            ExternalFetchError: If the request fails or the body does not parse
        """
        ...
