"""Application services for the External bounded context."""

from __future__ import annotations

from external.application.observability import (
    DefaultExternalUserServiceProbe,
    ExternalUserServiceProbe,
)
from external.application.translation import to_external_user
from external.domain.value_objects import ExternalUser
from external.ports.exceptions import ExternalFetchError
from external.ports.repositories import IExternalUserRepository


class ExternalUserService:
    """Serves read-only external user records.

    This path never touches the local directory. Fetch failures are
    reported and re-raised unchanged.
    """

    def __init__(
        self,
        repository: IExternalUserRepository,
        probe: ExternalUserServiceProbe | None = None,
    ):
        """Initialize the service.

        Args:
            repository: Access to the third-party user resource.
            probe: Optional domain probe for observability.
        """
        self._repository = repository
        self._probe = probe or DefaultExternalUserServiceProbe()

    def fetch_external_user(self, user_id: str) -> ExternalUser:
        """Fetch and translate one external user.

        Raises:
            ExternalFetchError: If the external API call fails.
        """
        try:
            source = self._repository.get_user(user_id)
        except ExternalFetchError as e:
            self._probe.external_fetch_failed(error=str(e), user_id=user_id)
            raise

        self._probe.external_users_fetched(count=1, user_id=user_id)
        return to_external_user(source)

    def fetch_external_users(self) -> list[ExternalUser]:
        """Fetch and translate every external user.

        Raises:
            ExternalFetchError: If the external API call fails.
        """
        try:
            sources = self._repository.list_users()
        except ExternalFetchError as e:
            self._probe.external_fetch_failed(error=str(e))
            raise

        self._probe.external_users_fetched(count=len(sources))
        return [to_external_user(source) for source in sources]
