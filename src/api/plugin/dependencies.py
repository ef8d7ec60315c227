"""Composition root for the plugin.

Wires the Directory and External contexts together for both the gRPC
server and the HTTP mirror. Instances are process-wide singletons so both
surfaces share one directory.
"""

from functools import lru_cache

from directory.application.services import UserDirectoryService
from directory.infrastructure.in_memory_repository import InMemoryDirectoryRepository
from directory.infrastructure.seed import create_seeded_repository
from external.application.services import ExternalUserService
from external.infrastructure.jsonplaceholder_repository import JsonPlaceholderRepository
from infrastructure.settings import get_external_api_settings
from plugin.servicer import UsersServicer


@lru_cache
def get_directory_repository() -> InMemoryDirectoryRepository:
    """Get the shared directory store, seeded on first use."""
    return create_seeded_repository()


@lru_cache
def get_external_user_repository() -> JsonPlaceholderRepository:
    """Get the shared external API repository.

    The repository owns an HTTP connection pool; call `close_resources`
    on shutdown.
    """
    settings = get_external_api_settings()
    return JsonPlaceholderRepository(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )


def get_user_directory_service() -> UserDirectoryService:
    """Get UserDirectoryService over the shared directory store."""
    return UserDirectoryService(repository=get_directory_repository())


def get_external_user_service() -> ExternalUserService:
    """Get ExternalUserService over the shared external repository."""
    return ExternalUserService(repository=get_external_user_repository())


def get_users_servicer() -> UsersServicer:
    return UsersServicer(
        directory_service=get_user_directory_service(),
        external_service=get_external_user_service(),
    )


def close_resources() -> None:
    """Release the external HTTP client if it was created."""
    if get_external_user_repository.cache_info().currsize:
        get_external_user_repository().close()
        get_external_user_repository.cache_clear()
