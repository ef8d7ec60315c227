"""Unit tests for the plugin composition root."""

from unittest.mock import patch

import pytest

from directory.application.services import UserDirectoryService
from external.application.services import ExternalUserService
from infrastructure.settings import ExternalApiSettings
from plugin import dependencies
from plugin.servicer import UsersServicer


@pytest.fixture(autouse=True)
def clear_caches():
    """Reset cached singletons around each test."""
    dependencies.get_directory_repository.cache_clear()
    dependencies.close_resources()
    yield
    dependencies.get_directory_repository.cache_clear()
    dependencies.close_resources()


class TestDirectoryDependencies:
    def test_repository_is_shared(self):
        assert (
            dependencies.get_directory_repository()
            is dependencies.get_directory_repository()
        )

    def test_repository_is_seeded(self):
        assert len(dependencies.get_directory_repository().get_all()) == 4

    def test_services_share_one_directory(self):
        first = dependencies.get_user_directory_service()
        second = dependencies.get_user_directory_service()

        first.create_post(title="Shared", author_id="1")

        assert isinstance(second, UserDirectoryService)
        assert second.get_user_activity("1")[0].post.title == "Shared"


class TestExternalDependencies:
    def test_repository_uses_external_api_settings(self):
        settings = ExternalApiSettings(
            base_url="https://api.example.test/", timeout_seconds=1.5
        )

        with patch.object(
            dependencies, "get_external_api_settings", return_value=settings
        ):
            repository = dependencies.get_external_user_repository()

        assert repository._client.base_url.host == "api.example.test"
        assert repository._client.timeout.connect == 1.5

    def test_external_service(self):
        assert isinstance(
            dependencies.get_external_user_service(), ExternalUserService
        )

    def test_close_resources_closes_client_and_clears_cache(self):
        repository = dependencies.get_external_user_repository()

        dependencies.close_resources()

        assert repository._client.is_closed
        assert dependencies.get_external_user_repository() is not repository

    def test_close_resources_without_client_is_a_no_op(self):
        dependencies.close_resources()

        assert dependencies.get_external_user_repository.cache_info().currsize == 0


def test_users_servicer_is_composed():
    assert isinstance(dependencies.get_users_servicer(), UsersServicer)
