"""Unit test fixtures shared across contexts."""

from unittest.mock import create_autospec

import pytest

from directory.application.observability import DirectoryServiceProbe
from directory.application.services import UserDirectoryService
from directory.infrastructure.in_memory_repository import InMemoryDirectoryRepository
from directory.infrastructure.seed import create_seeded_repository


@pytest.fixture
def seeded_repository() -> InMemoryDirectoryRepository:
    """Provide a fresh directory holding the seed data."""
    return create_seeded_repository()


@pytest.fixture
def mock_directory_probe():
    """Create mock directory service probe."""
    return create_autospec(DirectoryServiceProbe, instance=True)


@pytest.fixture
def directory_service(seeded_repository, mock_directory_probe) -> UserDirectoryService:
    """Provide a directory service over the seeded directory."""
    return UserDirectoryService(repository=seeded_repository, probe=mock_directory_probe)


@pytest.fixture
def jsonplaceholder_user_payload() -> dict:
    """A user as returned by JSONPlaceholder's /users/1."""
    return {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    }
