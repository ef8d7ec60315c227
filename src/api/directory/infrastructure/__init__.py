"""Directory infrastructure: in-memory store and seed data."""

from directory.infrastructure.in_memory_repository import InMemoryDirectoryRepository
from directory.infrastructure.seed import create_seeded_repository, seed_directory

__all__ = [
    "InMemoryDirectoryRepository",
    "create_seeded_repository",
    "seed_directory",
]
