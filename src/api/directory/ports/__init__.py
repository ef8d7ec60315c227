"""Ports (interfaces) for the Directory bounded context.

Ports define the contracts between the application layer and the
directory store, keeping the domain independent of how records are held.
"""

from directory.ports.exceptions import AuthorNotFoundError, UserNotFoundError
from directory.ports.repositories import IDirectoryRepository

__all__ = [
    "AuthorNotFoundError",
    "IDirectoryRepository",
    "UserNotFoundError",
]
