"""External infrastructure: HTTP access to the third-party user API."""

from external.infrastructure.jsonplaceholder_repository import JsonPlaceholderRepository

__all__ = ["JsonPlaceholderRepository"]
