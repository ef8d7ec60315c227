"""Ports (interfaces) for the External bounded context."""

from external.ports.exceptions import ExternalFetchError
from external.ports.repositories import IExternalUserRepository

__all__ = ["ExternalFetchError", "IExternalUserRepository"]
