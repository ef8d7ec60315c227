"""External application layer."""

from external.application.services import ExternalUserService

__all__ = ["ExternalUserService"]
