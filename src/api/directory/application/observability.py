"""Domain probes for the Directory application layer.

Following Domain Oriented Observability pattern.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class DirectoryServiceProbe(Protocol):
    """Domain probe for user directory operations."""

    def users_looked_up(self, requested: int, missing: list[str]) -> None:
        """Record a batch lookup and the ids that got placeholders."""
        ...

    def user_updated(self, user_id: str, changed_fields: list[str]) -> None:
        """Record that a patch was applied to a user."""
        ...

    def user_update_skipped(self, user_id: str, reason: str) -> None:
        """Record that a patch was not applied (empty id, unknown user)."""
        ...

    def users_batch_updated(self, requested: int, updated: int) -> None:
        """Record the outcome of a batch update."""
        ...

    def user_activity_queried(
        self,
        user_id: str,
        limit: int | None,
        returned: int,
        found: bool,
    ) -> None:
        """Record an activity query."""
        ...

    def post_created(self, post_id: str, author_id: str) -> None:
        """Record that a post was created."""
        ...

    def post_creation_rejected(self, author_id: str, reason: str) -> None:
        """Record that a post could not be created."""
        ...


class DefaultDirectoryServiceProbe:
    """Default implementation using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def users_looked_up(self, requested: int, missing: list[str]) -> None:
        self._logger.info(
            "users_looked_up",
            requested=requested,
            missing_count=len(missing),
            missing_ids=missing,
        )

    def user_updated(self, user_id: str, changed_fields: list[str]) -> None:
        self._logger.info(
            "user_updated",
            user_id=user_id,
            changed_fields=changed_fields,
        )

    def user_update_skipped(self, user_id: str, reason: str) -> None:
        self._logger.info(
            "user_update_skipped",
            user_id=user_id,
            reason=reason,
        )

    def users_batch_updated(self, requested: int, updated: int) -> None:
        self._logger.info(
            "users_batch_updated",
            requested=requested,
            updated=updated,
        )

    def user_activity_queried(
        self, user_id: str, limit: int | None, returned: int, found: bool
    ) -> None:
        self._logger.debug(
            "user_activity_queried",
            user_id=user_id,
            limit=limit,
            returned=returned,
            found=found,
        )

    def post_created(self, post_id: str, author_id: str) -> None:
        self._logger.info(
            "post_created",
            post_id=post_id,
            author_id=author_id,
        )

    def post_creation_rejected(self, author_id: str, reason: str) -> None:
        self._logger.warning(
            "post_creation_rejected",
            author_id=author_id,
            reason=reason,
        )
