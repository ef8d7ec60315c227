"""Application services for the Directory bounded context."""

from __future__ import annotations

from collections.abc import Sequence

from directory.application.observability import (
    DefaultDirectoryServiceProbe,
    DirectoryServiceProbe,
)
from directory.domain.merge import changed_fields, merge_user
from directory.domain.value_objects import ActivityItem, Post, User, UserPatch
from directory.ports.exceptions import AuthorNotFoundError
from directory.ports.repositories import IDirectoryRepository


class UserDirectoryService:
    """Record service for the local user directory.

    Batch operations are total: an unknown id never fails the batch. It
    becomes a placeholder (lookup) or is skipped (update). The only
    operation that fails on a missing user is post creation.
    """

    def __init__(
        self,
        repository: IDirectoryRepository,
        probe: DirectoryServiceProbe | None = None,
    ):
        """Initialize the service.

        Args:
            repository: The directory store.
            probe: Optional domain probe for observability.
        """
        self._repository = repository
        self._probe = probe or DefaultDirectoryServiceProbe()

    def lookup_users_by_id(self, user_ids: Sequence[str]) -> list[User]:
        """Resolve a batch of ids, keeping request order.

        The result has the same length as `user_ids` and `result[i].id ==
        user_ids[i]`. Ids with no matching user get a placeholder record.
        """
        result: list[User] = []
        missing: list[str] = []
        for user_id in user_ids:
            user = self._repository.get(user_id)
            if user is None:
                missing.append(user_id)
                user = User.placeholder(user_id)
            result.append(user)

        self._probe.users_looked_up(requested=len(user_ids), missing=missing)
        return result

    def get_user(self, user_id: str) -> User | None:
        return self._repository.get(user_id)

    def list_users(self) -> list[User]:
        """Return every user. The order is unspecified."""
        return self._repository.get_all()

    def update_user(self, patch: UserPatch) -> User | None:
        """Apply a sparse patch to one user.

        Args:
            patch: The sparse update; `patch.id` selects the user.

        Returns:
            The merged user, or None if no user has `patch.id`.
        """
        previous: User | None = None

        def apply(current: User) -> User:
            nonlocal previous
            previous = current
            return merge_user(current, patch)

        updated = self._repository.update(patch.id, apply)
        if updated is None or previous is None:
            self._probe.user_update_skipped(user_id=patch.id, reason="not_found")
            return None

        self._probe.user_updated(
            user_id=patch.id,
            changed_fields=changed_fields(previous, updated),
        )
        return updated

    def update_users(self, patches: Sequence[UserPatch]) -> list[User]:
        """Apply a batch of sparse patches in order.

        Patches with an empty id or an unknown id are skipped silently.

        Returns:
            The users that were updated, in the order their patches were processed.
        """
        updated: list[User] = []
        for patch in patches:
            if not patch.id:
                self._probe.user_update_skipped(user_id=patch.id, reason="empty_id")
                continue
            user = self.update_user(patch)
            if user is not None:
                updated.append(user)

        self._probe.users_batch_updated(requested=len(patches), updated=len(updated))
        return updated

    def get_user_activity(
        self, user_id: str, limit: int | None = None
    ) -> list[ActivityItem]:
        """Return a user's activity, newest first.

        Args:
            user_id: The user whose activity to return.
            limit: Maximum number of items. None, zero or negative means no
                limit; a limit above the available count is clamped.

        Returns:
            The activity items, or an empty list for an unknown user.
        """
        items = self._repository.get_activity(user_id)
        if items is None:
            self._probe.user_activity_queried(
                user_id=user_id, limit=limit, returned=0, found=False
            )
            return []

        count = len(items)
        take = count if limit is None or limit <= 0 or limit > count else limit

        result = items[:take]
        self._probe.user_activity_queried(
            user_id=user_id, limit=limit, returned=len(result), found=True
        )
        return result

    def create_post(self, title: str, author_id: str) -> Post:
        """Create a post for an existing author.

        The new post becomes the first item of the author's activity.

        Raises:
            AuthorNotFoundError: If the author does not exist.
        """
        try:
            post = self._repository.create_post(title=title, author_id=author_id)
        except AuthorNotFoundError as e:
            self._probe.post_creation_rejected(author_id=author_id, reason=str(e))
            raise

        self._probe.post_created(post_id=post.id, author_id=author_id)
        return post
