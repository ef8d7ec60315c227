"""Repository interfaces (ports) for the Directory bounded context.

These protocols define the contract of the directory store without
specifying how records are held.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from directory.domain.value_objects import ActivityItem, Comment, Post, User


@runtime_checkable
class IDirectoryRepository(Protocol):
    """Authoritative store for users, posts, comments and the activity index.

    Implementations own all mutation. Records go in and come out as
    immutable values; there is no way to change a stored record other than
    through these methods.
    """

    def get(self, user_id: str) -> User | None:
        """Point lookup of a user.

        Returns:
            The user if found, None otherwise
        """
        ...

    def get_all(self) -> list[User]:
        """Return every user. Callers must not depend on the order."""
        ...

    def save(self, user: User) -> None:
        """Insert or wholesale replace a user keyed by its id."""
        ...

    def update(self, user_id: str, mutate: Callable[[User], User]) -> User | None:
        """Atomically replace a user with `mutate(current)`.

        Args:
            user_id: The user to update
            mutate: Pure function producing the new record from the current one

        Returns:
            The stored result, or None if the user does not exist (mutate is
            not called in that case)
        """
        ...

    def get_activity(self, user_id: str) -> list[ActivityItem] | None:
        """Activity index entry for a user, newest first.

        Returns:
            The activity items, or None if the index has no entry for the user
        """
        ...

    def prepend_activity(self, user_id: str, item: ActivityItem) -> None:
        """Put `item` first in both the user's embedded activity and the index.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    def get_post(self, post_id: str) -> Post | None:
        """Point lookup of a post."""
        ...

    def get_comment(self, comment_id: str) -> Comment | None:
        """Point lookup of a comment."""
        ...

    def create_post(self, title: str, author_id: str) -> Post:
        """Create a post and record it as the author's newest activity.

        Post ids are allocated sequentially ("number of posts + 1").

        Raises:
            AuthorNotFoundError: If no user has id `author_id`; nothing is stored
        """
        ...
