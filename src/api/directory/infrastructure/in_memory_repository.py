"""In-memory implementation of IDirectoryRepository.

Data lives for the lifetime of the process. Nothing is persisted and
nothing is ever deleted.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from directory.domain.value_objects import ActivityItem, Comment, Post, User
from directory.ports.exceptions import AuthorNotFoundError, UserNotFoundError


class InMemoryDirectoryRepository:
    """In-memory storage for users, posts, comments and the activity index.

    Thread-safety: every method runs under one re-entrant lock, so the
    read-modify-write in `update` and `create_post` cannot interleave with
    other writers. Stored records are immutable values.
    """

    def __init__(self) -> None:
        """Initialize an empty directory."""
        self._lock = threading.RLock()
        self._users: dict[str, User] = {}
        self._posts: dict[str, Post] = {}
        self._comments: dict[str, Comment] = {}
        self._activity: dict[str, tuple[ActivityItem, ...]] = {}

    def get(self, user_id: str) -> User | None:
        """Retrieve a user by id.

        Args:
            user_id: The user id

        Returns:
            The user if found, None otherwise
        """
        with self._lock:
            return self._users.get(user_id)

    def get_all(self) -> list[User]:
        """Get all stored users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def save(self, user: User) -> None:
        """Save a user, replacing any record with the same id.

        The activity index entry is reset to the user's embedded activity.
        """
        with self._lock:
            self._users[user.id] = user
            self._activity[user.id] = user.recent_activity

    def update(self, user_id: str, mutate: Callable[[User], User]) -> User | None:
        """Replace a user with `mutate(current)` while holding the lock."""
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            updated = mutate(current)
            self._users[user_id] = updated
            return updated

    def get_activity(self, user_id: str) -> list[ActivityItem] | None:
        with self._lock:
            items = self._activity.get(user_id)
            return None if items is None else list(items)

    def prepend_activity(self, user_id: str, item: ActivityItem) -> None:
        """Put an item first in the user's embedded activity and in the index.

        Both sequences end up identical: the index entry is rebuilt from the
        user's updated embedded activity.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            activity = (item, *user.recent_activity)
            self._users[user_id] = user.model_copy(update={"recent_activity": activity})
            self._activity[user_id] = activity

    def get_post(self, post_id: str) -> Post | None:
        with self._lock:
            return self._posts.get(post_id)

    def save_post(self, post: Post) -> None:
        with self._lock:
            self._posts[post.id] = post

    def get_comment(self, comment_id: str) -> Comment | None:
        with self._lock:
            return self._comments.get(comment_id)

    def save_comment(self, comment: Comment) -> None:
        with self._lock:
            self._comments[comment.id] = comment

    def create_post(self, title: str, author_id: str) -> Post:
        """Create a post and make it the author's newest activity.

        Args:
            title: Post title
            author_id: Id of an existing user

        Returns:
            The stored post

        Raises:
            AuthorNotFoundError: If the author does not exist; nothing is stored
        """
        with self._lock:
            if author_id not in self._users:
                raise AuthorNotFoundError(author_id)

            post = Post(id=str(len(self._posts) + 1), title=title, author_id=author_id)
            self._posts[post.id] = post
            self.prepend_activity(author_id, ActivityItem.of_post(post))
            return post
