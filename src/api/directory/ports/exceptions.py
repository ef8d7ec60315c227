"""Domain exceptions for the Directory bounded context.

Lookups and updates of unknown users are not errors in this context: they
produce empty or placeholder results so that batch operations stay total.
These exceptions cover the few places where existence is required.
"""


class UserNotFoundError(Exception):
    """Raised when an operation requires a user that does not exist."""

    def __init__(self, user_id: str, message: str | None = None):
        super().__init__(message or f"User with ID {user_id} not found")
        self.user_id = user_id


class AuthorNotFoundError(UserNotFoundError):
    """Raised when creating a post for an author that does not exist.

    The presentation layer maps this to a NOT_FOUND status.
    """

    def __init__(self, author_id: str):
        super().__init__(author_id, f"author with ID {author_id} not found")

    @property
    def author_id(self) -> str:
        return self.user_id
