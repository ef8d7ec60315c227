"""Domain value objects for the Directory bounded context.

All records are immutable: models are frozen and every sequence is a tuple.
The directory hands out values and replaces values on write, so a record
returned to one caller never changes underneath it.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, model_validator

StringList: TypeAlias = tuple[str, ...]
StringListList: TypeAlias = tuple[StringList, ...]


class UserRole(str, Enum):
    """Role of a user. UNSPECIFIED doubles as "not supplied" in patches."""

    UNSPECIFIED = "USER_ROLE_UNSPECIFIED"
    ADMIN = "USER_ROLE_ADMIN"
    USER = "USER_ROLE_USER"
    GUEST = "USER_ROLE_GUEST"


class Theme(str, Enum):
    """UI theme preference. UNSPECIFIED doubles as "not supplied" in patches."""

    UNSPECIFIED = "THEME_UNSPECIFIED"
    LIGHT = "THEME_LIGHT"
    DARK = "THEME_DARK"
    AUTO = "THEME_AUTO"


class Post(BaseModel):
    """A post authored by a user. `author_id` is not checked against users."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author_id: str


class Comment(BaseModel):
    """A comment authored by a user."""

    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    author_id: str


class ActivityItem(BaseModel):
    """Tagged union over Post and Comment.

    Exactly one of `post` or `comment` is populated. Build instances with
    `of_post` / `of_comment`; validation rejects both-or-neither.
    """

    model_config = ConfigDict(frozen=True)

    post: Post | None = None
    comment: Comment | None = None

    @model_validator(mode="after")
    def validate_single_variant(self) -> ActivityItem:
        """Ensure exactly one variant is populated."""
        if (self.post is None) == (self.comment is None):
            raise ValueError("activity item must carry exactly one of post or comment")
        return self

    @classmethod
    def of_post(cls, post: Post) -> ActivityItem:
        """Wrap a post."""
        return cls(post=post)

    @classmethod
    def of_comment(cls, comment: Comment) -> ActivityItem:
        """Wrap a comment."""
        return cls(comment=comment)

    @property
    def is_post(self) -> bool:
        return self.post is not None

    @property
    def is_comment(self) -> bool:
        return self.comment is not None


class Profile(BaseModel):
    """Presentation preferences of a user."""

    model_config = ConfigDict(frozen=True)

    display_name: str | None = None
    timezone: str | None = None
    theme: Theme = Theme.UNSPECIFIED


class User(BaseModel):
    """A user record in the directory.

    Attributes:
        id: Unique identifier, also the directory key
        name: Full name
        email: Contact email
        role: Role in the system
        permissions: Ordered permission names
        tags: Optional tag list
        skill_categories: Optional list of skill groups
        recent_activity: Activity items, newest first
        profile: Optional presentation preferences
        bio: Optional biography
        age: Optional age; 0 is a real value, None means unknown
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    email: str = ""
    role: UserRole = UserRole.UNSPECIFIED
    permissions: StringList = ()
    tags: StringList | None = None
    skill_categories: StringListList | None = None
    recent_activity: tuple[ActivityItem, ...] = ()
    profile: Profile | None = None
    bio: str | None = None
    age: int | None = None

    @classmethod
    def placeholder(cls, user_id: str) -> User:
        """Stand-in for an unknown id: only the id is populated."""
        return cls(id=user_id)


class ProfilePatch(BaseModel):
    """Sparse update for a user's profile."""

    model_config = ConfigDict(frozen=True)

    display_name: str | None = None
    timezone: str | None = None
    theme: Theme = Theme.UNSPECIFIED


class UserPatch(BaseModel):
    """Sparse update for a user record.

    `None` (or UNSPECIFIED for enums) means "not supplied". Which supplied
    values actually take effect is decided by the rules in
    `directory.domain.merge`.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    email: str | None = None
    role: UserRole = UserRole.UNSPECIFIED
    permissions: StringList | None = None
    tags: StringList | None = None
    skill_categories: StringListList | None = None
    bio: str | None = None
    age: int | None = None
    profile: ProfilePatch | None = None


class PostInput(BaseModel):
    """Input for creating a post."""

    model_config = ConfigDict(frozen=True)

    title: str
    author_id: str
