"""Directory domain module.

Contains value objects and merge rules for the Directory bounded context.
"""

from directory.domain.merge import merge_user
from directory.domain.value_objects import (
    ActivityItem,
    Comment,
    Post,
    PostInput,
    Profile,
    ProfilePatch,
    Theme,
    User,
    UserPatch,
    UserRole,
)

__all__ = [
    "ActivityItem",
    "Comment",
    "Post",
    "PostInput",
    "Profile",
    "ProfilePatch",
    "Theme",
    "User",
    "UserPatch",
    "UserRole",
    "merge_user",
]
