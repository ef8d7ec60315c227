"""Sparse-patch merge rules for user records.

A patch only touches the fields its caller explicitly supplied. What counts
as "supplied" differs per field and is spelled out in the rule tables below,
so the policy for every field can be read in one place:

- NON_EMPTY: value present and non-empty. An empty string or empty list is
  indistinguishable from absent, so a patch can never clear these fields.
- SPECIFIED: enum value other than its UNSPECIFIED member.
- PRESENT: value present at all. Zero is honored.

`age` is PRESENT-gated while the other optional scalars are NON_EMPTY-gated:
a patch can set age to 0 but can never clear a name or bio.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from directory.domain.value_objects import (
    Profile,
    ProfilePatch,
    Theme,
    User,
    UserPatch,
    UserRole,
)

_UNSPECIFIED_VALUES: frozenset[Enum] = frozenset(
    {UserRole.UNSPECIFIED, Theme.UNSPECIFIED}
)


class Gate(str, Enum):
    """Decides whether a supplied patch value takes effect."""

    NON_EMPTY = "non_empty"
    SPECIFIED = "specified"
    PRESENT = "present"

    def admits(self, value: Any) -> bool:
        if value is None:
            return False
        if self is Gate.PRESENT:
            return True
        if self is Gate.SPECIFIED:
            return value not in _UNSPECIFIED_VALUES
        return isinstance(value, Sized) and len(value) > 0


@dataclass(frozen=True)
class FieldRule:
    """Merge policy for one patchable field."""

    field: str
    gate: Gate


USER_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", Gate.NON_EMPTY),
    FieldRule("email", Gate.NON_EMPTY),
    FieldRule("role", Gate.SPECIFIED),
    FieldRule("permissions", Gate.NON_EMPTY),
    FieldRule("tags", Gate.NON_EMPTY),
    FieldRule("skill_categories", Gate.NON_EMPTY),
    FieldRule("bio", Gate.NON_EMPTY),
    FieldRule("age", Gate.PRESENT),
)

PROFILE_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("display_name", Gate.NON_EMPTY),
    FieldRule("timezone", Gate.NON_EMPTY),
    FieldRule("theme", Gate.SPECIFIED),
)


def collect_updates(patch: BaseModel, rules: tuple[FieldRule, ...]) -> dict[str, Any]:
    """Return the patch values admitted by their field's gate."""
    updates: dict[str, Any] = {}
    for rule in rules:
        value = getattr(patch, rule.field)
        if rule.gate.admits(value):
            updates[rule.field] = value
    return updates


def merge_profile(existing: Profile | None, patch: ProfilePatch) -> Profile:
    """Apply a profile patch, creating an empty profile if there was none."""
    base = existing if existing is not None else Profile()
    return base.model_copy(update=collect_updates(patch, PROFILE_FIELD_RULES))


def merge_user(existing: User, patch: UserPatch) -> User:
    """Apply a sparse patch to a user and return the merged record.

    The existing record is not modified. Fields the patch does not supply,
    or supplies with a value its gate rejects, keep their current value.

    Raises:
        ValueError: If the patch targets a different user id
    """
    if patch.id != existing.id:
        raise ValueError(
            f"Patch for user {patch.id!r} cannot be applied to user {existing.id!r}"
        )

    updates = collect_updates(patch, USER_FIELD_RULES)
    if patch.profile is not None:
        updates["profile"] = merge_profile(existing.profile, patch.profile)

    return existing.model_copy(update=updates)


def changed_fields(before: User, after: User) -> list[str]:
    """Names of the fields whose values differ between two versions of a user."""
    return [
        name for name in User.model_fields if getattr(before, name) != getattr(after, name)
    ]
