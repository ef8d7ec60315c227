"""Fixed seed data loaded into the directory at process start."""

from __future__ import annotations

from directory.domain.value_objects import (
    ActivityItem,
    Comment,
    Post,
    Profile,
    Theme,
    User,
    UserRole,
)
from directory.infrastructure.in_memory_repository import InMemoryDirectoryRepository

SEED_POSTS: tuple[Post, ...] = (
    Post(id="1", title="Getting Started with GraphQL", author_id="1"),
    Post(id="2", title="Advanced Federation Patterns", author_id="1"),
    Post(id="3", title="Building Scalable APIs", author_id="2"),
    Post(id="4", title="TypeScript Best Practices", author_id="3"),
)

SEED_COMMENTS: tuple[Comment, ...] = (
    Comment(id="1", content="Great post! Very helpful.", author_id="2"),
    Comment(id="2", content="Thanks for sharing this.", author_id="3"),
    Comment(id="3", content="Looking forward to more content.", author_id="4"),
    Comment(id="4", content="Excellent examples provided.", author_id="1"),
)


def _post(post_id: str) -> ActivityItem:
    return ActivityItem.of_post(next(p for p in SEED_POSTS if p.id == post_id))


def _comment(comment_id: str) -> ActivityItem:
    return ActivityItem.of_comment(next(c for c in SEED_COMMENTS if c.id == comment_id))


SEED_USERS: tuple[User, ...] = (
    User(
        id="1",
        name="Alice Johnson",
        email="alice@example.com",
        role=UserRole.ADMIN,
        permissions=("read", "write"),
        tags=("admin", "user"),
        skill_categories=(
            ("JavaScript", "TypeScript"),
            ("React", "Vue", "Angular"),
            ("Node.js", "Express"),
        ),
        recent_activity=(_post("1"), _post("2"), _comment("4")),
        profile=Profile(
            display_name="Alice J.",
            timezone="America/New_York",
            theme=Theme.DARK,
        ),
        bio="Full-stack developer with 5+ years of experience",
        age=28,
    ),
    User(
        id="2",
        name="Bob Smith",
        email="bob@example.com",
        role=UserRole.USER,
        permissions=("read",),
        tags=("user",),
        skill_categories=(("Python", "Java"), ("Django", "Spring")),
        recent_activity=(_post("3"), _comment("1")),
        profile=Profile(
            display_name="Bob",
            timezone="Europe/London",
            theme=Theme.LIGHT,
        ),
        bio="Backend developer passionate about clean code",
        age=32,
    ),
    User(
        id="3",
        name="Charlie Brown",
        email="charlie@example.com",
        role=UserRole.USER,
        permissions=("read",),
        tags=("user",),
        skill_categories=(("Go", "Rust"), ("Docker", "Kubernetes")),
        recent_activity=(_post("4"), _comment("2")),
        profile=Profile(timezone="Asia/Tokyo", theme=Theme.AUTO),
        age=29,
    ),
    User(
        id="4",
        name="Dana Lee",
        email="dana@example.com",
        role=UserRole.GUEST,
        permissions=("read",),
        tags=("guest",),
        skill_categories=(("HTML", "CSS"),),
        recent_activity=(_comment("3"),),
        profile=Profile(display_name="Dana", theme=Theme.LIGHT),
        bio="Learning web development",
        age=24,
    ),
)


def seed_directory(repository: InMemoryDirectoryRepository) -> None:
    """Load the seed posts, comments, users and activity index.

    The activity index of every user starts out equal to the user's
    embedded recent activity.
    """
    for post in SEED_POSTS:
        repository.save_post(post)
    for comment in SEED_COMMENTS:
        repository.save_comment(comment)
    for user in SEED_USERS:
        repository.save(user)


def create_seeded_repository() -> InMemoryDirectoryRepository:
    """Build a fresh directory holding the seed data."""
    repository = InMemoryDirectoryRepository()
    seed_directory(repository)
    return repository
