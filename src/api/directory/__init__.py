"""Directory bounded context.

Owns the in-memory user directory: users, posts, comments and the
per-user activity index, plus the sparse-patch rules for updating users.
"""
