"""Directory application layer.

Contains the record service that orchestrates directory reads and
sparse-patch updates.
"""

from directory.application.services import UserDirectoryService

__all__ = ["UserDirectoryService"]
