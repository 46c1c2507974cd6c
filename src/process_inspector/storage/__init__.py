"""Runtime query services"""

from .repository import RuntimeQueryService, InMemoryRuntimeQueryService
from .snapshot import SnapshotLoader

__all__ = [
    "RuntimeQueryService",
    "InMemoryRuntimeQueryService",
    "SnapshotLoader"
]
