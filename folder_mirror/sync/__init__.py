"""Synchronization module for Folder Mirror.

Philosophy: SOURCE IS TRUTH, REPLICA IS DISPOSABLE.

This module provides:
- MirrorEngine: One forward (copy) + reverse (prune) pass at a time
- PeriodicSync: Re-runs the engine on a fixed interval
"""

from folder_mirror.sync.engine import MirrorEngine, SyncStats
from folder_mirror.sync.scheduler import PeriodicSync

__all__ = [
    "MirrorEngine",
    "SyncStats",
    "PeriodicSync",
]
