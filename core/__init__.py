"""
Core modules for Snapshot Print Flow
"""

from .print_dispatcher import PrintDispatcher
from .snapshot_store import SnapshotFile, SnapshotStore

__all__ = [
    "PrintDispatcher",
    "SnapshotFile",
    "SnapshotStore",
]
