"""
API Routers for Snapshot Print Flow
"""

from . import snapshot, system

__all__ = ["snapshot", "system"]
