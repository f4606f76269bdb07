"""
Utility modules for core functionality.

Modules:
- decorators: Utility decorators and context managers (timer, etc.)
"""

from .decorators import Timer, timer

__all__ = [
    "Timer",
    "timer",
]
