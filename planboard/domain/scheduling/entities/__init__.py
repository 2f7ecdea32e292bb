"""
Domain entities for the planning board.
"""

from .stage_entry import StageEntry
from .unit import Unit
from .worker import Worker

__all__ = [
    "StageEntry",
    "Unit",
    "Worker",
]
