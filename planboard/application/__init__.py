"""Application layer: per-planner board session."""

from .planning_board import PlanningBoard

__all__ = ["PlanningBoard"]
