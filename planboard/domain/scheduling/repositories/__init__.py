"""
Repository interfaces for the planning board domain.
"""

from .unit_registry import RegistryListener, UnitRegistry

__all__ = ["RegistryListener", "UnitRegistry"]
