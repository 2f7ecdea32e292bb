from .in_memory_registry import InMemoryUnitRegistry
from .seed import sample_units, sample_workers

__all__ = ["InMemoryUnitRegistry", "sample_units", "sample_workers"]
