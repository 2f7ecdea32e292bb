"""
Event infrastructure.
"""

from .event_bus import EventBusInterface, EventHandler, InMemoryEventBus

__all__ = ["EventBusInterface", "EventHandler", "InMemoryEventBus"]
