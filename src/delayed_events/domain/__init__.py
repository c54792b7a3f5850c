"""DDD domain layer."""

from .events import QueuedEvent

__all__ = ["QueuedEvent"]
