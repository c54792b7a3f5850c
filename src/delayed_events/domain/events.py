"""Domain value objects for delayed event delivery."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class QueuedEvent:
    """One delayed publish call, captured exactly as it was made."""

    event: Any
    event_name: str | None = None
