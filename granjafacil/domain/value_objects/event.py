from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    PHASE = "phase"
    VACCINE = "vaccine"
    WEIGHING = "weighing"


class EventStatus(str, Enum):
    PENDING = "pending"
    LATE = "late"
    APPLIED = "applied"
    DONE = "done"

    @property
    def is_completed(self) -> bool:
        return self in (EventStatus.APPLIED, EventStatus.DONE)
