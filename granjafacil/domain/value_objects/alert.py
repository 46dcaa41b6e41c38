from __future__ import annotations

from enum import Enum


class AlertKind(str, Enum):
    VACCINE_LATE = "vaccine_late"
    WEIGHING_LATE = "weighing_late"
    WEIGHT_OUT_OF_RANGE = "weight_out_of_range"


class AlertPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    AlertPriority.LOW: 0,
    AlertPriority.MEDIUM: 1,
    AlertPriority.HIGH: 2,
    AlertPriority.CRITICAL: 3,
}


class AlertRegenerationPolicy(str, Enum):
    """How a batch's stored alerts are reconciled with a freshly derived set.

    REPLACE drops everything, acknowledgements included.
    PRESERVE_ACKNOWLEDGED keeps the acknowledged flag of alerts whose id survives.
    """

    REPLACE = "replace"
    PRESERVE_ACKNOWLEDGED = "preserve_acknowledged"
