from __future__ import annotations

from enum import Enum


class WeighingStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"
