from __future__ import annotations

from enum import Enum


class DeviationSeverity(str, Enum):
    WITHIN_RANGE = "within_range"
    ATTENTION = "attention"
    CRITICAL = "critical"


class WeightGrade(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ATTENTION = "attention"
    CRITICAL = "critical"
