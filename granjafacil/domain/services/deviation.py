from __future__ import annotations

from dataclasses import dataclass

from granjafacil.domain.errors import InvalidInputError
from granjafacil.domain.value_objects.deviation import DeviationSeverity, WeightGrade

# Upper bounds (inclusive) on |deviation %|.
WITHIN_RANGE_LIMIT = 10.0
ATTENTION_LIMIT = 20.0
EXCELLENT_LIMIT = 5.0


@dataclass(slots=True, frozen=True)
class Deviation:
    percent: float
    severity: DeviationSeverity

    @property
    def grade(self) -> WeightGrade:
        magnitude = abs(self.percent)
        if magnitude <= EXCELLENT_LIMIT:
            return WeightGrade.EXCELLENT
        if magnitude <= WITHIN_RANGE_LIMIT:
            return WeightGrade.GOOD
        if magnitude <= ATTENTION_LIMIT:
            return WeightGrade.ATTENTION
        return WeightGrade.CRITICAL

    @property
    def label(self) -> str:
        return _GRADE_LABELS[self.grade]


_GRADE_LABELS = {
    WeightGrade.EXCELLENT: "Peso dentro do ideal",
    WeightGrade.GOOD: "Pequeno desvio aceitável",
    WeightGrade.ATTENTION: "Desvio requer atenção",
    WeightGrade.CRITICAL: "Desvio crítico - ação imediata",
}


def severity_for(percent: float) -> DeviationSeverity:
    magnitude = abs(percent)
    if magnitude <= WITHIN_RANGE_LIMIT:
        return DeviationSeverity.WITHIN_RANGE
    if magnitude <= ATTENTION_LIMIT:
        return DeviationSeverity.ATTENTION
    return DeviationSeverity.CRITICAL


def analyze_deviation(actual_grams: float, ideal_grams: float) -> Deviation:
    """Signed percentage of `actual_grams` over `ideal_grams`."""
    if ideal_grams <= 0:
        raise InvalidInputError(
            "Ideal weight must be positive", details={"ideal_grams": ideal_grams}
        )
    if actual_grams < 0:
        raise InvalidInputError(
            "Actual weight cannot be negative", details={"actual_grams": actual_grams}
        )
    percent = (actual_grams - ideal_grams) * 100 / ideal_grams
    return Deviation(percent=percent, severity=severity_for(percent))
