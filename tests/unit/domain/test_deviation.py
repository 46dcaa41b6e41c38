from __future__ import annotations

import pytest

from granjafacil.domain.errors import InvalidInputError
from granjafacil.domain.services.deviation import analyze_deviation, severity_for
from granjafacil.domain.value_objects.deviation import DeviationSeverity, WeightGrade


def test_heavier_bird_within_attention_band():
    deviation = analyze_deviation(560, 500)

    assert deviation.percent == pytest.approx(12.0)
    assert deviation.severity is DeviationSeverity.ATTENTION
    assert deviation.grade is WeightGrade.ATTENTION


def test_light_bird_is_critical():
    deviation = analyze_deviation(350, 500)

    assert deviation.percent == pytest.approx(-30.0)
    assert deviation.severity is DeviationSeverity.CRITICAL
    assert deviation.label == "Desvio crítico - ação imediata"


def test_exact_weight_has_zero_deviation():
    deviation = analyze_deviation(500, 500)

    assert deviation.percent == 0
    assert deviation.severity is DeviationSeverity.WITHIN_RANGE
    assert deviation.grade is WeightGrade.EXCELLENT


@pytest.mark.parametrize(
    ("percent", "expected"),
    [
        (10.0, DeviationSeverity.WITHIN_RANGE),
        (-10.0, DeviationSeverity.WITHIN_RANGE),
        (10.5, DeviationSeverity.ATTENTION),
        (20.0, DeviationSeverity.ATTENTION),
        (-20.1, DeviationSeverity.CRITICAL),
    ],
)
def test_severity_band_edges(percent, expected):
    assert severity_for(percent) is expected


def test_percent_reconstructs_actual_weight():
    for actual, ideal in [(1234.5, 1170), (60, 70), (2070, 2070)]:
        deviation = analyze_deviation(actual, ideal)
        assert ideal * (1 + deviation.percent / 100) == pytest.approx(actual)


@pytest.mark.parametrize("ideal", [0, -10])
def test_non_positive_ideal_is_rejected(ideal):
    with pytest.raises(InvalidInputError):
        analyze_deviation(100, ideal)
