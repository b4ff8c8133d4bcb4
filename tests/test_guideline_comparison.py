"""Tests for report assembly and the guideline multiplier."""

import pytest

from conftest import contaminant

from analysis.guideline_comparison import assemble_report, guideline_multiplier
from models.exceedance_model import classify
from models.records import Contaminant, WaterSystem

SYSTEM = WaterSystem("CA1910009", "Beverly Hills MWD", "34,109", "Surface Water")


class TestGuidelineMultiplier:
    def test_rounds_to_two_places(self):
        c = Contaminant(name="Arsenic", system_average=12, health_guideline_value=0.004)
        assert guideline_multiplier(c) == pytest.approx(3000.0)

    def test_fraction(self):
        c = Contaminant(name="x", system_average=1, health_guideline_value=3)
        assert guideline_multiplier(c) == 0.33

    @pytest.mark.parametrize("average,guideline", [(5, 0), (5, None), (None, 1), (5, -2)])
    def test_undefined_without_usable_guideline(self, average, guideline):
        c = Contaminant(name="x", system_average=average, health_guideline_value=guideline)
        assert guideline_multiplier(c) is None


class TestAssembleReport:
    def test_counts_and_rows(self):
        classified = classify([], [
            contaminant("Arsenic", 12, 0.004, legal_limit=10),
            contaminant("Chlorine", 0.5, 4, units="ppm"),
        ])
        view = assemble_report(SYSTEM, classified)

        assert view.exceeding_count == 1
        assert view.total_count == 2
        arsenic = view.exceeding_rows[0]
        assert arsenic.multiplier_label == "3000.00X"
        assert arsenic.your_water == "12 ppb"
        assert arsenic.guideline == "0.004 ppb"
        assert arsenic.legal_limit == "10 ppb"

    def test_other_rows_carry_no_multiplier(self):
        view = assemble_report(SYSTEM, classify([], [contaminant("Chlorine", 0.5, 4)]))
        row = view.other_rows[0]
        assert row.multiplier is None
        assert row.multiplier_label is None
        assert not row.exceeds

    def test_absent_values_display_na(self):
        view = assemble_report(SYSTEM, classify([], [contaminant("Radon", None, None, effect=None)]))
        row = view.other_rows[0]
        assert row.your_water == "N/A"
        assert row.legal_limit == "N/A"
        assert row.effect == "N/A"

    def test_empty_report(self):
        view = assemble_report(SYSTEM, classify([], []), note="nothing")
        assert view.exceeding_count == 0
        assert view.total_count == 0
        assert view.note == "nothing"
