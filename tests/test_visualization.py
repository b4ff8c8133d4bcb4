"""Tests for the pure rendering helpers."""

from conftest import contaminant

from analysis.guideline_comparison import assemble_report
from models.exceedance_model import classify
from models.records import WaterSystem
from visualization.guideline_chart import build_multiplier_chart
from visualization.report_cards import build_cards_html, build_summary_html, format_system_option
from visualization.report_table import TABLE_COLUMNS, build_contaminant_table, table_to_csv

SYSTEM = WaterSystem("CA1910009", "Beverly <Hills> MWD", "34,109", "Surface Water")


def view_of(raw_others):
    return assemble_report(SYSTEM, classify([], raw_others))


class TestReportCards:
    def test_summary_shows_counts_and_escapes_names(self):
        html = build_summary_html(view_of([contaminant("Arsenic", 12, 0.004), contaminant("Chlorine", 0.5, 4)]))
        assert '<span class="exceeds-count">1</span>' in html
        assert "2 Total Contaminants in Your Water" in html
        assert "Beverly &lt;Hills&gt; MWD" in html
        assert "34,109" in html

    def test_exceeding_card_has_multiplier_badge(self):
        view = view_of([contaminant("Arsenic", 12, 0.004)])
        html = build_cards_html(view.exceeding_rows, exceeding=True)
        assert "3000.00X" in html
        assert "contaminant-card exceeds" in html

    def test_empty_tabs(self):
        assert "No exceeding contaminants found" in build_cards_html((), exceeding=True)
        assert "No other contaminants found" in build_cards_html((), exceeding=False)

    def test_system_option_label(self):
        assert format_system_option(WaterSystem("CA2", "Other")) == "Other (CA2)"


class TestMultiplierChart:
    def test_bars_for_exceeding_rows(self):
        view = view_of([contaminant("Arsenic", 12, 0.004), contaminant("Nitrate", 2, 1)])
        fig = build_multiplier_chart(view.exceeding_rows)
        assert list(fig.data[0].y) == ["Nitrate", "Arsenic"]

    def test_no_chart_without_exceedances(self):
        assert build_multiplier_chart(view_of([contaminant("Chlorine", 0.5, 4)]).exceeding_rows) is None


class TestContaminantTable:
    def test_rows_and_columns(self):
        view = view_of([contaminant("Arsenic", 12, 0.004), contaminant("Chlorine", 0.5, 4)])
        df = build_contaminant_table(view)
        assert list(df.columns) == TABLE_COLUMNS
        assert list(df["Contaminant"]) == ["Arsenic", "Chlorine"]
        assert df.loc[0, "Times Guideline"] == 3000.0

    def test_empty_table_keeps_columns(self):
        df = build_contaminant_table(view_of([]))
        assert df.empty
        assert list(df.columns) == TABLE_COLUMNS

    def test_csv(self):
        csv = table_to_csv(build_contaminant_table(view_of([contaminant("Lead", 2, 0.2)])))
        assert csv.startswith(b"Contaminant,Status")
