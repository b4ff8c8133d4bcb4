"""
TapWatch · Report Cards

HTML snippets for the summary header, contaminant cards and the list of
other providers. Returned as strings; the dashboard passes them to
``st.markdown(..., unsafe_allow_html=True)``.
"""

from html import escape
from typing import Sequence

from analysis.guideline_comparison import ContaminantRow, ReportView
from config.constants import STATUS_COLORS
from models.records import WaterSystem

REPORT_CSS = """
<style>
  .summary-header { display:flex; gap:18px; align-items:center; flex-wrap:wrap; margin-bottom:12px; }
  .exceeds-badge {
      background:#fdecea; border-left:6px solid #e74c3c; border-radius:8px;
      padding:10px 18px;
  }
  .exceeds-count { font-size:2.0rem; font-weight:700; color:#e74c3c; margin-right:8px; }
  .exceeds-text { font-weight:600; font-size:0.9rem; color:#555; }
  .total-contaminants { font-size:1.05rem; font-weight:600; color:#334155; }
  .summary-card {
      background:#f8fafc; border-radius:10px; padding:14px 18px;
      border-left:5px solid #3498db; margin-bottom:10px;
  }
  .summary-card h4 { margin:0 0 4px 0; font-size:0.9rem; color:#555; }
  .summary-card p { margin:0; font-size:1.05rem; font-weight:600; }
  .summary-card .small-text { font-size:0.78rem; color:#888; font-weight:400; }
  .contaminant-card {
      background:white; border:1px solid #e2e8f0; border-radius:10px;
      padding:14px 18px; margin-bottom:10px; position:relative;
  }
  .contaminant-card.exceeds { border-left:5px solid #e74c3c; }
  .contaminant-card h3 { margin:0 0 6px 0; font-size:1.05rem; }
  .multiplier-badge {
      position:absolute; top:12px; right:14px; background:#e74c3c; color:white;
      border-radius:6px; padding:2px 10px; font-weight:700; font-size:0.85rem;
  }
  .contaminant-levels p { margin:2px 0; font-size:0.85rem; }
</style>
"""


def build_summary_html(view: ReportView) -> str:
    """Exceedance badge, total count and the three provider cards."""
    system = view.system
    return f"""
<div class="summary-header">
  <div class="exceeds-badge">
    <span class="exceeds-count">{view.exceeding_count}</span>
    <span class="exceeds-text">Contaminants EXCEED EWG HEALTH GUIDELINES</span>
  </div>
  <div class="total-contaminants">{view.total_count} Total Contaminants in Your Water</div>
</div>
{_summary_card("💧 Water Provider:", system.display_name, system.identifier)}
{_summary_card("👥 Population Affected:", system.population_served)}
{_summary_card("🌊 Water Source:", system.source_water_type)}
"""


def _summary_card(title: str, value: str, small: str = "") -> str:
    small_html = f'<p class="small-text">{escape(small)}</p>' if small else ""
    return (
        f'<div class="summary-card"><h4>{title}</h4>'
        f"<p>{escape(value)}</p>{small_html}</div>"
    )


def build_contaminant_card_html(row: ContaminantRow) -> str:
    color = STATUS_COLORS["exceeds"] if row.exceeds else STATUS_COLORS["others"]
    badge = ""
    if row.exceeds and row.multiplier_label:
        badge = f'<div class="multiplier-badge">{row.multiplier_label}</div>'
    return f"""
<div class="contaminant-card{' exceeds' if row.exceeds else ''}">
  <h3>{escape(row.name)}</h3>
  {badge}
  <p style="color:{color};">Health Risk: {escape(row.effect)}</p>
  <div class="contaminant-levels">
    <p><strong>Your Water:</strong> {escape(row.your_water)}</p>
    <p><strong>EWG Health Guideline:</strong> {escape(row.guideline)}</p>
    <p><strong>Legal Limit:</strong> {escape(row.legal_limit)}</p>
  </div>
</div>
"""


def build_cards_html(rows: Sequence[ContaminantRow], exceeding: bool) -> str:
    """All cards for one toggle tab, or the empty-tab notice."""
    if not rows:
        kind = "exceeding" if exceeding else "other"
        return f'<p class="no-contaminants">No {kind} contaminants found for this system.</p>'
    return "".join(build_contaminant_card_html(row) for row in rows)


def format_system_option(system: WaterSystem) -> str:
    """Label for an alternate provider in the selector."""
    return f"{system.display_name} ({system.identifier})"
