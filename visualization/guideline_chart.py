"""
TapWatch · Guideline Multiplier Chart

Horizontal bar chart of how many times each exceeding contaminant is above
its EWG health guideline (log scale, guideline = 1X).
"""

from typing import Optional, Sequence

import plotly.graph_objects as go

from analysis.guideline_comparison import ContaminantRow
from config.constants import STATUS_COLORS


def build_multiplier_chart(rows: Sequence[ContaminantRow]) -> Optional[go.Figure]:
    """
    Parameters
    ----------
    rows : exceeding rows from ``assemble_report``

    Returns
    -------
    plotly.graph_objects.Figure, or None when no row has a multiplier.
    """
    plotted = [r for r in rows if r.multiplier is not None and r.multiplier > 0]
    if not plotted:
        return None

    plotted.sort(key=lambda r: r.multiplier)
    labels = [r.name for r in plotted]
    values = [r.multiplier for r in plotted]

    fig = go.Figure(go.Bar(
        x=values,
        y=labels,
        orientation="h",
        marker=dict(color=STATUS_COLORS["exceeds"], line=dict(color="white", width=1)),
        text=[r.multiplier_label for r in plotted],
        textposition="outside",
        hovertemplate="<b>%{y}</b>: %{x:,.2f}× guideline<extra></extra>",
    ))

    fig.add_vline(
        x=1,
        line_dash="dot",
        line_color="#bbb",
        line_width=1,
        annotation_text="Guideline",
        annotation_position="top",
        annotation_font_size=9,
    )

    fig.update_layout(
        xaxis=dict(type="log", title="Times above health guideline (log scale)", gridcolor="#f5f5f5"),
        yaxis=dict(title=""),
        height=max(180, 40 * len(plotted) + 80),
        margin=dict(l=10, r=40, t=20, b=30),
        paper_bgcolor="white",
        plot_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=12),
        showlegend=False,
    )
    return fig
