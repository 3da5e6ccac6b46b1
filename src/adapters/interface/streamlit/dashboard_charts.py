"""Dashboard presentation logic for the Streamlit UI.

This module contains pure, testable transformations from an
``AnalysisResult`` (and the profile it was computed for) to chart data and
Altair/Plotly figures. No Streamlit calls happen here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import altair as alt

from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile
from src.domain.services.profile_totals import expense_amounts

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


PALETTE = (
    "#0ea5e9",
    "#8b5cf6",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#6366f1",
)

SCENARIO_LABELS = {
    "conservative": "Conservative (4%)",
    "aggressive": "Aggressive (9%)",
}

PRIORITY_ICONS = {"High": "🔴", "Medium": "🟠", "Low": "🟢"}


def format_currency(value: float) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_signed_currency(value: float) -> str:
    """Format a signed amount with an explicit + for non-negative values."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}${abs(value):,.0f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def score_band(score: float) -> tuple[str, str]:
    """Return a label and color for a health score.

    Args:
        score: Financial health score on a 0-100 scale.

    Returns:
        Tuple with the band label and its hex color.
    """
    if score >= 80:
        return "Excellent", "#10b981"
    if score >= 60:
        return "Good", "#0ea5e9"
    if score >= 40:
        return "Fair", "#f59e0b"
    return "Needs Attention", "#ef4444"


def build_projection_rows(result: AnalysisResult) -> list[dict[str, object]]:
    """Flatten the wealth projection into long-form chart rows.

    Rows keep the year order of the result (1..10); each year yields one
    row per scenario.

    Args:
        result: Analysis carrying the projection.

    Returns:
        List of ``{"year", "scenario", "value"}`` rows.
    """
    rows: list[dict[str, object]] = []
    for point in result.wealth_projection:
        rows.append(
            {
                "year": point.year,
                "scenario": SCENARIO_LABELS["conservative"],
                "value": point.conservative,
            }
        )
        rows.append(
            {
                "year": point.year,
                "scenario": SCENARIO_LABELS["aggressive"],
                "value": point.aggressive,
            }
        )
    return rows


def build_expense_slices(
    result: AnalysisResult,
    profile: FinancialProfile,
) -> list[dict[str, object]]:
    """Prepare donut data, deriving amounts from the profile's expenses.

    Args:
        result: Analysis carrying the percentage breakdown.
        profile: Profile the analysis was computed for.

    Returns:
        Altair-ready rows sorted by descending share.
    """
    data = [
        {
            "category": category,
            "percentage": percentage,
            "amount": amount,
            "amount_label": format_currency(amount),
            "share_label": format_percentage(percentage),
        }
        for category, percentage, amount in expense_amounts(result, profile)
    ]
    return sorted(data, key=lambda row: row["percentage"], reverse=True)


def build_projection_chart(
    result: AnalysisResult,
    height: int = 320,
) -> alt.Chart:
    """Build the 10-year wealth projection line chart."""
    rows = build_projection_rows(result)
    years = [point.year for point in result.wealth_projection]
    return alt.Chart(alt.Data(values=rows)).mark_line(
        point=True,
        strokeWidth=3,
    ).encode(
        x=alt.X(
            "year:O",
            title="Year",
            sort=years,
        ),
        y=alt.Y("value:Q", title="Net Worth", axis=alt.Axis(format="$,.0f")),
        color=alt.Color(
            "scenario:N",
            scale=alt.Scale(range=[PALETTE[0], PALETTE[1]]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("year:O", title="Year"),
            alt.Tooltip("scenario:N", title="Scenario"),
            alt.Tooltip("value:Q", title="Net Worth", format="$,.0f"),
        ],
    ).properties(height=height)


def build_expense_donut(
    slices: Sequence[dict[str, object]],
    chart_size: int = 300,
) -> alt.LayerChart:
    """Build a donut chart of the expense breakdown.

    Args:
        slices: Rows produced by ``build_expense_slices``.
        chart_size: Width/height for the chart canvas.
    """
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=list(slices))).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("percentage:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(PALETTE)),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("percentage:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("share_label:N", title="Share"),
            alt.Tooltip("amount_label:N", title="Monthly"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=list(slices))).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="share_label:N")
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def build_score_gauge(score: float) -> "go.Figure":
    """Build a Plotly gauge for the financial health score."""
    import plotly.graph_objects as go

    label, color = score_band(score)
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=score,
            number=dict(suffix="/100"),
            title=dict(text=label),
            gauge=dict(
                axis=dict(range=[0, 100]),
                bar=dict(color=color),
                bgcolor="rgba(0,0,0,0)",
                steps=[
                    dict(range=[0, 40], color="rgba(239,68,68,0.12)"),
                    dict(range=[40, 60], color="rgba(245,158,11,0.12)"),
                    dict(range=[60, 80], color="rgba(14,165,233,0.12)"),
                    dict(range=[80, 100], color="rgba(16,185,129,0.12)"),
                ],
            ),
        )
    )
    fig.update_layout(margin=dict(l=16, r=16, t=48, b=8), height=260)
    return fig


__all__ = [
    "build_expense_donut",
    "build_expense_slices",
    "build_projection_chart",
    "build_projection_rows",
    "build_score_gauge",
    "format_currency",
    "format_percentage",
    "format_signed_currency",
    "score_band",
]
