"""Streamlit rendering of the analysis dashboard."""

from __future__ import annotations

import streamlit as st

from src.adapters.interface.streamlit.dashboard_charts import (
    PRIORITY_ICONS,
    build_expense_donut,
    build_expense_slices,
    build_projection_chart,
    build_score_gauge,
    format_currency,
    format_percentage,
    format_signed_currency,
)
from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile


def _render_metrics(result: AnalysisResult) -> None:
    gauge_col, metrics_col = st.columns([1, 2])
    with gauge_col:
        st.plotly_chart(
            build_score_gauge(result.financial_health_score),
            use_container_width=True,
        )
    with metrics_col:
        top_left, top_right = st.columns(2)
        bottom_left, bottom_right = st.columns(2)
        top_left.metric("Net Worth", format_currency(result.net_worth))
        top_right.metric(
            "Monthly Cash Flow",
            format_signed_currency(result.monthly_cash_flow),
        )
        bottom_left.metric(
            "Debt-to-Income",
            format_percentage(result.debt_to_income_ratio),
        )
        bottom_right.metric(
            "Savings Rate",
            format_percentage(result.savings_rate),
        )


def _render_insights(result: AnalysisResult) -> None:
    st.subheader("Key Insights")
    for insight in result.key_insights:
        st.markdown(f"- {insight}")


def _render_action_plan(result: AnalysisResult) -> None:
    st.subheader("Action Plan")
    for index, action in enumerate(result.action_plan, start=1):
        icon = PRIORITY_ICONS.get(action.priority, "")
        with st.container(border=True):
            st.markdown(
                f"**{index}. {action.title}** · {icon} {action.priority} priority"
            )
            st.write(action.description)
            st.caption(f"Impact: {action.impact}")


def _render_expenses(
    result: AnalysisResult,
    profile: FinancialProfile,
) -> None:
    st.subheader("Expense Breakdown")
    slices = build_expense_slices(result, profile)
    if not slices:
        st.info("No expenses to break down.")
        return
    st.altair_chart(build_expense_donut(slices), use_container_width=True)
    for row in slices[:5]:
        st.caption(
            f"{row['category']}: {row['share_label']} "
            f"({row['amount_label']})"
        )


def render_dashboard(
    result: AnalysisResult,
    profile: FinancialProfile,
) -> bool:
    """Render the results screen.

    Args:
        result: Analysis to display.
        profile: Profile the analysis was computed for.

    Returns:
        bool: True when the user asked to start over.
    """
    header_col, reset_col = st.columns([4, 1])
    header_col.header("Your Financial Report")
    reset_clicked = reset_col.button("Start Over", key="dashboard-reset")
    st.write(result.summary)

    _render_metrics(result)
    _render_insights(result)

    st.subheader("10-Year Wealth Projection")
    st.altair_chart(build_projection_chart(result), use_container_width=True)

    plan_col, expenses_col = st.columns([3, 2])
    with plan_col:
        _render_action_plan(result)
    with expenses_col:
        _render_expenses(result, profile)
    return reset_clicked


__all__ = ["render_dashboard"]
