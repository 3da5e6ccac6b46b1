"""Streamlit rendering of the four-step financial form."""

from __future__ import annotations

import streamlit as st

from src.adapters.interface.streamlit.dashboard_charts import (
    format_signed_currency,
)
from src.application.use_cases.financial_form import FinancialFormController
from src.domain.constants import ASSET_TYPES, EXPENSE_CATEGORIES, FORM_STEPS
from src.domain.policies.form_steps import STEP_TITLES


def _render_basics(form: FinancialFormController) -> None:
    profile = form.profile
    age_col, income_col = st.columns(2)
    age = age_col.number_input(
        "Age",
        min_value=0,
        max_value=120,
        step=1,
        value=profile.age,
        key="form-age",
    )
    income = income_col.number_input(
        "Monthly Net Income ($)",
        min_value=0.0,
        step=100.0,
        value=float(profile.monthly_income),
        key="form-income",
    )
    goal = st.text_area(
        "Primary Financial Goal",
        value=profile.financial_goal,
        placeholder="e.g. Save for a house, Retire by 45, Pay off debt...",
        key="form-goal",
    )
    form.update_field("age", age)
    form.update_field("monthly_income", income)
    form.update_field("financial_goal", goal)


def _render_assets(form: FinancialFormController) -> None:
    if st.button("➕ Add Asset", key="add-asset"):
        form.add_item("assets")
    if not form.profile.assets:
        st.info("No assets added yet.")
    for asset in form.profile.assets:
        name_col, type_col, value_col, remove_col = st.columns([3, 2, 2, 1])
        name = name_col.text_input(
            "Asset Name",
            value=asset.name,
            placeholder="e.g. Savings",
            key=f"asset-name-{asset.id}",
        )
        asset_type = type_col.selectbox(
            "Type",
            options=list(ASSET_TYPES),
            index=list(ASSET_TYPES).index(asset.type),
            format_func=str.capitalize,
            key=f"asset-type-{asset.id}",
        )
        value = value_col.number_input(
            "Value ($)",
            min_value=0.0,
            step=100.0,
            value=float(asset.value),
            key=f"asset-value-{asset.id}",
        )
        if remove_col.button("🗑️", key=f"asset-remove-{asset.id}"):
            form.remove_item("assets", asset.id)
            continue
        form.update_item(
            "assets",
            asset.id,
            name=name,
            type=asset_type,
            value=value,
        )


def _render_liabilities(form: FinancialFormController) -> None:
    if st.button("➕ Add Liability", key="add-liability"):
        form.add_item("liabilities")
    if not form.profile.liabilities:
        st.success("No liabilities. Great job!")
    for liability in form.profile.liabilities:
        name_col, rate_col, amount_col, remove_col = st.columns([3, 2, 2, 1])
        name = name_col.text_input(
            "Liability Name",
            value=liability.name,
            placeholder="e.g. Car Loan",
            key=f"liability-name-{liability.id}",
        )
        rate = rate_col.number_input(
            "Interest Rate (%)",
            min_value=0.0,
            step=0.1,
            value=float(liability.interest_rate),
            key=f"liability-rate-{liability.id}",
        )
        amount = amount_col.number_input(
            "Amount Owed ($)",
            min_value=0.0,
            step=100.0,
            value=float(liability.amount),
            key=f"liability-amount-{liability.id}",
        )
        if remove_col.button("🗑️", key=f"liability-remove-{liability.id}"):
            form.remove_item("liabilities", liability.id)
            continue
        form.update_item(
            "liabilities",
            liability.id,
            name=name,
            interest_rate=rate,
            amount=amount,
        )


def _render_expenses(form: FinancialFormController) -> None:
    if st.button("➕ Add Expense", key="add-expense"):
        form.add_item("expenses")
    categories = list(EXPENSE_CATEGORIES)
    for expense in form.profile.expenses:
        options = (
            categories
            if expense.category in categories
            else [*categories, expense.category]
        )
        category_col, amount_col, remove_col = st.columns([3, 2, 1])
        category = category_col.selectbox(
            "Category",
            options=options,
            index=options.index(expense.category),
            key=f"expense-category-{expense.id}",
        )
        amount = amount_col.number_input(
            "Monthly Amount ($)",
            min_value=0.0,
            step=50.0,
            value=float(expense.amount),
            key=f"expense-amount-{expense.id}",
        )
        if remove_col.button("🗑️", key=f"expense-remove-{expense.id}"):
            form.remove_item("expenses", expense.id)
            continue
        form.update_item(
            "expenses",
            expense.id,
            category=category,
            amount=amount,
        )

    cash_flow = form.net_cash_flow()
    st.metric(
        "Estimated Monthly Cash Flow",
        format_signed_currency(cash_flow),
        delta=None,
    )
    if cash_flow < 0:
        st.warning("Your expenses exceed your income.")


_STEP_RENDERERS = {
    1: _render_basics,
    2: _render_assets,
    3: _render_liabilities,
    4: _render_expenses,
}


def render_form(form: FinancialFormController) -> bool:
    """Render the current step and its navigation.

    Args:
        form: Controller holding the edited profile and step.

    Returns:
        bool: True when the user asked to submit on the last step.
    """
    step = form.step
    st.progress(step / FORM_STEPS, text=f"Step {step} of {FORM_STEPS}")
    st.subheader(STEP_TITLES[step])
    _STEP_RENDERERS[step](form)

    back_col, _, next_col = st.columns([1, 3, 1])
    if back_col.button("Back", disabled=step == 1, key="form-back"):
        form.prev_step()
        st.rerun()
    if not form.is_last_step:
        if next_col.button("Next Step", type="primary", key="form-next"):
            issues = form.next_step()
            for issue in issues:
                st.warning(issue)
            if not issues:
                st.rerun()
        return False
    return next_col.button("Analyze Finances", type="primary", key="form-submit")


__all__ = ["render_form"]
