"""Controller behind the four-step financial form.

The controller owns the step cursor and the profile being edited. Profiles
are immutable values, so every edit swaps in a new profile and the
snapshot returned by ``submit`` can never be altered afterwards.
"""

from dataclasses import replace
from typing import Any
from uuid import uuid4

from src.domain.constants import FORM_STEPS, PROFILE_COLLECTIONS
from src.domain.errors import FormIncompleteError
from src.domain.models.profile import (
    Asset,
    Expense,
    FinancialProfile,
    Liability,
)
from src.domain.policies.form_steps import step_issues, submission_issues
from src.domain.services.normalization import (
    normalize_asset_type,
    normalize_category,
)
from src.domain.services.profile_totals import net_cash_flow, total_expenses
from src.utils.number_utils import coerce_int, coerce_number


_ITEM_FACTORIES = {
    "assets": lambda item_id: Asset(id=item_id),
    "liabilities": lambda item_id: Liability(id=item_id),
    "expenses": lambda item_id: Expense(id=item_id),
}

_NUMERIC_ITEM_FIELDS = {"value", "amount", "interest_rate"}


class FinancialFormController:
    """Edit a profile step by step and gate its submission."""

    def __init__(self, profile: FinancialProfile | None = None) -> None:
        self._profile = profile or FinancialProfile()
        self._step = 1

    @property
    def profile(self) -> FinancialProfile:
        return self._profile

    @property
    def step(self) -> int:
        return self._step

    @property
    def is_last_step(self) -> bool:
        return self._step == FORM_STEPS

    def load(self, profile: FinancialProfile | None) -> None:
        """Replace the edited profile and go back to the first step."""
        self._profile = profile or FinancialProfile()
        self._step = 1

    def update_field(self, field: str, value: Any) -> None:
        """Update a top-level field of the profile.

        Args:
            field: ``monthly_income``, ``age`` or ``financial_goal``.
            value: Raw form value; numbers are coerced (invalid -> 0).

        Raises:
            ValueError: If ``field`` is not editable.
        """
        if field == "monthly_income":
            coerced: Any = coerce_number(value)
        elif field == "age":
            coerced = coerce_int(value)
        elif field == "financial_goal":
            coerced = "" if value is None else str(value)
        else:
            raise ValueError(f"Unknown profile field: {field}")
        self._profile = replace(self._profile, **{field: coerced})

    def add_item(self, kind: str) -> str:
        """Append a blank line item with a freshly generated id.

        Returns:
            str: Identifier of the new item.
        """
        factory = _ITEM_FACTORIES[self._check_kind(kind)]
        item_id = uuid4().hex
        items = getattr(self._profile, kind)
        self._profile = replace(
            self._profile,
            **{kind: (*items, factory(item_id))},
        )
        return item_id

    def update_item(self, kind: str, item_id: str, **changes: Any) -> None:
        """Apply ``changes`` to the item identified by ``item_id``.

        Raises:
            KeyError: If no item of ``kind`` has this id.
            ValueError: If ``changes`` tries to modify the id.
        """
        if "id" in changes:
            raise ValueError("Line item ids cannot be changed")
        items = getattr(self._profile, self._check_kind(kind))
        normalized = self._normalize_changes(kind, changes)
        updated = []
        found = False
        for item in items:
            if item.id == item_id:
                item = replace(item, **normalized)
                found = True
            updated.append(item)
        if not found:
            raise KeyError(item_id)
        self._profile = replace(self._profile, **{kind: tuple(updated)})

    def remove_item(self, kind: str, item_id: str) -> None:
        """Drop the item identified by ``item_id`` (no-op when unknown)."""
        items = getattr(self._profile, self._check_kind(kind))
        self._profile = replace(
            self._profile,
            **{kind: tuple(item for item in items if item.id != item_id)},
        )

    def current_issues(self) -> list[str]:
        """Return what prevents the current step from being complete."""
        return step_issues(self._profile, self._step)

    def next_step(self) -> list[str]:
        """Advance when the current step is complete.

        Returns:
            list[str]: Blocking issues; empty when the step advanced.
        """
        issues = self.current_issues()
        if not issues:
            self._step = min(self._step + 1, FORM_STEPS)
        return issues

    def prev_step(self) -> None:
        self._step = max(self._step - 1, 1)

    def submit(self) -> FinancialProfile:
        """Return the profile snapshot to analyze.

        Raises:
            FormIncompleteError: If not on the last step or a step has issues.
        """
        if not self.is_last_step:
            raise FormIncompleteError(
                [f"Complete all {FORM_STEPS} steps before submitting."]
            )
        issues = submission_issues(self._profile)
        if issues:
            raise FormIncompleteError(issues)
        return self._profile

    def total_expenses(self) -> float:
        return total_expenses(self._profile)

    def net_cash_flow(self) -> float:
        return net_cash_flow(self._profile)

    @staticmethod
    def _check_kind(kind: str) -> str:
        if kind not in PROFILE_COLLECTIONS:
            raise ValueError(f"Unknown profile collection: {kind}")
        return kind

    @staticmethod
    def _normalize_changes(kind: str, changes: dict[str, Any]) -> dict:
        normalized = {}
        for key, value in changes.items():
            if key in _NUMERIC_ITEM_FIELDS:
                value = coerce_number(value)
            elif key == "type" and kind == "assets":
                value = normalize_asset_type(value)
            elif key == "category":
                value = normalize_category(value)
            normalized[key] = value
        return normalized


__all__ = ["FinancialFormController"]
