"""Domain models for the user's declared financial inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from src.domain.constants import ASSET_TYPES, DEFAULT_EXPENSE_CATEGORY
from src.utils.number_utils import coerce_int, coerce_number


@dataclass(frozen=True)
class Asset:
    """Something the user owns.

    Attributes:
        id: Identifier, unique within the profile's assets.
        name: Display name.
        value: Current monetary value.
        type: Category tag, one of ``ASSET_TYPES``.
    """

    id: str
    name: str = ""
    value: float = 0.0
    type: str = "cash"

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "type": self.type,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Asset":
        asset_type = str(payload.get("type") or "other").strip().lower()
        if asset_type not in ASSET_TYPES:
            asset_type = "other"
        return cls(
            id=str(payload["id"]),
            name=str(payload.get("name") or ""),
            value=coerce_number(payload.get("value")),
            type=asset_type,
        )


@dataclass(frozen=True)
class Liability:
    """Something the user owes.

    Attributes:
        id: Identifier, unique within the profile's liabilities.
        name: Display name.
        amount: Outstanding amount.
        interest_rate: Annual interest rate in percent (7.5 means 7.5 %).
    """

    id: str
    name: str = ""
    amount: float = 0.0
    interest_rate: float = 0.0

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "interestRate": self.interest_rate,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Liability":
        return cls(
            id=str(payload["id"]),
            name=str(payload.get("name") or ""),
            amount=coerce_number(payload.get("amount")),
            interest_rate=coerce_number(payload.get("interestRate")),
        )


@dataclass(frozen=True)
class Expense:
    """A recurring monthly expense."""

    id: str
    category: str = DEFAULT_EXPENSE_CATEGORY
    amount: float = 0.0

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, "category": self.category, "amount": self.amount}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Expense":
        return cls(
            id=str(payload["id"]),
            category=str(payload.get("category") or "Other"),
            amount=coerce_number(payload.get("amount")),
        )


def _ensure_unique_ids(collection: str, items: tuple) -> None:
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            raise ValueError(
                f"Duplicate id '{item.id}' in profile {collection}"
            )
        seen.add(item.id)


def _payload_items(
    payload: Mapping[str, Any],
    collection: str,
) -> list[Mapping[str, Any]]:
    items = payload.get(collection) or []
    if not isinstance(items, list):
        raise ValueError(f"Profile {collection} must be a list")
    for index, item in enumerate(items, start=1):
        if not isinstance(item, Mapping):
            raise ValueError(
                f"Entry #{index} of profile {collection} must be an object"
            )
    return items


@dataclass(frozen=True)
class FinancialProfile:
    """Aggregate root for the user's financial inputs.

    Profiles are immutable: editing produces a new value, so the snapshot
    submitted for analysis never changes afterwards. Collections keep
    insertion order for display.

    Attributes:
        monthly_income: Net monthly income.
        age: Age in years.
        financial_goal: Free-text goal.
        assets: Owned assets.
        liabilities: Outstanding debts.
        expenses: Monthly expenses.
    """

    monthly_income: float = 0.0
    age: int = 0
    financial_goal: str = ""
    assets: tuple[Asset, ...] = field(default_factory=tuple)
    liabilities: tuple[Liability, ...] = field(default_factory=tuple)
    expenses: tuple[Expense, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for collection in ("assets", "liabilities", "expenses"):
            items = tuple(getattr(self, collection))
            object.__setattr__(self, collection, items)
            _ensure_unique_ids(collection, items)

    def to_payload(self) -> dict[str, Any]:
        """Serialize the profile with the wire (camelCase) field names."""
        return {
            "monthlyIncome": self.monthly_income,
            "assets": [asset.to_payload() for asset in self.assets],
            "liabilities": [
                liability.to_payload() for liability in self.liabilities
            ],
            "expenses": [expense.to_payload() for expense in self.expenses],
            "financialGoal": self.financial_goal,
            "age": self.age,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FinancialProfile":
        """Build a profile from its wire representation.

        Raises:
            ValueError: If a collection is not a list of objects or repeats
                an identifier.
            KeyError: If a line item has no ``id``.
        """
        return cls(
            monthly_income=coerce_number(payload.get("monthlyIncome")),
            age=coerce_int(payload.get("age")),
            financial_goal=str(payload.get("financialGoal") or ""),
            assets=tuple(
                Asset.from_payload(item)
                for item in _payload_items(payload, "assets")
            ),
            liabilities=tuple(
                Liability.from_payload(item)
                for item in _payload_items(payload, "liabilities")
            ),
            expenses=tuple(
                Expense.from_payload(item)
                for item in _payload_items(payload, "expenses")
            ),
        )


__all__ = ["Asset", "Liability", "Expense", "FinancialProfile"]
