"""Tests for the financial profile models."""

import pytest

from src.domain.models.profile import Asset, Expense, FinancialProfile


def test_duplicate_ids_in_a_collection_are_rejected() -> None:
    """Two assets sharing an id must never form a valid profile."""
    with pytest.raises(ValueError, match="Duplicate id 'a1'"):
        FinancialProfile(
            assets=(
                Asset(id="a1", name="Savings", value=10),
                Asset(id="a1", name="Checking", value=20),
            )
        )


def test_same_id_in_different_collections_is_allowed() -> None:
    profile = FinancialProfile(
        assets=(Asset(id="x", name="Savings"),),
        expenses=(Expense(id="x", category="Food"),),
    )

    assert profile.assets[0].id == profile.expenses[0].id


def test_collections_are_stored_as_tuples() -> None:
    profile = FinancialProfile(assets=[Asset(id="a1", name="Savings")])

    assert isinstance(profile.assets, tuple)


def test_to_payload_uses_wire_field_names(sample_profile) -> None:
    payload = sample_profile.to_payload()

    assert payload["monthlyIncome"] == 5000
    assert payload["financialGoal"] == "Buy a house in five years"
    assert payload["age"] == 34
    assert payload["liabilities"][0] == {
        "id": "l1",
        "name": "Credit card",
        "amount": 4000,
        "interestRate": 19.9,
    }
    assert payload["assets"][1]["type"] == "investment"
    assert payload["expenses"][0] == {
        "id": "e1",
        "category": "Housing",
        "amount": 2700,
    }


def test_from_payload_reads_wire_shape(sample_profile) -> None:
    """Reading a serialized profile should give back the same value."""
    assert FinancialProfile.from_payload(
        sample_profile.to_payload()
    ) == sample_profile


def test_from_payload_coerces_blank_numbers_and_unknown_types() -> None:
    profile = FinancialProfile.from_payload(
        {
            "monthlyIncome": "",
            "age": "41",
            "assets": [{"id": "a", "name": "Art", "value": "abc", "type": "NFT"}],
        }
    )

    assert profile.monthly_income == 0.0
    assert profile.age == 41
    assert profile.assets[0].value == 0.0
    assert profile.assets[0].type == "other"
    assert profile.liabilities == ()


@pytest.mark.parametrize(
    ("collection", "value", "message"),
    [
        ("liabilities", ["x"], "Entry #1 of profile liabilities"),
        ("assets", [{"id": "a1"}, 7], "Entry #2 of profile assets"),
        ("expenses", "rent", "profile expenses must be a list"),
    ],
)
def test_from_payload_rejects_malformed_collections(
    collection,
    value,
    message,
) -> None:
    with pytest.raises(ValueError, match=message):
        FinancialProfile.from_payload({"monthlyIncome": 1, collection: value})
