"""Domain normalization helpers."""

from src.domain.constants import ACTION_PRIORITIES, ASSET_TYPES


def normalize_asset_type(asset_type: str | None) -> str:
    """Normalize asset category tags.

    Args:
        asset_type: Raw tag typed or selected by the user.

    Returns:
        str: One of ``ASSET_TYPES``; unknown tags map to ``other``.
    """
    if not asset_type:
        return "other"
    cleaned = asset_type.strip().lower()
    return cleaned if cleaned in ASSET_TYPES else "other"


def normalize_category(category: str | None) -> str:
    """Normalize free-form expense categories.

    Args:
        category: Raw category, usually one of ``EXPENSE_CATEGORIES``.

    Returns:
        str: Stripped category with collapsed whitespace.
    """
    if not category:
        return ""
    return " ".join(category.split())


def normalize_priority(priority: str | None) -> str | None:
    """Normalize action priorities returned by the model.

    Args:
        priority: Raw priority value.

    Returns:
        str | None: ``High``, ``Medium`` or ``Low``; None when unknown.
    """
    if not isinstance(priority, str):
        return None
    cleaned = priority.strip().capitalize()
    return cleaned if cleaned in ACTION_PRIORITIES else None


__all__ = [
    "normalize_asset_type",
    "normalize_category",
    "normalize_priority",
]
