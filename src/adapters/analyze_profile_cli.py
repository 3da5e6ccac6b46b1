"""CLI adapter to analyze a saved financial profile.

Usage::

    python -m src.adapters.analyze_profile_cli profile.json

The profile file uses the same camelCase shape as the analysis payload.
``PROFILE_FILE`` is read when no path argument is given.
"""

import asyncio
import json
import os
import sys
from pathlib import Path

from src.domain.models.profile import FinancialProfile
from src.domain.models.session import AppState
from src.infrastructure.container import build_run_analysis_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.session_store import InMemorySessionStore


def _load_profile(raw_path: str | None, logger) -> FinancialProfile | None:
    """Read a profile payload from disk.

    Args:
        raw_path: Path to a JSON profile file.
        logger: Logger used for errors.

    Returns:
        FinancialProfile | None: Parsed profile or None when unreadable.
    """
    if not raw_path:
        logger.warning("A profile path (or PROFILE_FILE) is required.")
        return None
    path = Path(raw_path).expanduser()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return FinancialProfile.from_payload(payload)
    except (OSError, ValueError, KeyError, AttributeError) as exc:
        logger.error(f"Cannot load profile from {path}: {exc}")
        return None


def main(argv: list[str] | None = None) -> int:
    """Run one analysis for a profile file and print the report."""
    args = sys.argv[1:] if argv is None else argv
    logger = get_app_logger()
    profile = _load_profile(
        args[0] if args else os.getenv("PROFILE_FILE"),
        logger,
    )
    if profile is None:
        return 1

    use_case = build_run_analysis_use_case(store=InMemorySessionStore())
    session = asyncio.run(use_case.execute(profile))

    if session.state is not AppState.RESULTS:
        print(session.error_message)
        return 1

    result = session.result
    print(f"Financial health score: {result.financial_health_score:.0f}/100")
    print(
        f"Net worth: {result.net_worth:,.2f} | "
        f"monthly cash flow: {result.monthly_cash_flow:+,.2f} | "
        f"debt-to-income: {result.debt_to_income_ratio:.1f}% | "
        f"savings rate: {result.savings_rate:.1f}%"
    )
    print(result.summary)
    for insight in result.key_insights:
        print(f"- {insight}")
    for action in result.action_plan:
        print(f"[{action.priority}] {action.title}: {action.description}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
