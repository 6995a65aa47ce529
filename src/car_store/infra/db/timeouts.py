from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.orm import Session


@dataclass(frozen=True, slots=True)
class QueryBudget:
    """Per-operation time budgets, in seconds."""

    point: float = 5.0
    listing: float = 10.0


def apply_statement_timeout(session: Session, seconds: float) -> None:
    """
    Bound every following statement of the current transaction.

    PostgreSQL cancels a statement that runs past the budget and raises,
    which surfaces as an OperationalError. Other dialects are left as is.
    """
    if session.get_bind().dialect.name != "postgresql":
        return
    # SET does not accept bind parameters; the value is an int we computed
    session.execute(text(f"SET LOCAL statement_timeout = {int(seconds * 1000)}"))
