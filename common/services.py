"""Framework-agnostic business services for the expense API."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from .models import Amount, Expense
from .validators import parse_timestamp

logger = logging.getLogger(__name__)


class ExpenseStore:
    """Holds expense records in memory for the lifetime of the process."""

    def __init__(self, seed: Iterable[Expense] = ()) -> None:
        self._expenses: List[Expense] = list(seed)
        self._next_id = max((expense.id for expense in self._expenses), default=0) + 1
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls, now: Optional[datetime] = None) -> "ExpenseStore":
        now = now or datetime.now(timezone.utc)
        return cls(
            [
                Expense(id=1, amount=50.00, description="Groceries", category="Food", date=now),
                Expense(
                    id=2,
                    amount=15.75,
                    description="Coffee & Pastry",
                    category="Coffee",
                    date=now - timedelta(days=1),
                ),
            ]
        )

    # Public API -----------------------------------------------------------
    def list_all(self) -> List[Expense]:
        return list(self._expenses)

    def append(self, amount: Amount, description: str, category: str, date: object) -> Expense:
        """Store an already validated expense under the next free id."""
        normalized = parse_timestamp(date)
        with self._lock:
            expense = Expense(
                id=self._next_id,
                amount=amount,
                description=description,
                category=category,
                date=normalized,
            )
            self._next_id += 1
            self._expenses.append(expense)
        logger.debug("stored expense %s (%d total)", expense.id, len(self._expenses))
        return expense

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def count(self) -> int:
        return len(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)
