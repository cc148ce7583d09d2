"""Maps an expense endpoint request onto a store operation.

The dispatcher knows nothing about the web framework: it receives the HTTP
method and the decoded JSON body (or ``None``) and returns a status code with
the JSON payload to send. Only ``POST`` touches the store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .exceptions import EmptyBody, ExpenseApiError, MethodNotAllowed
from .services import ExpenseStore
from .validators import validate_expense

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "OPTIONS")
CREATED_MESSAGE = "Expense added successfully."


def is_empty_body(body: object) -> bool:
    """True for bodies with no fields: nothing, empty containers and JSON scalars."""
    if not body:
        return True
    # Strings and arrays have index keys and go on to field validation.
    return not isinstance(body, (Mapping, str, list))


@dataclass(frozen=True)
class DispatchResult:
    status: int
    payload: Optional[Dict[str, Any]] = None


class ExpenseDispatcher:
    def __init__(self, store: ExpenseStore) -> None:
        self._store = store

    def dispatch(self, method: str, body: object = None) -> DispatchResult:
        method = method.upper()
        try:
            if method == "OPTIONS":
                return DispatchResult(200)
            if method == "GET":
                return self.list_expenses()
            if method == "POST":
                return self.create_expense(body)
            raise MethodNotAllowed(method)
        except ExpenseApiError as exc:
            logger.debug("rejected %s request: %s", method, exc.message)
            return DispatchResult(exc.status, {"success": False, "error": exc.message})

    def list_expenses(self) -> DispatchResult:
        expenses = self._store.list_all()
        return DispatchResult(
            200,
            {
                "success": True,
                "data": [expense.to_dict() for expense in expenses],
                "count": len(expenses),
            },
        )

    def create_expense(self, body: object) -> DispatchResult:
        if is_empty_body(body):
            raise EmptyBody()
        result = validate_expense(body)
        if not result.ok:
            raise result.error
        expense = self._store.append(
            body["amount"], body["description"], body["category"], body["date"]
        )
        return DispatchResult(
            201, {"success": True, "message": CREATED_MESSAGE, "data": expense.to_dict()}
        )
