"""Core business logic package for the expense API."""

from .dispatch import DispatchResult, ExpenseDispatcher
from .models import Expense
from .services import ExpenseStore
from .validators import ValidationResult, validate_expense
from .exceptions import (
    EmptyBody,
    ExpenseApiError,
    InvalidAmount,
    InvalidCategory,
    InvalidDate,
    InvalidDescription,
    MethodNotAllowed,
    MissingFields,
    ValidationError,
)

__all__ = [
    "DispatchResult",
    "ExpenseDispatcher",
    "Expense",
    "ExpenseStore",
    "ValidationResult",
    "validate_expense",
    "EmptyBody",
    "ExpenseApiError",
    "InvalidAmount",
    "InvalidCategory",
    "InvalidDate",
    "InvalidDescription",
    "MethodNotAllowed",
    "MissingFields",
    "ValidationError",
]
