"""Validation helpers for incoming expense payloads."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

from .exceptions import (
    InvalidAmount,
    InvalidCategory,
    InvalidDate,
    InvalidDescription,
    MissingFields,
    ValidationError,
)
from .models import Amount, parse_datetime

REQUIRED_FIELDS = ("amount", "description", "category", "date")


@dataclass(frozen=True)
class ValidationResult:
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


VALID = ValidationResult()


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a valid amount or timestamp.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_amount(raw: object) -> Amount:
    if not _is_number(raw) or (isinstance(raw, float) and not math.isfinite(raw)) or raw <= 0:
        raise InvalidAmount()
    return raw


def validate_required_str(value: object, error: type) -> str:
    if not isinstance(value, str) or not value.strip():
        raise error()
    # Stored as submitted; trimming only decides emptiness.
    return value


def parse_timestamp(value: object) -> datetime:
    """Turn an ISO 8601 string or epoch milliseconds into a UTC datetime."""
    try:
        if isinstance(value, str):
            return parse_datetime(value)
        if _is_number(value) and math.isfinite(value):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDate() from exc
    raise InvalidDate()


def check_expense(candidate: object) -> None:
    """Raise the first ValidationError found in ``candidate``."""
    if not isinstance(candidate, Mapping) or any(
        name not in candidate for name in REQUIRED_FIELDS
    ):
        raise MissingFields()
    parse_amount(candidate["amount"])
    validate_required_str(candidate["description"], InvalidDescription)
    validate_required_str(candidate["category"], InvalidCategory)
    parse_timestamp(candidate["date"])


def validate_expense(candidate: object) -> ValidationResult:
    try:
        check_expense(candidate)
    except ValidationError as exc:
        return ValidationResult(error=exc)
    return VALID
