"""Domain-specific exceptions for the expense API core services."""


class ExpenseApiError(Exception):
    """Base error carrying the HTTP status it should be reported with."""

    status = 500
    default_message = "Internal server error."

    def __init__(self, message=None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ExpenseApiError, ValueError):
    """Raised when provided data does not meet validation requirements."""

    status = 400
    default_message = "Invalid expense payload."


class EmptyBody(ValidationError):
    default_message = (
        "Invalid or empty JSON body. Please ensure your Content-Type is application/json."
    )


class MissingFields(ValidationError):
    default_message = (
        "Missing required fields: 'amount', 'description', 'category', and 'date' are required."
    )


class InvalidAmount(ValidationError):
    default_message = "'amount' must be a positive number."


class InvalidDescription(ValidationError):
    default_message = "'description' must be a non-empty string."


class InvalidCategory(ValidationError):
    default_message = "'category' must be a non-empty string."


class InvalidDate(ValidationError):
    default_message = "'date' must be a valid date string (e.g., ISO 8601 format)."


class MethodNotAllowed(ExpenseApiError):
    """Raised for HTTP verbs the expense endpoint does not serve."""

    status = 405

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method {method} Not Allowed")
