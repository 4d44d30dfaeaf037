"""Error Hierarchy: typed, categorized exceptions for every Storefront failure mode.

Invariants:
    - Every error has an `error` label (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is fixed per subclass; handlers never pick a status themselves
    - to_response() produces the failure envelope (core/envelope.py)
    - Credentials never appear in a message

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all (ADR: uniform error shape)
    - StorageError exposes the raw driver message (ADR: non-hardened operational tool, kept transparent)
"""

from enum import Enum

from storefront.core.envelope import error_envelope


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


class StorefrontError(Exception):
    """Base exception for all Storefront errors."""

    def __init__(
        self,
        message: str,
        error: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return error_envelope(self.error, self.message)


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(StorefrontError):
    """Request input failed a presence or uniqueness check."""
    def __init__(self, message: str, error: str = "Validation error"):
        super().__init__(
            message, error, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class MissingFieldsError(ValidationError):
    """One or more required fields absent, null, or blank."""
    def __init__(self, fields: list[str]):
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = fields


class EmailAlreadyRegisteredError(ValidationError):
    def __init__(self, email: str):
        super().__init__(
            f"An account with email '{email}' already exists",
            error="Email already registered",
        )
        self.email = email


class NotFoundError(StorefrontError):
    """Requested row does not exist."""
    def __init__(self, item_label: str, item_id: object):
        super().__init__(
            f"{item_label} with id {item_id} does not exist",
            f"{item_label} not found",
            ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )


class AuthError(StorefrontError):
    """Credentials or admin key rejected."""
    def __init__(
        self,
        message: str,
        error: str,
        category: ErrorCategory = ErrorCategory.AUTHENTICATION,
        http_status: int = 401,
    ):
        super().__init__(
            message, error, category, ErrorSeverity.WARNING, http_status,
        )


class InvalidCredentialsError(AuthError):
    """Unknown email and wrong password share this one message."""
    def __init__(self):
        super().__init__("Invalid email or password", "Authentication failed")


class AdminKeyMismatchError(AuthError):
    def __init__(self):
        super().__init__(
            "Invalid admin key", "Forbidden",
            ErrorCategory.AUTHORIZATION, 403,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(StorefrontError):
    """Any persistence-layer fault: connectivity, constraint, timeout."""
    def __init__(self, message: str, operation: str = "query"):
        super().__init__(
            message, "Database error", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
