"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when command options are missing or carry an illegal value."""

    def __init__(self, message: str = "Invalid options", field: str | None = None) -> None:
        self.field = field
        super().__init__(message, code="VAL_CONFIGURATION_ERROR")


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class AuthenticationError(ApplicationError):
    """Raised when API credentials are missing."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class ExternalServiceError(ApplicationError):
    """Raised when the remote API reports a failed operation."""

    def __init__(
        self,
        message: str = "External service error",
        violations: list[str] | None = None,
    ) -> None:
        self.violations = violations or []
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")
