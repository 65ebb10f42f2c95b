"""
Pet Registry Exception Hierarchy.

Defines the custom exceptions used across the Pet Registry system.
Provides consistent error handling and debugging information.
"""

from typing import Any


class PetRegistryError(Exception):
    """
    Base exception for all Pet Registry errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a PetRegistryError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class RegistryError(PetRegistryError):
    """
    Errors in registry operations.

    Raised when a registry operation is rejected, including:
    - Invalid pet data
    - Duplicate registration
    - Missing record
    - Unauthorized deletion
    """

    def __init__(
        self,
        message: str,
        *,
        identity: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a RegistryError.

        Args:
            message: Human-readable error message
            identity: Identity whose record was involved
            operation: Operation being performed
            details: Optional structured data for debugging
        """
        details = details or {}
        if identity:
            details["identity"] = identity
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.identity = identity
        self.operation = operation


class InvalidInputError(RegistryError):
    """Raised when pet data fails validation (empty name, age out of range)."""

    def __init__(
        self,
        message: str = "Invalid input",
        *,
        identity: str | None = None,
        operation: str | None = None,
        field: str | None = None,
    ):
        details = {}
        if field:
            details["field"] = field
        super().__init__(
            message,
            identity=identity,
            operation=operation,
            details=details,
        )
        self.field = field


class DuplicateRecordError(RegistryError):
    """Raised when an identity that already has a pet tries to register another."""

    def __init__(
        self,
        message: str = "User already has a registered pet",
        *,
        identity: str | None = None,
    ):
        super().__init__(message, identity=identity, operation="register")


class RecordNotFoundError(RegistryError):
    """Raised when an operation targets an identity with no registered pet."""

    def __init__(
        self,
        message: str = "User has no registered pet",
        *,
        identity: str | None = None,
        operation: str | None = None,
    ):
        super().__init__(message, identity=identity, operation=operation)


class UnauthorizedError(RegistryError):
    """
    Raised when a non-administrator invokes an administrator-only operation.

    The target identity is deliberately left out of the details so the
    error does not reveal whether the target has a record.
    """

    def __init__(
        self,
        message: str = "Only owner can call this function",
        *,
        requester: str | None = None,
        operation: str | None = None,
    ):
        details = {}
        if requester:
            details["requester"] = requester
        super().__init__(message, operation=operation, details=details)
        self.requester = requester


class ConfigurationError(PetRegistryError):
    """
    Errors in configuration loading or validation.

    Raised when:
    - Required environment variables are not set
    - The administrator identity is missing or conflicts with a snapshot
    - A persisted snapshot is unreadable
    """

    def __init__(
        self,
        message: str,
        *,
        config_file: str | None = None,
        env_var: str | None = None,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a ConfigurationError.

        Args:
            message: Human-readable error message
            config_file: Path to configuration or snapshot file if applicable
            env_var: Environment variable name if applicable
            config_key: Configuration key if applicable
            details: Optional structured data for debugging
        """
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if env_var:
            details["env_var"] = env_var
        if config_key:
            details["config_key"] = config_key

        super().__init__(message, details=details)
        self.config_file = config_file
        self.env_var = env_var
        self.config_key = config_key


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, PetRegistryError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
