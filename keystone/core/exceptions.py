from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from keystone.schemas.response.validation import ValidationResult


class InvalidStatementError(ValueError):
    """Exception raised when a catalog query cannot be executed or yields no result set."""

    def __init__(self, message: str = "Invalid SQL statement"):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message}"


class UnsupportedDialect(Exception):
    """
    This exception is raised when the fixture provisioner is pointed at a database
    engine it has no catalog queries for.
    """

    def __init__(self, dialect: str):
        self.dialect = dialect
        super().__init__(f"Unsupported database dialect: {dialect}")


class ValidationFailed(Exception):
    """Exception raised when an entity fails validation. Carries the full result."""

    def __init__(self, result: "ValidationResult", message: str = "Please check your input"):
        self.result = result
        self.message = message
        super().__init__(self.message)


class ValidationResultFrozen(RuntimeError):
    """Exception raised when an error is added to a result that was already returned."""

    ...
