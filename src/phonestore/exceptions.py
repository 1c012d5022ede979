"""Custom exception classes for phone number storage."""


class StorageError(Exception):
    """Base exception for all storage errors."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize StorageError.

        Args:
            message: Contextual error message
            original_error: Exception raised by the database layer, if any
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message


class StorageConnectionError(StorageError):
    """Raised when the database connection cannot be opened or used."""

    pass


class StorageQueryError(StorageError):
    """Raised when a statement fails or its rows cannot be read."""

    pass
