"""
Abstract base class for phone number storage.

This module defines the interface that every backing store for phone
numbers must implement, so callers can swap stores without changes.
"""

from abc import ABC, abstractmethod
from types import TracebackType

from phonestore.schemas import PhoneNumber


class PhoneNumberStorage(ABC):
    """
    Storage-agnostic interface for phone number records.

    Implementations must provide the four record operations below.
    Failures from the backing store are raised as StorageError subclasses.
    """

    @abstractmethod
    def create_phone_number(self, number: str) -> int:
        """
        Store a new phone number.

        Args:
            number: Phone number value; no format validation is performed

        Returns:
            int: Identifier assigned to the new record by the store

        Raises:
            StorageError: If the record cannot be created
        """
        pass

    @abstractmethod
    def get_phone_numbers(self) -> list[PhoneNumber]:
        """
        List every stored phone number.

        Returns:
            list[PhoneNumber]: Records in the order the store returns them,
                empty if nothing is stored

        Raises:
            StorageError: If the records cannot be retrieved
        """
        pass

    @abstractmethod
    def update_phone_number(self, number: PhoneNumber) -> None:
        """
        Replace the value of an existing record.

        Args:
            number: Record carrying the identifier to update and its new value

        Raises:
            StorageError: If the update fails
        """
        pass

    @abstractmethod
    def remove_phone_number(self, id: int) -> None:
        """
        Delete a record by identifier. Unknown identifiers are a no-op.

        Args:
            id: Identifier of the record to delete

        Raises:
            StorageError: If the delete fails
        """
        pass

    def close(self) -> None:
        """Release any resources held by the store."""
        pass

    def __enter__(self) -> "PhoneNumberStorage":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
