"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from receipt_points.domain.entities import Receipt


class Database(ABC):
    """Abstract receipt store for receipt-points."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def write_receipt(self, receipt: Receipt) -> str:
        """Store a receipt and all of its items as one unit.

        Either every row is written or none is.

        Args:
            receipt: Receipt entity with its ``id`` already assigned

        Returns:
            Receipt ID

        Raises:
            StorageError: If the write failed; nothing from it is visible
        """
        pass

    @abstractmethod
    def read_receipt(self, receipt_id: str) -> Optional[Receipt]:
        """Get receipt by ID with its items in submission order.

        Returns None if no such receipt exists.

        Raises:
            StorageError: If the read failed
        """
        pass
