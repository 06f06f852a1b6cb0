"""Receipt domain service."""

import dataclasses
import logging
import uuid
from typing import Optional

from receipt_points.database.base import Database
from receipt_points.domain.entities import Receipt
from receipt_points.domain.errors import (
    NotFoundError,
    ValidationError,
    receipt_not_found,
)
from receipt_points.domain.points import calculate_points
from receipt_points.domain.validation import validate_record

logger = logging.getLogger(__name__)


class ReceiptService:
    """Service for submitting receipts and looking up their points."""

    def __init__(self, db: Database):
        """Initialize receipt service.

        Args:
            db: Database instance
        """
        self.db = db

    def submit(self, receipt: Receipt) -> str:
        """Validate and store a receipt.

        Args:
            receipt: Candidate receipt; any id it carries is replaced

        Returns:
            Newly generated receipt ID

        Raises:
            ValidationError: If the receipt fails structural validation
            StorageError: If the receipt could not be persisted
        """
        try:
            validate_record(receipt)
        except ValidationError:
            logger.debug("Rejected invalid receipt submission")
            raise

        stored = dataclasses.replace(receipt, id=str(uuid.uuid4()))
        receipt_id = self.db.write_receipt(stored)
        logger.info("Stored receipt %s with %d items", receipt_id, len(stored.items))
        return receipt_id

    def get_receipt(self, receipt_id: str) -> Optional[Receipt]:
        """Get receipt by ID.

        Args:
            receipt_id: Receipt ID

        Returns:
            Receipt entity or None if not found
        """
        return self.db.read_receipt(receipt_id)

    def require_receipt(self, receipt_id: str) -> Receipt:
        """Get receipt by ID or raise if it does not exist."""
        receipt = self.db.read_receipt(receipt_id)
        if receipt is None:
            raise NotFoundError(receipt_not_found(receipt_id))
        return receipt

    def lookup(self, receipt_id: str) -> int:
        """Calculate the points for a stored receipt.

        Args:
            receipt_id: Receipt ID returned by submit

        Returns:
            Points total

        Raises:
            NotFoundError: If no receipt exists with that ID
            StorageError: If the receipt could not be read
        """
        return calculate_points(self.require_receipt(receipt_id))
