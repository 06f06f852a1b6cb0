"""Utility functions for receipt-points."""

from receipt_points.utils.payload import receipt_from_payload, receipt_to_payload

__all__ = ["receipt_from_payload", "receipt_to_payload"]
