"""HTTP layer for receipt-points application."""

from receipt_points.api.app import create_app

__all__ = ["create_app"]
