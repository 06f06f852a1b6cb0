"""Domain layer for receipt-points.

Services are imported from their modules (e.g.
``receipt_points.domain.receipt``) to keep the database layer free of
circular imports through this package.
"""
