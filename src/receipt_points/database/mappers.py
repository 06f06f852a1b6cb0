"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout (generated
item ids, storage positions) never leaks into the domain entities.
"""

import uuid

from receipt_points.domain import entities as domain
from receipt_points.database.models import (
    Receipt as ORMReceipt,
    Item as ORMItem,
)


def item_to_domain(orm_item: ORMItem) -> domain.Item:
    """Convert SQLAlchemy Item model to domain Item entity."""
    return domain.Item(
        short_description=orm_item.short_description,
        price=orm_item.price,
    )


def receipt_to_domain(orm_receipt: ORMReceipt) -> domain.Receipt:
    """Convert SQLAlchemy Receipt model (with loaded items) to domain Receipt."""
    return domain.Receipt(
        id=orm_receipt.id,
        retailer=orm_receipt.retailer,
        purchase_date=orm_receipt.purchase_date,
        purchase_time=orm_receipt.purchase_time,
        total=orm_receipt.total,
        items=tuple(item_to_domain(item) for item in orm_receipt.items),
    )


def receipt_to_orm(receipt: domain.Receipt) -> ORMReceipt:
    """Convert domain Receipt to new SQLAlchemy rows ready to be added.

    Each item gets a freshly generated row id and its submission position.
    """
    return ORMReceipt(
        id=receipt.id,
        retailer=receipt.retailer,
        purchase_date=receipt.purchase_date,
        purchase_time=receipt.purchase_time,
        total=receipt.total,
        items=[
            ORMItem(
                id=str(uuid.uuid4()),
                receipt_id=receipt.id,
                position=position,
                short_description=item.short_description,
                price=item.price,
            )
            for position, item in enumerate(receipt.items)
        ],
    )
