"""Shared pytest fixtures for receipt-points tests."""

import tempfile
import os
import pytest

from receipt_points.database.factories import create_sqlite_database
from receipt_points.domain.entities import Item, Receipt
from receipt_points.domain.receipt import ReceiptService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    for suffix in ("", "-wal", "-shm"):
        if os.path.exists(db_path + suffix):
            os.unlink(db_path + suffix)


@pytest.fixture
def receipt_service(temp_db):
    """Create a ReceiptService with a temporary database."""
    return ReceiptService(temp_db)


@pytest.fixture
def target_receipt():
    """Single-item Target receipt worth 31 points."""
    return Receipt(
        retailer="Target",
        purchase_date="2022-01-02",
        purchase_time="13:13",
        total="1.25",
        items=(Item(short_description="Pepsi - 12-oz", price="1.25"),),
    )


@pytest.fixture
def corner_market_receipt():
    """Four-Gatorade M&M Corner Market receipt worth 109 points."""
    return Receipt(
        retailer="M&M Corner Market",
        purchase_date="2022-03-20",
        purchase_time="14:33",
        total="9.00",
        items=tuple(Item(short_description="Gatorade", price="2.25") for _ in range(4)),
    )


@pytest.fixture
def target_payload():
    """Wire-shaped payload of the five-item Target receipt worth 28 points."""
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
