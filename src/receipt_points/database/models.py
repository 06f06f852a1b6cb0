"""SQLAlchemy models for receipt-points database.

All scalar receipt values are stored as text in their submitted shape;
callers re-parse amounts before doing arithmetic.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Receipt(Base):
    """Receipt model."""

    __tablename__ = "receipts"

    id = Column(String, primary_key=True)
    retailer = Column(String, nullable=False)
    purchase_date = Column(String, nullable=False)
    purchase_time = Column(String, nullable=False)
    total = Column(String, nullable=False)

    # Relationships
    items = relationship(
        "Item",
        back_populates="receipt",
        cascade="all, delete-orphan",
        order_by="Item.position",
    )


class Item(Base):
    """Receipt line item model."""

    __tablename__ = "items"

    id = Column(String, primary_key=True)
    receipt_id = Column(String, ForeignKey("receipts.id"), primary_key=True)
    position = Column(Integer, nullable=False)
    short_description = Column(String, nullable=False)
    price = Column(String, nullable=False)

    # Relationships
    receipt = relationship("Receipt", back_populates="items")


def _set_sqlite_pragmas(dbapi_connection, _):
    cur = dbapi_connection.cursor()
    cur.execute("PRAGMA journal_mode=WAL;")
    cur.execute("PRAGMA foreign_keys=ON;")
    cur.close()


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine usable from request worker threads."""
    is_sqlite = database_url.startswith("sqlite")
    engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False, "timeout": 30} if is_sqlite else {},
        pool_pre_ping=True,
    )
    if is_sqlite:
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory, creating tables if needed."""
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
