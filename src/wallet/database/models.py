"""SQLAlchemy models for the wallet database."""

from datetime import datetime, UTC
from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    create_engine,
    event,
    text,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

ACCOUNT_TYPE_VALUES = ("asset", "liability", "equity", "income", "expense")
ENTRY_TYPE_VALUES = ("debit", "credit")


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _in_list(column: str, values: tuple[str, ...]) -> str:
    return f"{column} IN ({', '.join(repr(v) for v in values)})"


class Account(Base):
    """Chart of accounts node, self-referencing through parent_id."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    account_type = Column(String(16), nullable=False)
    parent_id = Column(Integer, ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=True)
    currency = Column(String(3), nullable=False, default="EUR")
    description = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint(_in_list("account_type", ACCOUNT_TYPE_VALUES), name="ck_account_type"),
        CheckConstraint("id != parent_id", name="ck_account_not_own_parent"),
        # Sibling names are unique among active accounts only
        Index(
            "uq_active_account_name_parent",
            "name",
            "parent_id",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
        Index("idx_accounts_parent_id", "parent_id"),
        Index("idx_accounts_type", "account_type"),
    )

    parent = relationship("Account", remote_side=[id], backref="children")
    entries = relationship("TransactionEntry", back_populates="account", passive_deletes="all")


class Transaction(Base):
    """Transaction header; entries live in transaction_entries."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String, nullable=False)
    reference = Column(String, nullable=True)
    transaction_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    tags = Column(JSON, nullable=True)
    notes = Column(String, nullable=True)

    __table_args__ = (Index("idx_transactions_date", "transaction_date"),)

    entries = relationship(
        "TransactionEntry",
        back_populates="transaction",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TransactionEntry.id",
    )


class TransactionEntry(Base):
    """Single debit or credit leg, amount stored as positive minor units."""

    __tablename__ = "transaction_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(
        Integer, ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False
    )
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False)
    amount_minor = Column(BigInteger, nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    entry_type = Column(String(8), nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("amount_minor > 0", name="ck_entry_amount_positive"),
        CheckConstraint(_in_list("entry_type", ENTRY_TYPE_VALUES), name="ck_entry_type"),
        Index("idx_entries_transaction", "transaction_id"),
        Index("idx_entries_account", "account_id"),
    )

    transaction = relationship("Transaction", back_populates="entries")
    account = relationship("Account", back_populates="entries")


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Turn on foreign key enforcement for SQLite connections."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
