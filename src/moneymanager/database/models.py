"""SQLAlchemy models for moneymanager database."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Enum as SAEnum,
    CheckConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from moneymanager.domain.entities import Division, TransactionType

Base = declarative_base()


class Account(Base):
    """Account model. Balance is kept in integer cents."""

    __tablename__ = "accounts"

    id = Column(String(64), primary_key=True)
    name = Column(String, unique=True, nullable=False)
    balance_cents = Column(Integer, default=0, nullable=False)
    color = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(String(64), primary_key=True)
    name = Column(String, nullable=False)
    icon = Column(String, nullable=False)
    type = Column(SAEnum(TransactionType, native_enum=False), nullable=False)


class Transaction(Base):
    """Transaction model.

    ``category_id`` is a plain column rather than a foreign key: a
    transaction may reference a category that no longer exists.
    """

    __tablename__ = "transactions"

    id = Column(String(64), primary_key=True)
    type = Column(SAEnum(TransactionType, native_enum=False), nullable=False)
    amount_cents = Column(Integer, nullable=False)
    description = Column(String, nullable=False)
    category_id = Column(String(64), nullable=False)
    division = Column(SAEnum(Division, native_enum=False), nullable=False)
    account_id = Column(String(64), ForeignKey("accounts.id"), nullable=False)
    date_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
    # Bumped on every write; UPDATE and DELETE match on it
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("amount_cents > 0", name="ck_transaction_amount_positive"),
        Index("ix_transactions_date_time", "date_time"),
    )

    # Relationships
    account = relationship("Account", back_populates="transactions")


class Transfer(Base):
    """Transfer model."""

    __tablename__ = "transfers"

    id = Column(String(64), primary_key=True)
    from_account_id = Column(String(64), ForeignKey("accounts.id"), nullable=False)
    to_account_id = Column(String(64), ForeignKey("accounts.id"), nullable=False)
    amount_cents = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    date_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("amount_cents > 0", name="ck_transfer_amount_positive"),
        CheckConstraint("from_account_id <> to_account_id", name="ck_transfer_distinct_accounts"),
        Index("ix_transfers_date_time", "date_time"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
