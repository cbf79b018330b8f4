"""Shared pytest fixtures for moneymanager tests."""

import os
import tempfile
from datetime import datetime
from decimal import Decimal

import pytest

from moneymanager.database.factories import create_sqlite_database
from moneymanager.domain.account import AccountService
from moneymanager.domain.category import CategoryService
from moneymanager.domain.summary import SummaryService
from moneymanager.domain.transaction import TransactionService
from moneymanager.domain.transfer import TransferService
from moneymanager.utils.clock import FixedClock

# A Wednesday, so the current week started two days earlier
NOW = datetime(2024, 3, 13, 10, 0, 0)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
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
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def clock():
    """A clock frozen at NOW that tests can advance."""
    return FixedClock(NOW)


@pytest.fixture
def account_service(temp_db, clock):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db, clock)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db, clock):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db, clock)


@pytest.fixture
def transfer_service(temp_db, clock):
    """Create a TransferService with a temporary database."""
    return TransferService(temp_db, clock)


@pytest.fixture
def summary_service(temp_db, clock):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db, clock)


@pytest.fixture
def sample_accounts(account_service):
    """Create a cash account holding 1000.00 and a bank account holding 500.00."""
    account_service.create_account(
        name="Cash", color="#10b981", balance=Decimal("1000.00"), account_id="cash"
    )
    account_service.create_account(
        name="Bank Account", color="#3b82f6", balance=Decimal("500.00"), account_id="bank"
    )
    return {"cash": "cash", "bank": "bank"}


@pytest.fixture
def sample_categories(category_service):
    """Create the default categories and return their IDs."""
    from moneymanager.cli.commands.init_categories import INITIAL_CATEGORIES

    for category_id, name, icon, category_type in INITIAL_CATEGORIES:
        category_service.create_category(
            name=name, category_type=category_type, icon=icon, category_id=category_id
        )
    return [category_id for category_id, _, _, _ in INITIAL_CATEGORIES]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_obj(temp_db, clock):
    """Context object that makes the CLI share the test database and clock."""
    return {"db": temp_db, "clock": clock}


@pytest.fixture
def now():
    """The instant the test clock starts at."""
    return NOW
