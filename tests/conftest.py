"""Shared test fixtures."""

import os

# Keep the app's own engine off the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date, datetime
from decimal import Decimal
import uuid

from tally.database import Base
from tally.dependencies import get_db
from tally.main import app
from tally.models.budget import Budget
from tally.models.transaction import Transaction, TransactionType
from tally.schemas.budget import BudgetRecord
from tally.schemas.transaction import TransactionRecord


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _build_transaction(amount, txn_type, category, day, description="Test", txn_id=None):
    return TransactionRecord(
        id=txn_id or str(uuid.uuid4()),
        amount=Decimal(str(amount)),
        description=description,
        date=day,
        category=category,
        type=txn_type,
        created_at=datetime(2024, 1, 1)
    )


def _build_budget(category_id, amount, month, budget_id=None):
    return BudgetRecord(
        id=budget_id or str(uuid.uuid4()),
        category_id=category_id,
        amount=Decimal(str(amount)),
        month=month
    )


@pytest.fixture
def make_transaction():
    """Factory for transaction records that never touch the database."""
    return _build_transaction


@pytest.fixture
def make_budget():
    """Factory for budget records that never touch the database."""
    return _build_budget


@pytest.fixture
def march_transactions():
    """Two food expenses and a salary in March 2024."""
    return [
        _build_transaction(100, TransactionType.expense, "food", date(2024, 3, 5), "Groceries"),
        _build_transaction(50, TransactionType.expense, "food", date(2024, 3, 20), "Dinner"),
        _build_transaction(1000, TransactionType.income, "salary", date(2024, 3, 1), "Paycheck"),
    ]


@pytest.fixture
def sample_transaction(db_session):
    """Create a stored expense transaction."""
    txn = Transaction(
        id=str(uuid.uuid4()),
        amount=Decimal("50.00"),
        description="Whole Foods",
        date=date(2024, 3, 15),
        category="food",
        type=TransactionType.expense
    )
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


@pytest.fixture
def sample_budget(db_session):
    """Create a stored food budget for March 2024."""
    budget = Budget(
        id=str(uuid.uuid4()),
        category_id="food",
        amount=Decimal("100.00"),
        month="2024-03"
    )
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget
