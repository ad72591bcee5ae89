"""Tests for budgets API endpoints."""

import logging
import uuid
from datetime import date
from decimal import Decimal

import pytest

from tally.models.transaction import Transaction, TransactionType


@pytest.fixture
def march_food_spend(db_session):
    """150 spent on food in March 2024."""
    for amount, day in ((Decimal("100.00"), 5), (Decimal("50.00"), 20)):
        db_session.add(Transaction(
            id=str(uuid.uuid4()),
            amount=amount,
            description="Food",
            date=date(2024, 3, day),
            category="food",
            type=TransactionType.expense
        ))
    db_session.commit()


class TestBudgetsAPI:
    """Test budget endpoints."""

    def test_list_budgets_empty(self, client):
        response = client.get("/api/v1/budgets")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_budget(self, client):
        response = client.post("/api/v1/budgets", json={
            "category_id": "food",
            "amount": 300,
            "month": "2024-03"
        })
        assert response.status_code == 201
        data = response.json()
        assert data["category_name"] == "Food & Dining"
        assert data["spent"] == 0
        assert data["status"] == "on-track"

    def test_spend_computed_on_read(self, client, sample_budget, march_food_spend):
        """Should report spend, overage and over-budget status."""
        response = client.get(f"/api/v1/budgets/{sample_budget.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["spent"] == 150.0
        assert data["percent"] == 150.0
        assert data["display_percent"] == 100.0
        assert data["overage"] == 50.0
        assert data["status"] == "over-budget"

    def test_list_filters_by_month(self, client, sample_budget):
        assert len(client.get("/api/v1/budgets", params={"month": "2024-03"}).json()) == 1
        assert client.get("/api/v1/budgets", params={"month": "2024-04"}).json() == []

    @pytest.mark.parametrize("amount", [0, -10])
    def test_rejects_non_positive_amount(self, client, amount):
        response = client.post("/api/v1/budgets", json={
            "category_id": "food",
            "amount": amount,
            "month": "2024-03"
        })
        assert response.status_code == 422

    @pytest.mark.parametrize("month", ["2024-3", "2024-13", "March"])
    def test_rejects_malformed_month(self, client, month):
        response = client.post("/api/v1/budgets", json={
            "category_id": "food",
            "amount": 100,
            "month": month
        })
        assert response.status_code == 422

    def test_rejects_income_category(self, client):
        response = client.post("/api/v1/budgets", json={
            "category_id": "salary",
            "amount": 100,
            "month": "2024-03"
        })
        assert response.status_code == 422

    def test_rejects_unknown_category(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="tally.api.budgets"):
            response = client.post("/api/v1/budgets", json={
                "category_id": "llamas",
                "amount": 100,
                "month": "2024-03"
            })
        assert response.status_code == 422
        assert "Unknown category" in response.json()["detail"]
        assert "unknown category llamas" in caplog.text

    def test_duplicate_rejection_is_logged(self, client, sample_budget, caplog):
        with caplog.at_level(logging.WARNING, logger="tally.api.budgets"):
            response = client.post("/api/v1/budgets", json={
                "category_id": "food",
                "amount": 400,
                "month": "2024-03"
            })
        assert response.status_code == 409
        assert "duplicate budget for food in 2024-03" in caplog.text

    def test_rejects_duplicate(self, client, sample_budget):
        """Only one budget per category and month."""
        response = client.post("/api/v1/budgets", json={
            "category_id": "food",
            "amount": 400,
            "month": "2024-03"
        })
        assert response.status_code == 409

    def test_update_budget(self, client, sample_budget, march_food_spend):
        response = client.put(f"/api/v1/budgets/{sample_budget.id}", json={"amount": 175})
        assert response.status_code == 200
        data = response.json()
        assert data["amount"] == 175.0
        assert data["status"] == "near-limit"

    def test_update_into_duplicate(self, client, sample_budget):
        other = client.post("/api/v1/budgets", json={
            "category_id": "bills",
            "amount": 100,
            "month": "2024-03"
        }).json()
        response = client.put(f"/api/v1/budgets/{other['budget_id']}", json={"category_id": "food"})
        assert response.status_code == 409

    def test_update_missing_budget(self, client):
        response = client.put("/api/v1/budgets/nope", json={"amount": 10})
        assert response.status_code == 404

    def test_delete_budget(self, client, sample_budget):
        response = client.delete(f"/api/v1/budgets/{sample_budget.id}")
        assert response.status_code == 204
        assert client.get("/api/v1/budgets").json() == []
