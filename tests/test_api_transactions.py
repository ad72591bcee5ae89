"""Tests for transactions API endpoints."""


class TestTransactionsAPI:
    """Test transactions endpoints."""

    def test_list_transactions_empty(self, client):
        """Should return empty list."""
        response = client.get("/api/v1/transactions")
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    def test_list_transactions_with_data(self, client, sample_transaction):
        """Should return transactions."""
        response = client.get("/api/v1/transactions")
        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 1
        assert data["items"][0]["amount"] == 50.0
        assert data["items"][0]["date"] == "2024-03-15"

    def test_get_transaction(self, client, sample_transaction):
        """Should return single transaction."""
        response = client.get(f"/api/v1/transactions/{sample_transaction.id}")
        assert response.status_code == 200
        assert response.json()["id"] == sample_transaction.id

    def test_get_missing_transaction(self, client):
        response = client.get("/api/v1/transactions/nope")
        assert response.status_code == 404

    def test_create_transaction(self, client):
        """Should record a new transaction."""
        response = client.post("/api/v1/transactions", json={
            "amount": 12.5,
            "description": "  Bus pass  ",
            "date": "2024-03-02",
            "category": "transport",
            "type": "expense"
        })
        assert response.status_code == 201
        data = response.json()
        assert data["amount"] == 12.5
        assert data["description"] == "Bus pass"
        assert data["id"]
        assert data["created_at"]

    def test_create_rejects_non_positive_amount(self, client):
        response = client.post("/api/v1/transactions", json={
            "amount": 0,
            "description": "Nothing",
            "date": "2024-03-02",
            "category": "food",
            "type": "expense"
        })
        assert response.status_code == 422

    def test_create_rejects_blank_description(self, client):
        response = client.post("/api/v1/transactions", json={
            "amount": 5,
            "description": "   ",
            "date": "2024-03-02",
            "category": "food",
            "type": "expense"
        })
        assert response.status_code == 422

    def test_create_rejects_unknown_category(self, client):
        response = client.post("/api/v1/transactions", json={
            "amount": 5,
            "description": "Mystery",
            "date": "2024-03-02",
            "category": "mystery",
            "type": "expense"
        })
        assert response.status_code == 422

    def test_create_rejects_type_mismatch(self, client):
        """An income transaction can't go in an expense category."""
        response = client.post("/api/v1/transactions", json={
            "amount": 5,
            "description": "Refund",
            "date": "2024-03-02",
            "category": "food",
            "type": "income"
        })
        assert response.status_code == 422

    def test_create_rejects_bad_date(self, client):
        response = client.post("/api/v1/transactions", json={
            "amount": 5,
            "description": "Lunch",
            "date": "2024-13-40",
            "category": "food",
            "type": "expense"
        })
        assert response.status_code == 422

    def test_filter_transactions(self, client, sample_transaction):
        """Should filter by month, type and category."""
        response = client.get("/api/v1/transactions", params={"month": "2024-03"})
        assert response.json()["total"] == 1

        response = client.get("/api/v1/transactions", params={"month": "2024-04"})
        assert response.json()["total"] == 0

        response = client.get("/api/v1/transactions", params={"type": "income"})
        assert response.json()["total"] == 0

        response = client.get("/api/v1/transactions", params={"category_id": "food"})
        assert response.json()["total"] == 1

    def test_filter_rejects_bad_month(self, client):
        response = client.get("/api/v1/transactions", params={"month": "March"})
        assert response.status_code == 422

    def test_newest_first(self, client):
        for day in ("2024-03-01", "2024-03-20", "2024-03-10"):
            client.post("/api/v1/transactions", json={
                "amount": 1,
                "description": day,
                "date": day,
                "category": "food",
                "type": "expense"
            })
        dates = [t["date"] for t in client.get("/api/v1/transactions").json()["items"]]
        assert dates == ["2024-03-20", "2024-03-10", "2024-03-01"]

    def test_delete_transaction(self, client, sample_transaction):
        response = client.delete(f"/api/v1/transactions/{sample_transaction.id}")
        assert response.status_code == 204
        assert client.get("/api/v1/transactions").json()["total"] == 0

    def test_delete_missing_transaction(self, client):
        response = client.delete("/api/v1/transactions/nope")
        assert response.status_code == 404
