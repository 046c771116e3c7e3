"""Tests for category mapping API endpoints."""

from fastapi.testclient import TestClient


class TestListCategoryMappings:
    """Tests for GET /api/category-mappings."""

    def test_returns_seeded_mappings(self, client: TestClient) -> None:
        response = client.get("/api/category-mappings")
        assert response.status_code == 200

        data = response.json()
        assert [m["id"] for m in data] == [1, 2, 3]
        assert set(data[0]) == {
            "id",
            "serialNumber",
            "productName",
            "incomingSellerCategory",
            "mlSuggestedCategory",
            "selectedCategory",
        }


class TestUpdateCategoryMapping:
    """Tests for PATCH /api/category-mappings/{id}."""

    def test_replaces_selection(self, client: TestClient) -> None:
        response = client.patch(
            "/api/category-mappings/3",
            json={"selectedCategory": ["Headphones"]},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["selectedCategory"] == ["Headphones"]
        assert data["productName"] == "Sony WH-1000XM5 Wireless Headphones"

        listed = client.get("/api/category-mappings").json()
        assert listed[2]["selectedCategory"] == ["Headphones"]

    def test_missing_field_is_400(self, client: TestClient) -> None:
        response = client.patch("/api/category-mappings/1", json={})
        assert response.status_code == 400

        data = response.json()
        assert data["errorCode"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "selectedCategory"

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.patch(
            "/api/category-mappings/999",
            json={"selectedCategory": ["Anything"]},
        )
        assert response.status_code == 404
        assert response.json()["errorCode"] == "NOT_FOUND"

    def test_non_numeric_id_is_400(self, client: TestClient) -> None:
        response = client.patch(
            "/api/category-mappings/abc",
            json={"selectedCategory": ["Anything"]},
        )
        assert response.status_code == 400


def test_approve_category_mappings(client: TestClient) -> None:
    response = client.post("/api/category-mappings/approve")
    assert response.status_code == 200
    assert response.json() == {"message": "Category mappings approved successfully"}
