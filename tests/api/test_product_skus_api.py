"""Tests for product SKU API endpoints."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient


def new_sku(**overrides) -> dict:
    """Request body for a new SKU."""
    body = {
        "mpn": "MPN-100",
        "productName": "Pixel 9",
        "seller": "Westcoast",
        "brand": "Google",
        "category": "Mobile phones",
    }
    body.update(overrides)
    return body


class TestListProductSKUs:
    """Tests for GET /api/product-skus."""

    def test_default_listing(self, client: TestClient) -> None:
        response = client.get("/api/product-skus")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 6
        assert len(data["data"]) == 6
        assert data["page"] == 1
        assert data["limit"] == 10
        assert data["hasMore"] is False

    @pytest.mark.parametrize(
        "params, expected_total",
        [
            ({"brand": "apple"}, 2),
            ({"seller": "WEST"}, 2),
            ({"category": "comp"}, 2),
            ({"status": "Under review"}, 2),
            ({"availableOnBrandWebsite": "false"}, 2),
            ({"seller": "west", "status": "To be reviewed", "brand": "lg"}, 1),
            ({"status": ""}, 6),
            ({"brand": "nokia"}, 0),
        ],
    )
    def test_filters(self, client: TestClient, params: dict, expected_total: int) -> None:
        response = client.get("/api/product-skus", params=params)
        assert response.status_code == 200
        assert response.json()["total"] == expected_total

    def test_sorting(self, client: TestClient) -> None:
        response = client.get(
            "/api/product-skus",
            params={"sortBy": "mpn", "sortOrder": "asc"},
        )
        mpns = [sku["mpn"] for sku in response.json()["data"]]
        assert mpns == sorted(mpns)

    def test_pagination(self, client: TestClient) -> None:
        response = client.get(
            "/api/product-skus",
            params={"page": 2, "limit": 4, "sortBy": "id", "sortOrder": "asc"},
        )
        data = response.json()
        assert [sku["id"] for sku in data["data"]] == [5, 6]
        assert data["total"] == 6

    def test_page_past_the_end(self, client: TestClient) -> None:
        response = client.get("/api/product-skus", params={"page": 10, "limit": 5})
        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["total"] == 6

    def test_large_limit_returns_everything(self, client: TestClient) -> None:
        response = client.get("/api/product-skus", params={"limit": 500})
        assert response.status_code == 200

        data = response.json()
        assert data["limit"] == 500
        assert len(data["data"]) == 6
        assert data["hasMore"] is False

    @pytest.mark.parametrize(
        "params",
        [
            {"sortBy": "price"},
            {"sortOrder": "sideways"},
            {"status": "Archived"},
            {"page": 0},
            {"limit": 0},
            {"availableOnBrandWebsite": "perhaps"},
        ],
    )
    def test_bad_parameters_are_400(self, client: TestClient, params: dict) -> None:
        response = client.get("/api/product-skus", params=params)
        assert response.status_code == 400
        assert response.json()["errorCode"] == "VALIDATION_ERROR"


class TestCreateProductSKU:
    """Tests for POST /api/product-skus."""

    def test_create_then_list(self, client: TestClient) -> None:
        before = datetime.now(timezone.utc)

        response = client.post("/api/product-skus", json=new_sku())
        assert response.status_code == 201

        created = response.json()
        assert created["id"] == 7
        assert created["status"] == "Saved"
        assert created["availableOnBrandWebsite"] is False
        assert datetime.fromisoformat(created["dateUploaded"]) >= before

        listed = client.get("/api/product-skus", params={"brand": "google"}).json()
        assert listed["total"] == 1
        assert listed["data"][0] == created

    def test_create_with_status(self, client: TestClient) -> None:
        response = client.post(
            "/api/product-skus",
            json=new_sku(status="Under review", availableOnBrandWebsite=True),
        )
        assert response.status_code == 201
        assert response.json()["status"] == "Under review"
        assert response.json()["availableOnBrandWebsite"] is True

    def test_missing_fields_are_400(self, client: TestClient) -> None:
        body = new_sku()
        del body["mpn"]
        body["productName"] = ""

        response = client.post("/api/product-skus", json=body)
        assert response.status_code == 400

        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"mpn", "productName"}
        assert client.get("/api/product-skus").json()["total"] == 6

    def test_server_assigns_id_and_date(self, client: TestClient) -> None:
        response = client.post(
            "/api/product-skus",
            json=new_sku(id=500, dateUploaded="2000-01-01T00:00:00Z"),
        )
        created = response.json()
        assert created["id"] == 7
        assert not created["dateUploaded"].startswith("2000")


class TestUpdateProductSKU:
    """Tests for PATCH /api/product-skus/{id}."""

    def test_partial_update(self, client: TestClient) -> None:
        original = client.get("/api/product-skus", params={"sortBy": "id", "sortOrder": "asc"})
        first = original.json()["data"][0]

        response = client.patch("/api/product-skus/1", json={"status": "Reviewed"})
        assert response.status_code == 200

        updated = response.json()
        assert updated["status"] == "Reviewed"
        assert {k: v for k, v in updated.items() if k != "status"} == {
            k: v for k, v in first.items() if k != "status"
        }

    def test_blank_field_is_400(self, client: TestClient) -> None:
        response = client.patch("/api/product-skus/1", json={"brand": ""})
        assert response.status_code == 400

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.patch("/api/product-skus/404", json={"brand": "Sony"})
        assert response.status_code == 404
        assert response.json()["message"] == "Product SKU not found: 404"
