"""Tests for update structures and domain errors."""

from category_admin.domain import (
    UNSET,
    CategoryMappingUpdate,
    NotFoundError,
    ProductSKUUpdate,
    SKUStatus,
    Unset,
    ValidationFailedError,
)


class TestUnset:
    """Tests for the UNSET sentinel."""

    def test_is_singleton(self) -> None:
        assert Unset() is UNSET

    def test_is_falsy(self) -> None:
        assert not UNSET

    def test_repr(self) -> None:
        assert repr(UNSET) == "UNSET"


class TestPatch:
    """Tests for partial update structures."""

    def test_empty_patch_has_no_changes(self) -> None:
        """An update with no fields set changes nothing."""
        update = ProductSKUUpdate()
        assert update.changes() == {}

    def test_only_set_fields_are_reported(self) -> None:
        update = ProductSKUUpdate(status=SKUStatus.REVIEWED, brand="Sony")
        assert update.changes() == {"status": SKUStatus.REVIEWED, "brand": "Sony"}

    def test_falsy_values_count_as_set(self) -> None:
        """False and empty lists are real values, not omissions."""
        assert ProductSKUUpdate(available_on_brand_website=False).changes() == {
            "available_on_brand_website": False
        }
        assert CategoryMappingUpdate(selected_category=[]).changes() == {
            "selected_category": []
        }


class TestErrors:
    """Tests for the error taxonomy."""

    def test_not_found_carries_entity(self) -> None:
        error = NotFoundError("Product SKU", 42)
        assert error.message == "Product SKU not found: 42"
        assert error.details == {"entity_type": "Product SKU", "entity_id": 42}

    def test_validation_for_field(self) -> None:
        error = ValidationFailedError.for_field("roles", "At least one role is required")
        assert error.errors == [{"field": "roles", "message": "At least one role is required"}]
        assert str(error) == "At least one role is required"
