"""Tests for domain entities."""

from datetime import timezone

from category_admin.domain import (
    ProductSKU,
    ProductTag,
    SKUStatus,
    TagColor,
    TagType,
    TeamRole,
    User,
)


def test_product_tag_defaults() -> None:
    """A bare tag is a blue product tag."""
    tag = ProductTag(text="Sony | WH1000 | Black")
    assert tag.type == TagType.PRODUCT
    assert tag.color == TagColor.BLUE


def test_product_sku_defaults() -> None:
    """New SKUs are saved, not on the brand website, stamped in UTC."""
    sku = ProductSKU(
        id=1,
        mpn="MPN-1",
        product_name="Widget",
        seller="Westcoast",
        brand="Acme",
        category="Gadgets",
    )
    assert sku.status == SKUStatus.SAVED
    assert sku.available_on_brand_website is False
    assert sku.date_uploaded.tzinfo == timezone.utc


def test_enum_values_match_wire_format() -> None:
    assert SKUStatus.TO_BE_REVIEWED.value == "To be reviewed"
    assert TeamRole.PRODUCT_GROUPING.value == "product_grouping"
    assert TagColor("red") is TagColor.RED


def test_user_timestamps_default_to_now() -> None:
    user = User(id="u-1")
    assert user.email is None
    assert user.created_at.tzinfo == timezone.utc
