"""Sample data loaded into the record store at startup.

Mirrors the rows the dashboard ships with so every tab has something to
show on a fresh process.
"""

from typing import Any

import structlog

from category_admin.domain.entities import ProductTag, SKUStatus, TagColor, TagType
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

CATEGORY_MAPPINGS: list[dict[str, Any]] = [
    {
        "serial_number": 1,
        "product_name": "Samsung Galaxy S24 Ultra 256GB",
        "incoming_seller_category": ["Mobile", "Mobile", "Smartphone", "Android"],
        "ml_suggested_category": ["Mobile phones", "Smartphones", "Mobile accessories"],
        "selected_category": ["Mobile phones", "Smartphones", "Mobile accessories"],
    },
    {
        "serial_number": 2,
        "product_name": "PlayStation 5 DualSense Controller",
        "incoming_seller_category": ["Home", "Gaming", "Accessories", "Cases"],
        "ml_suggested_category": ["PlayStation accessories", "Gaming accessories"],
        "selected_category": ["PlayStation accessories", "Gaming accessories"],
    },
    {
        "serial_number": 3,
        "product_name": "Sony WH-1000XM5 Wireless Headphones",
        "incoming_seller_category": ["Electronics", "Audio", "Headphones"],
        "ml_suggested_category": ["Audio equipment", "Headphones", "Wireless headphones"],
        "selected_category": ["Audio equipment", "Headphones", "Wireless headphones"],
    },
]

# (text, color) pairs; every seeded tag is a product tag
PRODUCT_VARIANTS: list[dict[str, Any]] = [
    {
        "serial_number": 1,
        "seller": "Westcoast",
        "ee_category": "TV",
        "brand": "Samsung",
        "tags": [
            ("Samsung QLED TV | QLED43XYZ | 43 inch", TagColor.BLUE),
            ("Samsung QLED TV | QLED55XYZ | 55 inch", TagColor.BLUE),
            ("Samsung QLED TV | QLED55XYZ | 55 inch", TagColor.RED),
        ],
        "grouping_logic": "Screen size",
    },
    {
        "serial_number": 2,
        "seller": "Exertis",
        "ee_category": "Audio~Earbuds",
        "brand": "Atp",
        "tags": [
            ("atp-beats-solo-buds | ABC1234 | Matte black", TagColor.BLUE),
            ("atp-beats-solo-buds pro | ABCX1234 | Artic purple", TagColor.BLUE),
            ("atp-beats-solo-buds | ABC1234 | Artic purple", TagColor.RED),
        ],
        "grouping_logic": "Colour",
    },
]

PRODUCT_SKUS: list[dict[str, Any]] = [
    {
        "mpn": "MPN-001",
        "product_name": "Samsung Galaxy S24 Ultra",
        "seller": "Westcoast",
        "brand": "Samsung",
        "category": "Mobile phones",
        "status": SKUStatus.TO_BE_REVIEWED,
        "available_on_brand_website": True,
    },
    {
        "mpn": "MPN-002",
        "product_name": "Sony WH-1000XM4 Headphones",
        "seller": "Exertis",
        "brand": "Sony",
        "category": "Audio equipment",
        "status": SKUStatus.UNDER_REVIEW,
        "available_on_brand_website": True,
    },
    {
        "mpn": "MPN-003",
        "product_name": "Dell XPS 13 Laptop",
        "seller": "TechTrade",
        "brand": "Dell",
        "category": "Computers",
        "status": SKUStatus.REVIEWED,
        "available_on_brand_website": False,
    },
    {
        "mpn": "27US550-W.AEK",
        "product_name": "LG UltraFine 27US550-W Monitor",
        "seller": "Westcoast",
        "brand": "LG",
        "category": "Monitors",
        "status": SKUStatus.TO_BE_REVIEWED,
        "available_on_brand_website": True,
    },
    {
        "mpn": "MPN-005",
        "product_name": "iPhone 15 Pro Max",
        "seller": "Exertis",
        "brand": "Apple",
        "category": "Mobile phones",
        "status": SKUStatus.UNDER_REVIEW,
        "available_on_brand_website": True,
    },
    {
        "mpn": "MPN-006",
        "product_name": "MacBook Pro 16-inch",
        "seller": "TechTrade",
        "brand": "Apple",
        "category": "Computers",
        "status": SKUStatus.REVIEWED,
        "available_on_brand_website": False,
    },
]


# ============================================================================
# Seeding
# ============================================================================


def seed_store(store: RecordStore) -> dict[str, int]:
    """Populate a store with the sample rows.

    Seed rows go through the regular ``insert`` path, so the id counters
    continue after the last seeded record.

    Args:
        store: Store to populate.

    Returns:
        Number of records created per collection.
    """
    for data in CATEGORY_MAPPINGS:
        store.category_mappings.insert(**data)

    for data in PRODUCT_VARIANTS:
        fields = {key: value for key, value in data.items() if key != "tags"}
        store.product_variants.insert(
            **fields,
            product_tags=[
                ProductTag(text=text, type=TagType.PRODUCT, color=color)
                for text, color in data["tags"]
            ],
        )

    for data in PRODUCT_SKUS:
        store.product_skus.insert(**data)

    counts = store.counts()
    logger.info("Record store seeded", **counts)
    return counts
