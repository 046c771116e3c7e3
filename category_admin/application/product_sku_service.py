"""Product enrichment application service."""

import structlog

from category_admin.application.sku_query import PaginatedResult, SKUQuery, query_product_skus
from category_admin.domain.entities import ProductSKU, SKUStatus, utc_now
from category_admin.domain.exceptions import ValidationFailedError
from category_admin.domain.updates import UNSET, ProductSKUUpdate
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()

REQUIRED_TEXT_FIELDS = ("mpn", "product_name", "seller", "brand", "category")


def _check_text_fields(values: dict[str, object]) -> None:
    errors = [
        {"field": name, "message": f"{name} must not be empty"}
        for name in REQUIRED_TEXT_FIELDS
        if name in values and values[name] is not UNSET and not str(values[name]).strip()
    ]
    if errors:
        raise ValidationFailedError("Invalid input", errors=errors)


class ProductSKUService:
    """Use cases for the product enrichment tab."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list_skus(self, query: SKUQuery) -> PaginatedResult[ProductSKU]:
        """Filtered, sorted and paginated SKUs."""
        return query_product_skus(self.store.product_skus.all(), query)

    def create_sku(
        self,
        mpn: str,
        product_name: str,
        seller: str,
        brand: str,
        category: str,
        status: SKUStatus | None = None,
        available_on_brand_website: bool = False,
    ) -> ProductSKU:
        """Create a SKU stamped with the upload time.

        Args:
            mpn: Manufacturer part number.
            product_name: Display name.
            seller: Seller the SKU came from.
            brand: Brand name.
            category: Platform category.
            status: Review status; defaults to ``Saved``.
            available_on_brand_website: Whether the brand lists it.

        Returns:
            Stored SKU.

        Raises:
            ValidationFailedError: If a required text field is blank.
        """
        values = {
            "mpn": mpn,
            "product_name": product_name,
            "seller": seller,
            "brand": brand,
            "category": category,
        }
        _check_text_fields(values)

        sku = self.store.product_skus.insert(
            **values,
            status=status or SKUStatus.SAVED,
            available_on_brand_website=available_on_brand_website,
            date_uploaded=utc_now(),
        )
        logger.info("Product SKU created", sku_id=sku.id, mpn=sku.mpn, status=sku.status.value)
        return sku

    def update_sku(self, sku_id: int, update: ProductSKUUpdate) -> ProductSKU:
        """Apply a partial update.

        Raises:
            ValidationFailedError: If a supplied text field is blank.
            NotFoundError: If the SKU does not exist.
        """
        changes = update.changes()
        _check_text_fields(changes)

        updated = self.store.product_skus.update(sku_id, update)
        logger.info("Product SKU updated", sku_id=sku_id, fields=sorted(changes))
        return updated
