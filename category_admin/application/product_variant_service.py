"""Product variant grouping application service."""

import structlog

from category_admin.application.regrouping import create_new_group
from category_admin.domain.entities import ProductTag, ProductVariant
from category_admin.domain.updates import ProductVariantUpdate
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()


class ProductVariantService:
    """Use cases for the product grouping tab."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list_variants(self) -> list[ProductVariant]:
        """All variant groups in insertion order."""
        return self.store.product_variants.all()

    def update_tags(self, variant_id: int, product_tags: list[ProductTag]) -> ProductVariant:
        """Replace the tags of a group.

        A group given no tags is deleted; the record as it was before
        deletion is returned so the caller can confirm what went away.

        Raises:
            NotFoundError: If the group does not exist.
        """
        if not product_tags:
            existing = self.store.product_variants.require(variant_id)
            self.store.product_variants.delete(variant_id)
            logger.info("Product variant deleted after last tag removed", variant_id=variant_id)
            return existing

        updated = self.store.product_variants.update(
            variant_id, ProductVariantUpdate(product_tags=list(product_tags))
        )
        logger.info(
            "Product variant tags updated",
            variant_id=variant_id,
            tag_count=len(updated.product_tags),
        )
        return updated

    def split_tag(self, source_variant_id: int, tag_text: str) -> ProductVariant:
        """Move a tag into a brand-new group. See ``create_new_group``."""
        return create_new_group(self.store, source_variant_id, tag_text)

    def approve_groupings(self) -> None:
        """Approve the current groupings. Nothing is recorded on the records."""
        logger.info(
            "Product groupings approved",
            variant_count=len(self.store.product_variants),
        )
