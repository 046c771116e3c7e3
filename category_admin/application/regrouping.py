"""Splitting a tag out of a product variant group."""

import structlog

from category_admin.domain.entities import ProductTag, ProductVariant, TagColor, TagType
from category_admin.domain.updates import ProductVariantUpdate
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()

NEW_GROUP_LOGIC = "New group"


def next_serial_number(variants: list[ProductVariant]) -> int:
    """Serial number for a new group: highest current one plus one.

    An empty store starts again at 1.
    """
    return max((variant.serial_number for variant in variants), default=0) + 1


def create_new_group(
    store: RecordStore, source_variant_id: int, tag_text: str
) -> ProductVariant:
    """Move a tag out of its group into a new single-tag group.

    Every tag of the source whose text equals ``tag_text`` is removed, so
    duplicate texts leave together. A source left without tags is deleted.
    The new group copies seller, category and brand from the source.

    The source lookup happens before any mutation: an unknown id leaves
    the store untouched.

    Args:
        store: Record store.
        source_variant_id: Group the tag is taken from.
        tag_text: Literal text of the tag to move.

    Returns:
        The newly created variant group.

    Raises:
        NotFoundError: If the source variant does not exist.
    """
    source = store.product_variants.require(source_variant_id)

    remaining = [tag for tag in source.product_tags if tag.text != tag_text]
    removed = len(source.product_tags) - len(remaining)

    if remaining:
        store.product_variants.update(
            source_variant_id, ProductVariantUpdate(product_tags=remaining)
        )
    else:
        store.product_variants.delete(source_variant_id)

    new_variant = store.product_variants.insert(
        serial_number=next_serial_number(store.product_variants.all()),
        seller=source.seller,
        ee_category=source.ee_category,
        brand=source.brand,
        product_tags=[ProductTag(text=tag_text, type=TagType.PRODUCT, color=TagColor.BLUE)],
        grouping_logic=NEW_GROUP_LOGIC,
    )

    logger.info(
        "Product variant group split",
        source_variant_id=source_variant_id,
        new_variant_id=new_variant.id,
        tags_moved=removed,
        source_deleted=not remaining,
    )

    return new_variant
