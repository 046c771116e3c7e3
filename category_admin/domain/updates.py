"""Explicit partial-update structures.

Every field defaults to ``UNSET``; only fields that were given a value
replace the stored one. Replacement is shallow: a list field is swapped
wholesale, never merged element by element.
"""

from dataclasses import dataclass, fields
from typing import Any

from category_admin.domain.entities import ProductTag, SKUStatus


class Unset:
    """Sentinel type for "field not supplied"."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


@dataclass(frozen=True)
class Patch:
    """Base class for update structures."""

    def changes(self) -> dict[str, Any]:
        """Return the fields that were explicitly set.

        Returns:
            Mapping of attribute name to new value.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass(frozen=True)
class CategoryMappingUpdate(Patch):
    """Changes to a category mapping."""

    selected_category: list[str] | Unset = UNSET


@dataclass(frozen=True)
class ProductVariantUpdate(Patch):
    """Changes to a product variant group."""

    product_tags: list[ProductTag] | Unset = UNSET


@dataclass(frozen=True)
class ProductSKUUpdate(Patch):
    """Changes to a product SKU. ``id`` and ``date_uploaded`` are fixed."""

    mpn: str | Unset = UNSET
    product_name: str | Unset = UNSET
    seller: str | Unset = UNSET
    brand: str | Unset = UNSET
    category: str | Unset = UNSET
    status: SKUStatus | Unset = UNSET
    available_on_brand_website: bool | Unset = UNSET
