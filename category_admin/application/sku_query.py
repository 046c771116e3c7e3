"""Product SKU listing: filter, sort and paginate.

Works on the full in-memory SKU sequence. Filters compose with AND;
string filters are case-insensitive substring matches while ``status``
and ``available_on_brand_website`` match exactly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from category_admin.domain.entities import ProductSKU, SKUStatus
from category_admin.domain.exceptions import ValidationFailedError

T = TypeVar("T")

# Wire name -> attribute name
SORTABLE_FIELDS: dict[str, str] = {
    "id": "id",
    "mpn": "mpn",
    "productName": "product_name",
    "dateUploaded": "date_uploaded",
    "seller": "seller",
    "brand": "brand",
    "category": "category",
    "status": "status",
    "availableOnBrandWebsite": "available_on_brand_website",
}

SUBSTRING_FILTERS = ("seller", "brand", "category")

_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def _parse_status(value: SKUStatus | str | None) -> SKUStatus | None:
    if value is None or value == "":
        return None
    try:
        return SKUStatus(value)
    except ValueError:
        raise ValidationFailedError.for_field(
            "status",
            f"Unknown status '{value}'. Allowed: {', '.join(s.value for s in SKUStatus)}",
        ) from None


def _parse_flag(value: bool | str | None) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if not normalized:
        return None
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValidationFailedError.for_field(
        "availableOnBrandWebsite", f"Expected true or false, got '{value}'"
    )


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass
class SKUFilter:
    """Filter parameters for the SKU listing.

    Attributes:
        seller: Case-insensitive substring of the seller name.
        brand: Case-insensitive substring of the brand.
        category: Case-insensitive substring of the category.
        status: Exact review status.
        available_on_brand_website: Exact availability flag.
    """

    seller: str | None = None
    brand: str | None = None
    category: str | None = None
    status: SKUStatus | str | None = None
    available_on_brand_website: bool | str | None = None

    def __post_init__(self) -> None:
        self.status = _parse_status(self.status)
        self.available_on_brand_website = _parse_flag(self.available_on_brand_website)

    def matches(self, sku: ProductSKU) -> bool:
        """Whether a SKU satisfies every supplied predicate."""
        for name in SUBSTRING_FILTERS:
            needle = getattr(self, name)
            if needle and needle.lower() not in getattr(sku, name).lower():
                return False

        if self.status and sku.status != self.status:
            return False

        if (
            self.available_on_brand_website is not None
            and sku.available_on_brand_website != self.available_on_brand_website
        ):
            return False

        return True


@dataclass
class SKUQuery:
    """Pagination and ordering for the SKU listing.

    ``sort_by`` uses the wire (camelCase) field name.
    """

    page: int = 1
    limit: int = 10
    sort_by: str = "dateUploaded"
    sort_order: SortOrder = SortOrder.DESC
    filters: SKUFilter = field(default_factory=SKUFilter)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationFailedError.for_field("page", "page must be at least 1")
        if self.limit < 1:
            raise ValidationFailedError.for_field("limit", "limit must be positive")
        if self.sort_by not in SORTABLE_FIELDS:
            raise ValidationFailedError.for_field(
                "sortBy",
                f"Cannot sort by '{self.sort_by}'. "
                f"Allowed: {', '.join(SORTABLE_FIELDS)}",
            )
        self.sort_order = SortOrder(self.sort_order)

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit


@dataclass
class PaginatedResult(Generic[T]):
    """One page of results plus the size of the filtered set."""

    data: list[T]
    total: int
    page: int
    limit: int

    @property
    def has_more(self) -> bool:
        """Check if there's a next page."""
        return self.page * self.limit < self.total


def _sort_key(sku: ProductSKU, attribute: str) -> Any:
    value = getattr(sku, attribute)
    if isinstance(value, Enum):
        return value.value
    return value


def query_product_skus(skus: list[ProductSKU], query: SKUQuery) -> PaginatedResult[ProductSKU]:
    """Filter, sort and paginate product SKUs.

    Equal sort keys keep id ascending order in both directions: the input
    is first ordered by id and Python's sort is stable, including with
    ``reverse=True``.

    Args:
        skus: Full SKU sequence.
        query: Pagination, ordering and filters.

    Returns:
        Requested page and the filtered total.
    """
    filtered = [sku for sku in skus if query.filters.matches(sku)]
    filtered.sort(key=lambda sku: sku.id)

    attribute = SORTABLE_FIELDS[query.sort_by]
    filtered.sort(
        key=lambda sku: _sort_key(sku, attribute),
        reverse=query.sort_order == SortOrder.DESC,
    )

    total = len(filtered)
    page = filtered[query.offset : query.offset + query.limit]

    return PaginatedResult(data=page, total=total, page=query.page, limit=query.limit)
