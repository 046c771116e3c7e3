"""In-memory record store.

Owns every entity collection of the dashboard. There is no persistence:
state lives from application startup to shutdown.

The store is constructed once by the application lifespan and handed to
request handlers through a dependency, so each test can build an isolated
instance.
"""

import copy
from dataclasses import replace
from typing import Any, Callable, Generic, TypeVar
from uuid import uuid4

from category_admin.domain.entities import (
    CategoryMapping,
    ProductSKU,
    ProductVariant,
    TeamMember,
    User,
)
from category_admin.domain.exceptions import NotFoundError
from category_admin.domain.updates import Patch

T = TypeVar("T")


class InMemoryCollection(Generic[T]):
    """Keyed collection of one entity type.

    Records are kept in insertion order. Integer ids come from a counter
    that only moves forward, so ids of deleted records are never reused.
    Every read returns a copy; callers cannot mutate stored records.
    """

    def __init__(
        self,
        entity_cls: type[T],
        entity_name: str,
        id_factory: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize collection.

        Args:
            entity_cls: Dataclass stored in this collection.
            entity_name: Human-readable name used in errors and logs.
            id_factory: Optional id generator; defaults to a 1-based counter.
        """
        self.entity_cls = entity_cls
        self.entity_name = entity_name
        self._records: dict[Any, T] = {}
        self._next_id = 1
        self._id_factory = id_factory or self._next_sequential_id

    def _next_sequential_id(self) -> int:
        next_id = self._next_id
        self._next_id += 1
        return next_id

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[T]:
        """Return all records in insertion order."""
        return [copy.deepcopy(record) for record in self._records.values()]

    def get(self, record_id: Any) -> T | None:
        """Get a record by id.

        Args:
            record_id: Record identifier.

        Returns:
            Copy of the record, or None if absent.
        """
        record = self._records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def require(self, record_id: Any) -> T:
        """Get a record by id or raise NotFoundError."""
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    def insert(self, **data: Any) -> T:
        """Assign the next id and store a new record.

        Args:
            **data: Entity fields except ``id``.

        Returns:
            Copy of the stored record.
        """
        record = self.entity_cls(id=self._id_factory(), **copy.deepcopy(data))
        self._records[record.id] = record
        return copy.deepcopy(record)

    def put(self, record: T) -> T:
        """Store a record under its own id, replacing any existing one."""
        stored = copy.deepcopy(record)
        self._records[stored.id] = stored
        return copy.deepcopy(stored)

    def update(self, record_id: Any, patch: Patch) -> T:
        """Apply a partial update.

        Only fields set on the patch are replaced; the rest keep their
        stored values.

        Raises:
            NotFoundError: If no record has this id.
        """
        existing = self._records.get(record_id)
        if existing is None:
            raise NotFoundError(self.entity_name, record_id)

        updated = replace(existing, **copy.deepcopy(patch.changes()))
        self._records[record_id] = updated
        return copy.deepcopy(updated)

    def delete(self, record_id: Any) -> bool:
        """Remove a record. Deleting an absent id is not an error.

        Returns:
            True if a record was removed.
        """
        return self._records.pop(record_id, None) is not None


class RecordStore:
    """All collections backing the dashboard.

    Attributes:
        category_mappings: Seller-to-platform category mappings.
        product_variants: Product variant groups.
        product_skus: Products under enrichment review.
        team_members: Dashboard users and their roles.
        users: Authentication profiles keyed by string id.
    """

    def __init__(self) -> None:
        self.category_mappings: InMemoryCollection[CategoryMapping] = InMemoryCollection(
            CategoryMapping, "Category mapping"
        )
        self.product_variants: InMemoryCollection[ProductVariant] = InMemoryCollection(
            ProductVariant, "Product variant"
        )
        self.product_skus: InMemoryCollection[ProductSKU] = InMemoryCollection(
            ProductSKU, "Product SKU"
        )
        self.team_members: InMemoryCollection[TeamMember] = InMemoryCollection(
            TeamMember, "Team member"
        )
        self.users: InMemoryCollection[User] = InMemoryCollection(
            User, "User", id_factory=lambda: str(uuid4())
        )

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        return {
            "category_mappings": len(self.category_mappings),
            "product_variants": len(self.product_variants),
            "product_skus": len(self.product_skus),
            "team_members": len(self.team_members),
            "users": len(self.users),
        }
