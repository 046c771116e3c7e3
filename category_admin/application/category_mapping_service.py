"""Category mapping application service.

Reviewers adjust the platform categories chosen for each incoming seller
category path, then approve the batch.
"""

import structlog

from category_admin.domain.entities import CategoryMapping
from category_admin.domain.updates import CategoryMappingUpdate
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()


class CategoryMappingService:
    """Use cases for the category mapping tab."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list_mappings(self) -> list[CategoryMapping]:
        """All mappings in insertion order."""
        return self.store.category_mappings.all()

    def update_selected_category(
        self, mapping_id: int, selected_category: list[str]
    ) -> CategoryMapping:
        """Replace the reviewer's category selection wholesale.

        Args:
            mapping_id: Mapping to change.
            selected_category: New selection; may be longer or shorter
                than the suggestion it started from.

        Returns:
            Updated mapping.

        Raises:
            NotFoundError: If the mapping does not exist.
        """
        updated = self.store.category_mappings.update(
            mapping_id, CategoryMappingUpdate(selected_category=list(selected_category))
        )
        logger.info(
            "Category mapping updated",
            mapping_id=mapping_id,
            selected_count=len(updated.selected_category),
        )
        return updated

    def approve_mappings(self) -> None:
        """Approve the current mappings.

        Approval is not recorded on the records; the call only
        acknowledges the reviewer's decision.
        """
        logger.info(
            "Category mappings approved",
            mapping_count=len(self.store.category_mappings),
        )
