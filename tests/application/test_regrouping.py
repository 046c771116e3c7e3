"""Tests for splitting tags out of product variant groups."""

import pytest

from category_admin.application.regrouping import create_new_group, next_serial_number
from category_admin.domain import NotFoundError, ProductTag, TagColor, TagType
from category_admin.infrastructure.store import RecordStore


def add_group(store: RecordStore, serial_number: int, *texts: str):
    """Insert a variant group holding the given tag texts."""
    return store.product_variants.insert(
        serial_number=serial_number,
        seller="Westcoast",
        ee_category="TV",
        brand="Samsung",
        product_tags=[ProductTag(text=text, color=TagColor.RED) for text in texts],
        grouping_logic="Screen size",
    )


class TestCreateNewGroup:
    """Tests for create_new_group."""

    def test_moves_tag_into_new_group(self, store: RecordStore) -> None:
        source = add_group(store, 1, "A", "B")

        new_group = create_new_group(store, source.id, "A")

        assert [tag.text for tag in store.product_variants.get(source.id).product_tags] == ["B"]
        assert new_group.product_tags == [
            ProductTag(text="A", type=TagType.PRODUCT, color=TagColor.BLUE)
        ]
        assert new_group.grouping_logic == "New group"

    def test_new_group_copies_context(self, store: RecordStore) -> None:
        source = add_group(store, 1, "A", "B")

        new_group = create_new_group(store, source.id, "B")

        assert (new_group.seller, new_group.ee_category, new_group.brand) == (
            "Westcoast",
            "TV",
            "Samsung",
        )
        assert new_group.id != source.id

    def test_last_tag_deletes_source(self, store: RecordStore) -> None:
        source = add_group(store, 1, "A")

        new_group = create_new_group(store, source.id, "A")

        assert store.product_variants.get(source.id) is None
        assert [v.id for v in store.product_variants.all()] == [new_group.id]

    def test_duplicate_texts_move_together(self, store: RecordStore) -> None:
        """Every tag with the same text leaves the source."""
        source = add_group(store, 1, "A", "B", "A")

        create_new_group(store, source.id, "A")

        assert [tag.text for tag in store.product_variants.get(source.id).product_tags] == ["B"]

    def test_serial_number_follows_highest(self, store: RecordStore) -> None:
        add_group(store, 4, "X")
        source = add_group(store, 9, "A", "B")

        new_group = create_new_group(store, source.id, "A")

        assert new_group.serial_number == 10

    def test_serial_number_restarts_when_store_emptied(self, store: RecordStore) -> None:
        """Deleting the only group leaves nothing to take a maximum over."""
        source = add_group(store, 5, "A")

        new_group = create_new_group(store, source.id, "A")

        assert new_group.serial_number == 1

    def test_unknown_text_still_creates_group(self, store: RecordStore) -> None:
        source = add_group(store, 1, "A", "B")

        new_group = create_new_group(store, source.id, "Z")

        assert len(store.product_variants.get(source.id).product_tags) == 2
        assert new_group.product_tags[0].text == "Z"

    def test_unknown_source_changes_nothing(self, seeded_store: RecordStore) -> None:
        before = seeded_store.product_variants.all()

        with pytest.raises(NotFoundError):
            create_new_group(seeded_store, 99, "Samsung QLED TV | QLED43XYZ | 43 inch")

        assert seeded_store.product_variants.all() == before

    def test_seeded_duplicate_tag_texts(self, seeded_store: RecordStore) -> None:
        new_group = create_new_group(
            seeded_store, 1, "Samsung QLED TV | QLED55XYZ | 55 inch"
        )

        remaining = seeded_store.product_variants.get(1).product_tags
        assert [tag.text for tag in remaining] == ["Samsung QLED TV | QLED43XYZ | 43 inch"]
        assert new_group.id == 3
        assert new_group.serial_number == 3


def test_next_serial_number_of_nothing() -> None:
    assert next_serial_number([]) == 1
