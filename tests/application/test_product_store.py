"""Tests for the ProductStore use cases.

Uses the in-memory fake repository — no database.
"""

import pytest

from catalog.application import messages
from catalog.application.dto import ProductSpec
from catalog.application.product_store import ProductStore
from catalog.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    InsertFailedError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup(
    products: list[Product] | None = None,
) -> tuple[ProductStore, FakeProductRepository]:
    """Build a store over a fake repo, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product(id=1, name="Mug", price=Money.of("10"), image_url="u1"),
            Product(id=2, name="Plate", price=Money.of("15.50"), image_url="u2"),
            Product(id=3, name="Bowl", price=Money.of("8"), image_url="u3"),
        ]
    repo = FakeProductRepository(products)
    return ProductStore(repo), repo


class TestCreate:

    def test_returns_success_message_with_new_id(self):
        store, _ = _setup()
        result = store.create(ProductSpec("Spoon", "2.50", "u4"))
        assert result == messages.PRODUCT_CREATED.format(id=4)

    def test_created_product_is_fetchable(self):
        store, _ = _setup([])
        store.create(ProductSpec("Spoon", "2.50", "u4"))
        dto = store.get_by_id(1)
        assert (dto.name, dto.price, dto.image_url) == ("Spoon", "$2.50", "u4")

    def test_appears_exactly_once_in_listing(self):
        store, _ = _setup()
        store.create(ProductSpec("Spoon", "2.50", "u4"))
        names = [p.name for p in store.list_all()]
        assert names.count("Spoon") == 1

    def test_zero_affected_rows_raises_insert_failure(self):
        store = ProductStore(FakeProductRepository(fail_inserts=True))
        with pytest.raises(InsertFailedError) as exc_info:
            store.create(ProductSpec("Spoon", "2.50", "u4"))
        assert str(exc_info.value) == messages.PRODUCT_CREATE_FAILED

    def test_duplicate_name_is_not_checked_on_insert(self):
        store, _ = _setup()
        store.create(ProductSpec("Mug", "1", "u9"))
        assert [p.name for p in store.list_all()].count("Mug") == 2

    def test_negative_price_accepted(self):
        store, _ = _setup([])
        store.create(ProductSpec("Refund", "-1", "u4"))
        assert store.get_by_id(1).price == "$-1.00"

    def test_unstorable_price_rejected(self):
        store, repo = _setup([])
        with pytest.raises(ValidationError):
            store.create(ProductSpec("Spoon", "2.505", "u4"))
        assert repo.list_all() == []

    def test_name_stored_exactly_as_given(self):
        store, _ = _setup([])
        store.create(ProductSpec("Mug ", "1", "u"))
        assert store.get_by_id(1).name == "Mug "
        assert store.exists_by_name("Mug ")
        assert not store.exists_by_name("Mug")


class TestQueries:

    def test_list_all_returns_every_product(self):
        store, _ = _setup()
        assert [p.id for p in store.list_all()] == [1, 2, 3]

    def test_list_all_empty(self):
        store, _ = _setup([])
        assert store.list_all() == []

    def test_get_by_id(self):
        store, _ = _setup()
        dto = store.get_by_id(2)
        assert dto.id == 2
        assert dto.name == "Plate"
        assert dto.price == "$15.50"
        assert dto.image_url == "u2"

    @pytest.mark.parametrize("missing_id", [0, 4, 999])
    def test_get_by_id_missing(self, missing_id):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError, match=messages.PRODUCT_NOT_FOUND):
            store.get_by_id(missing_id)


class TestUpdate:

    def test_overwrites_all_fields_and_keeps_id(self):
        store, _ = _setup()
        result = store.update(1, ProductSpec("Cup", "12", "u9"))
        assert result == messages.PRODUCT_UPDATED
        dto = store.get_by_id(1)
        assert (dto.id, dto.name, dto.price, dto.image_url) == (1, "Cup", "$12.00", "u9")

    def test_keeping_own_name_is_not_a_collision(self):
        store, _ = _setup([Product(id=1, name="Mug", price=Money.of("10"), image_url="u1")])
        assert store.update(1, ProductSpec("Mug", "12", "u2")) == messages.PRODUCT_UPDATED
        dto = store.get_by_id(1)
        assert (dto.name, dto.price, dto.image_url) == ("Mug", "$12.00", "u2")

    def test_missing_id(self):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError, match=messages.PRODUCT_NOT_FOUND):
            store.update(42, ProductSpec("Cup", "12", "u9"))

    def test_rename_into_other_products_name_rejected(self):
        store, _ = _setup()
        with pytest.raises(DuplicateNameError) as exc_info:
            store.update(1, ProductSpec("Plate", "99", "u9"))
        assert str(exc_info.value) == messages.PRODUCT_NAME_TAKEN

    def test_rejected_rename_leaves_both_products_unmodified(self):
        store, _ = _setup()
        with pytest.raises(DuplicateNameError):
            store.update(1, ProductSpec("Plate", "99", "u9"))
        mug = store.get_by_id(1)
        plate = store.get_by_id(2)
        assert (mug.name, mug.price, mug.image_url) == ("Mug", "$10.00", "u1")
        assert (plate.name, plate.price, plate.image_url) == ("Plate", "$15.50", "u2")

    def test_name_check_is_case_sensitive(self):
        store, _ = _setup()
        assert store.update(1, ProductSpec("plate", "10", "u1")) == messages.PRODUCT_UPDATED

    def test_invalid_price_leaves_product_untouched(self):
        store, _ = _setup()
        with pytest.raises(ValidationError):
            store.update(1, ProductSpec("Cup", "abc", "u9"))
        assert store.get_by_id(1).name == "Mug"


class TestDelete:

    def test_delete_by_id(self):
        store, _ = _setup()
        assert store.delete_by_id(2) == messages.PRODUCT_DELETED
        with pytest.raises(EntityNotFoundError):
            store.get_by_id(2)

    def test_delete_by_id_missing(self):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError, match=messages.PRODUCT_NOT_FOUND):
            store.delete_by_id(42)

    def test_delete_all_clears_every_name(self):
        store, _ = _setup()
        assert store.delete_all() == messages.PRODUCTS_ALL_DELETED
        assert store.list_all() == []
        for name in ("Mug", "Plate", "Bowl"):
            assert not store.exists_by_name(name)

    def test_delete_all_on_empty_store(self):
        store, _ = _setup([])
        assert store.delete_all() == messages.PRODUCTS_ALL_DELETED

    def test_delete_by_ids_removes_only_present_entries(self):
        store, _ = _setup()
        assert store.delete_by_ids([1, 3, 77]) == messages.PRODUCTS_DELETED
        assert [p.id for p in store.list_all()] == [2]

    def test_delete_by_ids_all_absent_still_succeeds(self):
        store, _ = _setup()
        assert store.delete_by_ids([77, 88]) == messages.PRODUCTS_DELETED
        assert len(store.list_all()) == 3

    def test_delete_by_ids_empty_list(self):
        store, _ = _setup()
        assert store.delete_by_ids([]) == messages.PRODUCTS_DELETED
        assert len(store.list_all()) == 3


class TestNameChecks:

    def test_exists_by_name(self):
        store, _ = _setup()
        assert store.exists_by_name("Mug")
        assert not store.exists_by_name("Spoon")

    def test_exists_by_name_is_exact(self):
        store, _ = _setup()
        assert not store.exists_by_name("mug")
        assert not store.exists_by_name("Mug ")

    def test_exists_same_name_excludes_self(self):
        store, _ = _setup()
        assert not store.exists_same_name(1, "Mug")

    def test_exists_same_name_finds_other_product(self):
        store, _ = _setup()
        assert store.exists_same_name(2, "Mug")

    def test_update_and_exists_same_name_agree_on_padded_names(self):
        store, _ = _setup([
            Product(id=1, name="Mug ", price=Money.of("10"), image_url="u1"),
            Product(id=2, name="Mug", price=Money.of("10"), image_url="u2"),
        ])
        assert store.exists_same_name(2, "Mug ")
        with pytest.raises(DuplicateNameError):
            store.update(2, ProductSpec("Mug ", "10", "u2"))
        assert not store.exists_same_name(1, "Mug ")
        assert store.update(1, ProductSpec("Mug ", "11", "u1")) == messages.PRODUCT_UPDATED
