"""Relational implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import bindparam, text

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.query_executor import SqlQueryExecutor
from catalog.infrastructure.persistence.schema import product_table

_INSERT = product_table.insert()
_SELECT_ALL = "SELECT * FROM product"
_SELECT_BY_ID = "SELECT * FROM product WHERE id = :id"
_UPDATE = (
    "UPDATE product SET name = :name, price = :price, image_url = :image_url "
    "WHERE id = :id"
)
_DELETE_ALL = "DELETE FROM product"
_DELETE_BY_ID = "DELETE FROM product WHERE id = :id"
_DELETE_BY_IDS = text("DELETE FROM product WHERE id IN :ids").bindparams(
    bindparam("ids", expanding=True)
)
_NAME_EXISTS = "SELECT 1 FROM product WHERE name = :name LIMIT 1"
_NAME_EXISTS_EXCLUDING = "SELECT 1 FROM product WHERE name = :name AND id <> :id LIMIT 1"


class SqlProductRepository(ProductRepository):

    def __init__(self, executor: SqlQueryExecutor) -> None:
        self._executor = executor

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> int:
        affected, new_id = self._executor.insert(_INSERT, **self._to_params(product))
        if affected:
            product.id = new_id
        return affected

    def list_all(self) -> list[Product]:
        return self._executor.query(_SELECT_ALL, self._to_domain)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._executor.query_one(_SELECT_BY_ID, self._to_domain, id=product_id)

    def save(self, product: Product) -> None:
        self._executor.update(_UPDATE, id=product.id, **self._to_params(product))

    def delete(self, product_id: int) -> bool:
        return self._executor.update(_DELETE_BY_ID, id=product_id) > 0

    def delete_many(self, product_ids: Iterable[int]) -> int:
        ids = list(product_ids)
        if not ids:
            return 0
        return self._executor.update(_DELETE_BY_IDS, ids=ids)

    def delete_all(self) -> int:
        return self._executor.update(_DELETE_ALL)

    def exists_by_name(self, name: str, exclude_id: int | None = None) -> bool:
        if exclude_id is None:
            return self._executor.exists(_NAME_EXISTS, name=name)
        return self._executor.exists(_NAME_EXISTS_EXCLUDING, name=name, id=exclude_id)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_params(product: Product) -> dict[str, Any]:
        # Bound as text: not every driver accepts Decimal.
        return {
            "name": product.name,
            "price": str(product.price.amount),
            "image_url": product.image_url,
        }

    @staticmethod
    def _to_domain(row: Mapping[str, Any]) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            price=Money.of(row["price"]),
            image_url=row["image_url"],
        )
