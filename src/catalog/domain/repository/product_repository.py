"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> int:
        """Insert a new product and assign its generated id.

        Returns the number of affected rows.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in storage order."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist changes to an already stored product."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove one product. Returns False if it did not exist."""

    @abstractmethod
    def delete_many(self, product_ids: Iterable[int]) -> int:
        """Remove every listed product that exists. Returns the count removed."""

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every product. Returns the count removed."""

    @abstractmethod
    def exists_by_name(self, name: str, exclude_id: int | None = None) -> bool:
        """True if a product other than ``exclude_id`` has exactly ``name``."""
