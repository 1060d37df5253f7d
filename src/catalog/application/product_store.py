"""Application service: the product store.

Every product use case goes through ``ProductStore``. Mutations return
a status message on success and raise a ``DomainException`` carrying
the status message on failure.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from catalog.application import messages
from catalog.application.dto import ProductDTO, ProductSpec
from catalog.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    InsertFailedError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductStore:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    # --- Commands -------------------------------------------------------------

    def create(self, spec: ProductSpec) -> str:
        """Add a new product to the catalog.

        Names are not checked for uniqueness here; only renames are.
        """
        product = Product(
            name=spec.name,
            price=Money.of(spec.price),
            image_url=spec.image_url,
        )
        affected = self._product_repo.add(product)
        if affected == 0:
            logger.warning("Insert of product %r affected no rows", product.name)
            raise InsertFailedError(messages.PRODUCT_CREATE_FAILED)

        logger.info("Created product #%s %r", product.id, product.name)
        return messages.PRODUCT_CREATED.format(id=product.id)

    def update(self, product_id: int, spec: ProductSpec) -> str:
        """Replace the name, price and image URL of an existing product."""
        product = self._require(product_id)

        if self.exists_same_name(product_id, spec.name):
            logger.warning(
                "Rejected rename of product #%s to taken name %r",
                product_id,
                spec.name,
            )
            raise DuplicateNameError(messages.PRODUCT_NAME_TAKEN)

        product.change_details(
            name=spec.name,
            price=Money.of(spec.price),
            image_url=spec.image_url,
        )
        self._product_repo.save(product)
        logger.info("Updated product #%s", product_id)
        return messages.PRODUCT_UPDATED

    def delete_all(self) -> str:
        """Remove every product unconditionally."""
        removed = self._product_repo.delete_all()
        logger.info("Deleted all products (%d rows)", removed)
        return messages.PRODUCTS_ALL_DELETED

    def delete_by_id(self, product_id: int) -> str:
        if not self._product_repo.delete(product_id):
            logger.warning("Delete of unknown product #%s", product_id)
            raise EntityNotFoundError(messages.PRODUCT_NOT_FOUND)

        logger.info("Deleted product #%s", product_id)
        return messages.PRODUCT_DELETED

    def delete_by_ids(self, product_ids: Iterable[int]) -> str:
        """Remove every listed product that exists.

        Unknown ids are skipped silently; the result is always success.
        """
        ids = list(product_ids)
        removed = self._product_repo.delete_many(ids) if ids else 0
        logger.info("Deleted %d of %d requested products", removed, len(ids))
        return messages.PRODUCTS_DELETED

    # --- Queries --------------------------------------------------------------

    def list_all(self) -> list[ProductDTO]:
        return [_to_dto(p) for p in self._product_repo.list_all()]

    def get_by_id(self, product_id: int) -> ProductDTO:
        return _to_dto(self._require(product_id))

    def exists_by_name(self, name: str) -> bool:
        return self._product_repo.exists_by_name(name)

    def exists_same_name(self, exclude_id: int, name: str) -> bool:
        """True if a product *other than* ``exclude_id`` is called ``name``.

        Used to block a rename into a collision; a product keeping its
        own name does not collide with itself.
        """
        return self._product_repo.exists_by_name(name, exclude_id=exclude_id)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning("Product #%s not found", product_id)
            raise EntityNotFoundError(messages.PRODUCT_NOT_FOUND)
        return product


def _to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        image_url=product.image_url,
    )
