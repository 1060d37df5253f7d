"""Product entity.

A product is identified by an integer id assigned by the store when it
is first inserted. Name, price and image URL may change afterwards;
the id never does. Name and image URL are stored exactly as given.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is None until the repository has stored the product.
    """

    name: str
    price: Money
    image_url: str
    id: int | None = None

    def change_details(self, name: str, price: Money, image_url: str) -> None:
        """Overwrite every mutable field in one step."""
        self.name = name
        self.price = price
        self.image_url = image_url
