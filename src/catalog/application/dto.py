"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: the editable fields of a product, as typed by the user."""

    name: str
    price: str
    image_url: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    image_url: str
