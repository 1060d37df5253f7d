"""Relational schema for the catalog."""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Numeric, String, Table
from sqlalchemy.engine import Engine

metadata = MetaData()

product_table = Table(
    "product",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
    Column("image_url", String(1024), nullable=False),
    Index("ix_product_name", "name"),
    sqlite_autoincrement=True,
)


def create_schema(engine: Engine) -> None:
    """Create missing tables. Safe to call on every start-up."""
    metadata.create_all(engine)
