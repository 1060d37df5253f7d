"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from catalog.application.product_store import ProductStore
from catalog.infrastructure.persistence.query_executor import SqlQueryExecutor
from catalog.infrastructure.persistence.schema import create_schema
from catalog.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)

logger = logging.getLogger(__name__)

DATABASE_URL_ENV = "CATALOG_DATABASE_URL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def default_database_url() -> str:
    return f"sqlite:///{_DATA_DIR / 'catalog.db'}"


def database_engine(url: str | None = None) -> Engine:
    """Create the engine for ``url`` and make sure the schema exists."""
    url = url or default_database_url()
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url)
    create_schema(engine)
    logger.debug("Connected to %s", parsed.render_as_string(hide_password=True))
    return engine


def product_store(engine: Engine) -> ProductStore:
    return ProductStore(SqlProductRepository(SqlQueryExecutor(engine)))
