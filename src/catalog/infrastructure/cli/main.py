import logging

import click

from catalog.infrastructure.bootstrap import (
    DATABASE_URL_ENV,
    database_engine,
    product_store,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_clear,
    product_delete,
    product_delete_many,
    product_exists,
    product_list,
    product_show,
    product_update,
)


@click.group()
@click.option(
    "--database-url",
    envvar=DATABASE_URL_ENV,
    default=None,
    help=f"SQLAlchemy database URL (env: {DATABASE_URL_ENV}).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log SQL and store activity.")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None, verbose: bool) -> None:
    """Catalog — product catalog management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    engine = database_engine(database_url)
    ctx.call_on_close(engine.dispose)
    ctx.obj = product_store(engine)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_clear)
product.add_command(product_delete)
product.add_command(product_delete_many)
product.add_command(product_exists)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
