"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.dto import ProductSpec
from catalog.application.product_store import ProductStore
from catalog.domain.exceptions import DomainException

pass_store = click.make_pass_decorator(ProductStore)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--image-url", required=True, help="Image URL.")
@pass_store
def product_add(store: ProductStore, name: str, price: str, image_url: str) -> None:
    """Add a new product to the catalog."""
    try:
        message = store.create(ProductSpec(name=name, price=price, image_url=image_url))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("list")
@pass_store
def product_list(store: ProductStore) -> None:
    """List all products in the catalog."""
    try:
        products = store.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Image URL")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}  {p.image_url}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_store
def product_show(store: ProductStore, product_id: int) -> None:
    """Show a single product."""
    try:
        dto = store.get_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}")
    click.echo(f"Name:      {dto.name}")
    click.echo(f"Price:     {dto.price}")
    click.echo(f"Image URL: {dto.image_url}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--image-url", required=True, help="New image URL.")
@pass_store
def product_update(
    store: ProductStore, product_id: int, name: str, price: str, image_url: str
) -> None:
    """Replace a product's name, price and image URL."""
    try:
        message = store.update(
            product_id, ProductSpec(name=name, price=price, image_url=image_url)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_store
def product_delete(store: ProductStore, product_id: int) -> None:
    """Delete one product."""
    try:
        message = store.delete_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("delete-many")
@click.option(
    "--id", "product_ids", required=True, multiple=True, type=int,
    help="Product ID (repeatable). Unknown IDs are ignored.",
)
@pass_store
def product_delete_many(store: ProductStore, product_ids: tuple[int, ...]) -> None:
    """Delete every listed product."""
    try:
        message = store.delete_by_ids(product_ids)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("clear")
@click.confirmation_option(prompt="Delete every product?")
@pass_store
def product_clear(store: ProductStore) -> None:
    """Delete all products."""
    try:
        message = store.delete_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("exists")
@click.option("--name", required=True, help="Exact product name.")
@click.option(
    "--exclude-id", type=int, default=None,
    help="Ignore this product when checking (rename check).",
)
@pass_store
def product_exists(store: ProductStore, name: str, exclude_id: int | None) -> None:
    """Check whether a product name is already taken."""
    try:
        if exclude_id is None:
            taken = store.exists_by_name(name)
        else:
            taken = store.exists_same_name(exclude_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("taken" if taken else "free")
