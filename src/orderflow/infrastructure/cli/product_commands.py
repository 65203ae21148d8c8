"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import build_container


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, help="Units in stock.")
def product_add(name: str, price: str, stock: str) -> None:
    """Add a new product to the catalog."""
    handler = build_container().add_product()

    try:
        product = handler.handle(name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at ${product.price:.2f} "
        f"({product.stock} in stock)"
    )


@click.command("list")
@click.option("--search", default=None, help="Case-insensitive name filter.")
@click.option("--in-stock", is_flag=True, default=False, help="Only products with stock left.")
def product_list(search: str | None, in_stock: bool) -> None:
    """List products in the catalog."""
    products = build_container().list_products().handle(search=search, in_stock=in_stock)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10.2f} {p.stock:>8}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, help="New stock level.")
def product_update(
    product_id: int, name: str | None, price: str | None, stock: str | None
) -> None:
    """Edit a product's name, price or stock."""
    if name is None and price is None and stock is None:
        raise click.ClickException("Nothing to update: pass --name, --price or --stock")

    handler = build_container().update_product()

    try:
        product = handler.handle(product_id, name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' now ${product.price:.2f} "
        f"({product.stock} in stock)"
    )


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product that has never been ordered."""
    handler = build_container().delete_product()

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
