"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderflow.application.dto import OrderDTO
from orderflow.domain.exceptions import DomainException, InsufficientStockError
from orderflow.infrastructure.bootstrap import build_container


def _display_orders(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'ID':<6} {'User':>6} {'Product':<20} {'Qty':>5} {'Total':>10} {'Status':<10} Created"
    )
    click.echo("-" * 80)
    for o in orders:
        name = o.product.name if o.product else f"#{o.product_id}"
        click.echo(
            f"{o.id:<6} {o.user_id:>6} {name:<20} {o.quantity:>5} "
            f"{o.total_price:>10.2f} {o.status:<10} {o.created_at:%Y-%m-%d %H:%M UTC}"
        )
    click.echo(f"\n{len(orders)} order(s)")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    if dto.user is not None:
        click.echo(f"User:     {dto.user.name} <{dto.user.email}>")
    else:
        click.echo(f"User:     #{dto.user_id}")
    click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M UTC}")
    click.echo()
    name = dto.product.name if dto.product else f"#{dto.product_id}"
    price = f"{dto.product.price:.2f}" if dto.product else "-"
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {name:<20} {dto.quantity:>5} {price:>10} {dto.total_price:>10.2f}")


@click.command("create")
@click.option("--user", "user_id", required=True, type=int, help="Ordering user ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, help="Number of units.")
def order_create(user_id: int, product_id: str, quantity: str) -> None:
    """Place an order (takes stock immediately)."""
    handler = build_container().create_order()

    try:
        dto = handler.handle(user_id, product_id, quantity)
    except InsufficientStockError as exc:
        raise click.ClickException(
            f"Insufficient stock (available: {exc.available_stock})"
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", required=True, type=int, help="Owner user ID.")
@click.option("--status", default=None, help="Only orders with this status.")
def order_list(user_id: int, status: str | None) -> None:
    """List a user's orders, newest first."""
    orders = build_container().list_orders().handle(user_id, status=status)
    _display_orders(orders)


@click.command("all")
@click.option("--status", default=None, help="Only orders with this status.")
@click.option("--user", "user_id", default=None, type=int, help="Only orders of this user.")
def order_all(status: str | None, user_id: int | None) -> None:
    """List every order in the system, newest first."""
    orders = build_container().list_all_orders().handle(status=status, user_id=user_id)
    _display_orders(orders)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--user", "user_id", required=True, type=int, help="Owner user ID.")
def order_show(order_id: int, user_id: int) -> None:
    """Show details of one of a user's orders."""
    handler = build_container().show_order()

    try:
        dto = handler.handle(order_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", "new_status", required=True, help="New status.")
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to a new status."""
    handler = build_container().update_order_status()

    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")
