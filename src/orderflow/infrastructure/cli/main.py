import click
import uvicorn

from orderflow.infrastructure.api.app import create_app
from orderflow.infrastructure.bootstrap import build_container
from orderflow.infrastructure.cli.order_commands import (
    order_all,
    order_create,
    order_list,
    order_show,
    order_status,
)
from orderflow.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from orderflow.infrastructure.cli.user_commands import user_add


@click.group()
def cli() -> None:
    """orderflow: order fulfillment service."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from ORDERFLOW_HOST).")
@click.option("--port", default=None, type=int, help="Port (default from ORDERFLOW_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API and event stream."""
    container = build_container()
    settings = container.settings
    uvicorn.run(
        create_app(container),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_all)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_delete)
user.add_command(user_add)
