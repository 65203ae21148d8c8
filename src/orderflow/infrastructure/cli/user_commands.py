"""CLI commands for users."""

from __future__ import annotations

import click

from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import build_container


@click.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address (unique).")
def user_add(name: str, email: str) -> None:
    """Register a user."""
    handler = build_container().register_user()

    try:
        user = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.name}' <{user.email}> registered")
