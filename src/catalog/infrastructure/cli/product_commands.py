"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.product_service import ProductService
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_service
from catalog.infrastructure.config import load_settings
from catalog.infrastructure.logging_config import setup_logging


def _service() -> ProductService:
    """Load settings and build the service for the running command.

    Called from command bodies, not the group, so ``--help`` works even
    with a broken configuration.
    """
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    # Every CLI invocation is a fresh process; a dict store would be empty each time.
    if settings.storage == "memory":
        raise click.ClickException(
            "CATALOG_STORAGE=memory is only usable from Python; the CLI needs 'json'"
        )

    setup_logging(settings.log_level, settings.log_file)
    try:
        return product_service(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _describe(p: Product) -> str:
    return f"Product #{p.id} '{p.name}' at {p.price}"


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
def product_create(name: str, price: str) -> None:
    """Add a new product to the catalog."""
    service = _service()

    try:
        product = service.create_product(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{_describe(product)} created")


@click.command("get")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_get(product_id: int) -> None:
    """Show a single product."""
    service = _service()

    try:
        product = service.get_product_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(f"Product #{product_id} not found")
    click.echo(_describe(product))


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product. Deleting an unknown ID is not an error."""
    service = _service()

    try:
        removed = service.delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if removed:
        click.echo(f"Product #{product_id} deleted")
    else:
        click.echo(f"Product #{product_id} does not exist, nothing to delete")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    service = _service()

    try:
        products = service.list_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
def product_update(product_id: int, name: str | None, price: str | None) -> None:
    """Rename and/or reprice a product."""
    if name is None and price is None:
        raise click.UsageError("Nothing to update: pass --name and/or --price")

    service = _service()

    try:
        product = service.update_product(product_id, name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{_describe(product)} updated")
