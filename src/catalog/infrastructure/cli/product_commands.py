"""CLI commands for the Product aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from catalog.application.add_positions import AddProductPositionsHandler
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_positions import DeleteProductPositionsHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository, time_provider


def _print_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"Title:       {dto.title}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Updated:     {dto.updated_at}")
    click.echo()

    if not dto.positions:
        click.echo("No positions.")
        return

    click.echo(f"{'Position ID':<38} {'Measurement unit position':<38}")
    click.echo("-" * 77)
    for position in dto.positions:
        click.echo(f"{position.id:<38} {position.measurement_unit_position_id:<38}")


@click.command("create")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", default="", help="Product description.")
@click.pass_obj
def product_create(obj: dict, title: str, description: str) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(obj["data_dir"]),
        time_provider=time_provider(),
    )

    try:
        dto = handler.handle(title=title, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.title}' created")


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(obj["data_dir"]))
    products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Title':<24} {'Positions':>9}  {'Updated':<23}")
    click.echo("-" * 97)
    for p in products:
        click.echo(f"{p.id:<38} {p.title:<24} {p.position_count:>9}  {p.updated_at:<23}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.pass_obj
def product_show(obj: dict, product_id: UUID) -> None:
    """Show a product and its positions."""
    handler = ShowProductHandler(product_repo=product_repository(obj["data_dir"]))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    obj: dict, product_id: UUID, title: str | None, description: str | None
) -> None:
    """Change a product's title and/or description."""
    handler = UpdateProductHandler(
        product_repo=product_repository(obj["data_dir"]),
        time_provider=time_provider(),
    )

    try:
        dto = handler.handle(product_id, title=title, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated")


@click.command("add-positions")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option(
    "--position",
    "position_ids",
    required=True,
    multiple=True,
    type=click.UUID,
    help="Measurement unit position ID (repeatable).",
)
@click.pass_obj
def product_add_positions(
    obj: dict, product_id: UUID, position_ids: tuple[UUID, ...]
) -> None:
    """Attach measurement unit positions to a product."""
    handler = AddProductPositionsHandler(
        product_repo=product_repository(obj["data_dir"]),
        time_provider=time_provider(),
    )

    try:
        dto = handler.handle(product_id, list(position_ids))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} now has {len(dto.positions)} position(s)")


@click.command("delete-positions")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option(
    "--position",
    "position_ids",
    required=True,
    multiple=True,
    type=click.UUID,
    help="Measurement unit position ID (repeatable).",
)
@click.pass_obj
def product_delete_positions(
    obj: dict, product_id: UUID, position_ids: tuple[UUID, ...]
) -> None:
    """Detach measurement unit positions from a product."""
    handler = DeleteProductPositionsHandler(
        product_repo=product_repository(obj["data_dir"]),
        time_provider=time_provider(),
    )

    try:
        dto = handler.handle(product_id, list(position_ids))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} now has {len(dto.positions)} position(s)")
