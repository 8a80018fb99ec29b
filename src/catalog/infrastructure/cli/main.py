import logging
from pathlib import Path

import click

from catalog.infrastructure.bootstrap import DEFAULT_DATA_DIR
from catalog.infrastructure.cli.product_commands import (
    product_add_positions,
    product_create,
    product_delete_positions,
    product_list,
    product_show,
    product_update,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    envvar="CATALOG_DATA_DIR",
    help="Directory holding the catalog data files.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Catalog — product catalog management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_add_positions)
product.add_command(product_delete_positions)
