"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


@dataclass(frozen=True)
class ProductPositionDTO:
    """Output: a single position as displayed to the user."""

    id: str
    measurement_unit_position_id: str
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a complete product as displayed to the user."""

    id: str
    title: str
    description: str
    positions: list[ProductPositionDTO]
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductSummaryDTO:
    """Output: one row of the product listing."""

    id: str
    title: str
    position_count: int
    updated_at: str


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=str(product.id),
        title=product.title,
        description=product.description,
        positions=[
            ProductPositionDTO(
                id=str(position.id),
                measurement_unit_position_id=str(position.measurement_unit_position_id),
                created_at=position.created_at.strftime(TIMESTAMP_FORMAT),
            )
            for position in product.positions
        ],
        created_at=product.created_at.strftime(TIMESTAMP_FORMAT),
        updated_at=product.updated_at.strftime(TIMESTAMP_FORMAT),
    )


def to_product_summary_dto(product: Product) -> ProductSummaryDTO:
    return ProductSummaryDTO(
        id=str(product.id),
        title=product.title,
        position_count=len(product.positions),
        updated_at=product.updated_at.strftime(TIMESTAMP_FORMAT),
    )
