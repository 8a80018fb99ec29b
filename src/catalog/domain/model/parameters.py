"""Parameter objects for Product and ProductPosition operations.

Each mutating operation takes exactly one of these.  Every object carries
the TimeProvider used to stamp the change, so the entity never reaches for
a global clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from catalog.domain.time_provider import TimeProvider

if TYPE_CHECKING:
    from catalog.domain.model.product import Product
    from catalog.domain.model.product_position import ProductPosition


@dataclass(frozen=True)
class ProductPositionSpec:
    """Input: a measurement-unit position the caller wants on a product."""

    measurement_unit_position_id: UUID


@dataclass(frozen=True)
class CreateProductParameters:
    title: str
    description: str
    time_provider: TimeProvider


@dataclass(frozen=True)
class SetProductTitleParameters:
    title: str
    time_provider: TimeProvider


@dataclass(frozen=True)
class SetProductDescriptionParameters:
    description: str
    time_provider: TimeProvider


@dataclass(frozen=True)
class AddPositionsToProductParameters:
    positions: Iterable[ProductPositionSpec]
    time_provider: TimeProvider


@dataclass(frozen=True)
class DeletePositionsFromProductParameters:
    product_positions: Iterable[ProductPosition]
    time_provider: TimeProvider


@dataclass(frozen=True)
class CreateProductPositionParameters:
    product: Product
    measurement_unit_position_id: UUID
    time_provider: TimeProvider
