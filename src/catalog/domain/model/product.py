"""Product aggregate.

A Product is a sellable catalog item.  It owns its ProductPositions, the
links to the measurement-unit positions (package sizes, units of sale) it
is offered in.  Every mutation goes through a method taking a parameter
object, and every mutation stamps ``updated_at`` from the TimeProvider
carried by that object.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID, uuid4

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.model.parameters import (
    AddPositionsToProductParameters,
    CreateProductParameters,
    CreateProductPositionParameters,
    DeletePositionsFromProductParameters,
    SetProductDescriptionParameters,
    SetProductTitleParameters,
)
from catalog.domain.model.product_position import ProductPosition
from catalog.domain.time_provider import TimeProvider


class Product:
    """Aggregate root for catalog products.

    Use the ``Product.create()`` factory for new products.  The ``__init__``
    only assigns the stored fields so the repository can reconstitute a
    persisted product without touching its timestamps.

    Invariants:
    - ``title`` and ``description`` are always stored trimmed
    - no two positions share a ``measurement_unit_position_id``
    - ``updated_at`` never moves backwards and is never before ``created_at``
    """

    def __init__(
        self,
        id: UUID,
        title: str,
        description: str,
        created_at: datetime,
        updated_at: datetime,
        positions: Iterable[ProductPosition] = (),
    ) -> None:
        self._id = id
        self._title = title
        self._description = description
        self._created_at = created_at
        self._updated_at = updated_at
        self._positions: list[ProductPosition] = []
        for position in positions:
            position.product = self
            self._positions.append(position)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(parameters: CreateProductParameters) -> Product:
        """Create a new product with no positions.

        The time source is read once, so ``created_at`` and the first
        ``updated_at`` are the same instant.
        """
        title = _clean_text(parameters.title, "title")
        description = _clean_text(parameters.description, "description")
        now = _require_time_provider(parameters.time_provider).get_utc_now()

        return Product(
            id=uuid4(),
            title=title,
            description=description,
            created_at=now,
            updated_at=now,
        )

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def positions(self) -> tuple[ProductPosition, ...]:
        return tuple(self._positions)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # --- Mutations ------------------------------------------------------------

    def set_title(self, parameters: SetProductTitleParameters) -> None:
        title = _clean_text(parameters.title, "title")
        self._touch(parameters.time_provider)
        self._title = title

    def set_description(self, parameters: SetProductDescriptionParameters) -> None:
        description = _clean_text(parameters.description, "description")
        self._touch(parameters.time_provider)
        self._description = description

    def add_positions(
        self, parameters: AddPositionsToProductParameters
    ) -> tuple[ProductPosition, ...]:
        """Add positions for measurement-unit positions not yet on the product.

        Duplicates within the input collapse to their first occurrence, and
        ids already present are skipped without error.  The new positions
        are appended in input order and returned.
        """
        if parameters.positions is None:
            raise InvalidArgumentError("Positions to add are required")
        time_provider = _require_time_provider(parameters.time_provider)

        seen = {p.measurement_unit_position_id for p in self._positions}
        added: list[ProductPosition] = []
        for spec in parameters.positions:
            if spec.measurement_unit_position_id in seen:
                continue
            seen.add(spec.measurement_unit_position_id)
            added.append(
                ProductPosition.create(
                    CreateProductPositionParameters(
                        product=self,
                        measurement_unit_position_id=spec.measurement_unit_position_id,
                        time_provider=time_provider,
                    )
                )
            )

        self._positions.extend(added)
        self._touch(time_provider)
        return tuple(added)

    def delete_positions(
        self, parameters: DeletePositionsFromProductParameters
    ) -> tuple[ProductPosition, ...]:
        """Remove the given positions from the product.

        Positions that do not belong to this product are ignored.
        ``updated_at`` advances even if nothing was removed.
        """
        if parameters.product_positions is None:
            raise InvalidArgumentError("Positions to delete are required")
        time_provider = _require_time_provider(parameters.time_provider)

        requested = set(parameters.product_positions)
        removed = tuple(p for p in self._positions if p in requested)
        for position in removed:
            self._positions.remove(position)

        self._touch(time_provider)
        return removed

    # --- Queries --------------------------------------------------------------

    def find_position(self, measurement_unit_position_id: UUID) -> ProductPosition | None:
        for position in self._positions:
            if position.measurement_unit_position_id == measurement_unit_position_id:
                return position
        return None

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!s}, title={self._title!r}, "
            f"positions={len(self._positions)})"
        )

    # --- Internal helpers -----------------------------------------------------

    def _touch(self, time_provider: TimeProvider) -> None:
        now = _require_time_provider(time_provider).get_utc_now()
        if now > self._updated_at:
            self._updated_at = now


def _clean_text(value: str, field_name: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"Product {field_name} is required")
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Product {field_name} must be a string, got {type(value).__name__}"
        )
    return value.strip()


def _require_time_provider(time_provider: TimeProvider) -> TimeProvider:
    if time_provider is None:
        raise InvalidArgumentError("Time provider is required")
    return time_provider
