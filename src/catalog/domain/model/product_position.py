"""ProductPosition entity — links a Product to a measurement-unit position.

A position is owned by exactly one Product and is unique within it by
``measurement_unit_position_id``.  Two positions are the same entity when
their ``id`` matches, whatever the state of their other fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.model.parameters import CreateProductPositionParameters

if TYPE_CHECKING:
    from catalog.domain.model.product import Product


@dataclass(eq=False)
class ProductPosition:
    """Child entity of the Product aggregate.

    The ``__init__`` only assigns fields so the repository can rebuild a
    stored position; new positions go through ``ProductPosition.create()``.
    """

    id: UUID
    measurement_unit_position_id: UUID
    created_at: datetime
    updated_at: datetime
    product: Product | None = field(default=None, repr=False)

    @staticmethod
    def create(parameters: CreateProductPositionParameters) -> ProductPosition:
        if parameters.product is None:
            raise InvalidArgumentError("Product position requires an owning product")
        if parameters.measurement_unit_position_id is None:
            raise InvalidArgumentError("Measurement unit position ID is required")
        if parameters.time_provider is None:
            raise InvalidArgumentError("Time provider is required")

        now = parameters.time_provider.get_utc_now()
        return ProductPosition(
            id=uuid4(),
            measurement_unit_position_id=parameters.measurement_unit_position_id,
            created_at=now,
            updated_at=now,
            product=parameters.product,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductPosition):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
