"""Application service: Delete Product Positions use case.

Callers identify positions by their measurement-unit position ID; the
handler resolves them to the product's own ProductPosition entities
before asking the aggregate to remove them.
"""

from __future__ import annotations

import logging
from uuid import UUID

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.parameters import DeletePositionsFromProductParameters
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.time_provider import TimeProvider

logger = logging.getLogger(__name__)


class DeleteProductPositionsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        time_provider: TimeProvider,
    ) -> None:
        self._product_repo = product_repo
        self._time_provider = time_provider

    def handle(
        self,
        product_id: UUID,
        measurement_unit_position_ids: list[UUID],
    ) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Unknown IDs resolve to nothing and are ignored
        positions = [
            position
            for position in (
                product.find_position(mu_id) for mu_id in measurement_unit_position_ids
            )
            if position is not None
        ]

        removed = product.delete_positions(
            DeletePositionsFromProductParameters(
                product_positions=positions,
                time_provider=self._time_provider,
            )
        )
        self._product_repo.save(product)

        logger.info("Removed %d positions from product %s", len(removed), product.id)
        return to_product_dto(product)
