"""Application service: Add Product Positions use case."""

from __future__ import annotations

import logging
from uuid import UUID

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.parameters import (
    AddPositionsToProductParameters,
    ProductPositionSpec,
)
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.time_provider import TimeProvider

logger = logging.getLogger(__name__)


class AddProductPositionsHandler:

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
        """Attach measurement-unit positions to a product.

        IDs the product already has, and repeats within the request, are
        ignored by the aggregate.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        added = product.add_positions(
            AddPositionsToProductParameters(
                positions=[
                    ProductPositionSpec(measurement_unit_position_id=mu_id)
                    for mu_id in measurement_unit_position_ids
                ],
                time_provider=self._time_provider,
            )
        )
        self._product_repo.save(product)

        logger.info(
            "Added %d of %d requested positions to product %s",
            len(added),
            len(measurement_unit_position_ids),
            product.id,
        )
        return to_product_dto(product)
