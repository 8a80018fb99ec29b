"""Application service: Update Product use case.

Changes the title and/or the description of an existing product.
Only the fields that are given are touched.
"""

from __future__ import annotations

import logging
from uuid import UUID

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.parameters import (
    SetProductDescriptionParameters,
    SetProductTitleParameters,
)
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.time_provider import TimeProvider

logger = logging.getLogger(__name__)


class UpdateProductHandler:

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
        title: str | None = None,
        description: str | None = None,
    ) -> ProductDTO:
        if title is None and description is None:
            raise ValidationError("Nothing to update: give a title or a description")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if title is not None:
            product.set_title(
                SetProductTitleParameters(title=title, time_provider=self._time_provider)
            )
        if description is not None:
            product.set_description(
                SetProductDescriptionParameters(
                    description=description, time_provider=self._time_provider
                )
            )
        self._product_repo.save(product)

        logger.info("Updated product %s", product.id)
        return to_product_dto(product)
