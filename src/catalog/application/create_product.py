"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.model.parameters import CreateProductParameters
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.time_provider import TimeProvider

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        time_provider: TimeProvider,
    ) -> None:
        self._product_repo = product_repo
        self._time_provider = time_provider

    def handle(self, title: str, description: str) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            CreateProductParameters(
                title=title,
                description=description,
                time_provider=self._time_provider,
            )
        )
        self._product_repo.save(product)

        logger.info("Created product %s (%r)", product.id, product.title)
        return to_product_dto(product)
