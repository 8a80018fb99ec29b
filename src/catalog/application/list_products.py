"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductSummaryDTO, to_product_summary_dto
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductSummaryDTO]:
        return [to_product_summary_dto(p) for p in self._product_repo.list_all()]
