"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from uuid import UUID

from catalog.domain.model.product import Product
from catalog.domain.model.product_position import ProductPosition
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: UUID) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == str(product_id):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        products = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(products):
            if raw["id"] == str(product.id):
                products[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            products.append(self._to_raw(product))

        self._persist_raw(products)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": str(product.id),
            "title": product.title,
            "description": product.description,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
            "positions": [
                {
                    "id": str(position.id),
                    "measurement_unit_position_id": str(
                        position.measurement_unit_position_id
                    ),
                    "created_at": position.created_at.isoformat(),
                    "updated_at": position.updated_at.isoformat(),
                }
                for position in product.positions
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        positions = [
            ProductPosition(
                id=UUID(p["id"]),
                measurement_unit_position_id=UUID(p["measurement_unit_position_id"]),
                created_at=datetime.fromisoformat(p["created_at"]),
                updated_at=datetime.fromisoformat(p["updated_at"]),
            )
            for p in raw.get("positions", [])
        ]
        return Product(
            id=UUID(raw["id"]),
            title=raw["title"],
            description=raw["description"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            positions=positions,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, products: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(products, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            logger.debug("Creating product store at %s", self._file_path)
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
