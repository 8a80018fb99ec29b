"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from catalog.domain.time_provider import SystemTimeProvider, TimeProvider
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DEFAULT_DATA_DIR = Path("data")
PRODUCTS_FILE = "products.json"


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonProductRepository:
    return JsonProductRepository(Path(data_dir) / PRODUCTS_FILE)


def time_provider() -> TimeProvider:
    return SystemTimeProvider()
