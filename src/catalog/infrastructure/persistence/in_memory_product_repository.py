"""Dict-backed implementation of ProductRepository.

Records are copied on the way in and on the way out, so a caller
holding a Product cannot change the stored one without calling save().
"""

from __future__ import annotations

import threading

from loguru import logger

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._lock = threading.Lock()
        for p in products or []:
            self.save(p)

    def save(self, product: Product) -> Product:
        with self._lock:
            stored = product.copy()
            if stored.id is None:
                stored.id = max(self._store, default=0) + 1
            self._store[stored.id] = stored
            product.id = stored.id
            logger.debug("Stored product #{} in memory", stored.id)
            return stored.copy()

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            found = self._store.get(product_id)
            return found.copy() if found is not None else None

    def delete_by_id(self, product_id: int) -> bool:
        with self._lock:
            return self._store.pop(product_id, None) is not None

    def find_all(self) -> list[Product]:
        with self._lock:
            return [self._store[k].copy() for k in sorted(self._store)]
