"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

from loguru import logger

from catalog.domain.exceptions import StorageUnavailableError, ValidationError
from catalog.domain.model.product import Product, to_price
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        with self._lock:
            products = self._load()
            stored = product.copy()
            if stored.id is None:
                stored.id = max(products, default=0) + 1
            products[stored.id] = stored
            self._persist(products)
            # Only hand the ID out once the record is actually on disk.
            product.id = stored.id
            logger.debug("Wrote product #{} to {}", stored.id, self._file_path)
            return stored.copy()

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            return self._load().get(product_id)

    def delete_by_id(self, product_id: int) -> bool:
        with self._lock:
            products = self._load()
            if products.pop(product_id, None) is None:
                return False
            self._persist(products)
            return True

    def find_all(self) -> list[Product]:
        with self._lock:
            products = self._load()
            return [products[k] for k in sorted(products)]

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                int(item["id"]): Product(
                    id=int(item["id"]),
                    name=item["name"],
                    price=to_price(item["price"]),
                )
                for item in raw
            }
        except OSError as exc:
            logger.error("Cannot read {}: {}", self._file_path, exc)
            raise StorageUnavailableError(f"Cannot read {self._file_path}: {exc}") from exc
        except (ValueError, KeyError, TypeError, ValidationError) as exc:
            logger.error("Corrupt product file {}: {}", self._file_path, exc)
            raise StorageUnavailableError(f"Corrupt product file {self._file_path}") from exc

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {"id": p.id, "name": p.name, "price": str(p.price)}
            for _, p in sorted(products.items())
        ]
        # Write beside the target and swap it in, so a crash never leaves a half-written store.
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(json.dumps(raw, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("Cannot write {}: {}", self._file_path, exc)
            raise StorageUnavailableError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot create {self._file_path}: {exc}") from exc
