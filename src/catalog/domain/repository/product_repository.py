"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert (assigning an ID) or fully overwrite a product.

        Returns the stored record.
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> bool:
        """Remove a product if present. Returns True if one was removed."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product, ordered by ID."""
