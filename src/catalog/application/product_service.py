"""Application service: the product operations offered to the outside.

Callers (the CLI, tests) depend on the ProductService interface only.
RepositoryProductService is the single implementation; it delegates
every call to whatever ProductRepository it was given.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from catalog.application.crud import CrudOperations
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class ProductService(ABC):

    @abstractmethod
    def create_product(self, name: str, price: str | float | int | Decimal) -> Product:
        """Store a new product and return it with its assigned ID."""

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Product | None:
        """Return the product, or None when no product has that ID."""

    @abstractmethod
    def delete_product(self, product_id: int) -> bool:
        """Delete a product. Deleting a missing ID is a no-op (returns False)."""

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def update_product(
        self,
        product_id: int,
        name: str | None = None,
        price: str | float | int | Decimal | None = None,
    ) -> Product:
        """Change name and/or price of an existing product."""


class RepositoryProductService(ProductService):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._crud: CrudOperations[Product] = CrudOperations(product_repo, "Product")

    def create_product(self, name: str, price: str | float | int | Decimal) -> Product:
        return self._crud.create(Product(name=name, price=price))

    def get_product_by_id(self, product_id: int) -> Product | None:
        return self._crud.get(product_id)

    def delete_product(self, product_id: int) -> bool:
        return self._crud.delete(product_id)

    def list_products(self) -> list[Product]:
        return self._crud.list_all()

    def update_product(
        self,
        product_id: int,
        name: str | None = None,
        price: str | float | int | Decimal | None = None,
    ) -> Product:
        def apply(product: Product) -> None:
            if name is not None:
                product.rename(name)
            if price is not None:
                product.reprice(price)

        return self._crud.modify(product_id, apply)
