"""Product entity.

A plain record: identifier, name, price. The identifier is assigned
once (by the repository on first save, or by the caller) and can never
change afterwards. Name and price are freely mutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError


@dataclass
class Product:
    """A product in the catalog.

    Price is held as a Decimal. No sign or range rule is applied to it,
    and an empty name is accepted; only ``None`` is rejected for name.
    """

    name: str
    price: Decimal
    id: int | None = None

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Decimal):
            self.price = to_price(self.price)

    def __setattr__(self, attr: str, value: object) -> None:
        if attr == "id" and getattr(self, "id", None) is not None and value != self.id:
            raise ValidationError(
                f"Product ID is immutable once assigned (is {self.id}, got {value!r})"
            )
        super().__setattr__(attr, value)

    def rename(self, new_name: str) -> None:
        if new_name is None:
            raise ValidationError("Product name is required")
        self.name = new_name

    def reprice(self, new_price: str | float | int | Decimal) -> None:
        self.price = to_price(new_price)

    def copy(self) -> Product:
        return Product(name=self.name, price=self.price, id=self.id)


def to_price(value: str | float | int | Decimal) -> Decimal:
    """Coerce user input to a Decimal price.

    Floats go through ``str`` first so 9.99 stays 9.99 instead of
    picking up binary rounding noise.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid price: {value!r}")
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid price: {value!r}") from exc
    # NaN and Infinity parse fine but are not amounts (and NaN != NaN).
    if not price.is_finite():
        raise ValidationError(f"Invalid price: {value!r}")
    return price
