"""Product aggregate.

Products live independently of orders. Line items only hold a reference
to a product, so a product always outlives the items that point at it.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderproc.domain.exceptions import ValidationError
from orderproc.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog. Immutable once created."""

    id: int
    name: str
    price: Money
    category: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
