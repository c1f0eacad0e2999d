"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass

from orderproc.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Customer:

    id: int
    name: str
    email: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")
