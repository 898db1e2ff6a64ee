# -*- coding: utf-8 -*-
"""
Item model for the packer.

Weights and prices are kept as Decimal so sums of the two-decimal values
read from input compare exactly against an integer capacity.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from .errors import StateValidationError


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Item:
    """
    A candidate item of one parcel line.

    Attributes
    ----------
    index : int
        Positive identifier, unique within its line.
    weight : Decimal
        Nonnegative weight (capacity consumption).
    currency : str
        Currency symbol the price was written with.
    price : Decimal
        Nonnegative value contribution if selected.
    """
    index: int
    weight: Decimal
    currency: str
    price: Decimal

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "weight", _as_decimal(self.weight))
        object.__setattr__(self, "price", _as_decimal(self.price))
        if self.index < 1:
            raise StateValidationError(f"Item[{self.index}] index must be >= 1.")
        if self.weight < 0:
            raise StateValidationError(f"Item[{self.index}] weight must be >= 0.")
        if not self.currency:
            raise StateValidationError(f"Item[{self.index}] currency must be non-empty.")
        if self.price < 0:
            raise StateValidationError(f"Item[{self.index}] price must be >= 0.")
