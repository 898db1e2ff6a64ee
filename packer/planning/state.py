# -*- coding: utf-8 -*-
"""
Run-time state for one greedy selection.

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.parcels.Parcel
- RuntimeParcel below exists only while a single line is being packed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal

from packer.business_objects.items import Item
from packer.business_objects.parcels import Parcel


@dataclass
class RuntimeParcel:
    """
    Mutable parcel used during selection.

    Attributes
    ----------
    capacity : int
        Capacity limit (copied from the Parcel).
    loaded : Decimal
        Accumulated weight of the items placed so far.
    """
    capacity: int
    loaded: Decimal = field(default=Decimal(0), init=False)

    @classmethod
    def from_parcel(cls, parcel: Parcel) -> "RuntimeParcel":
        return cls(capacity=parcel.capacity)

    def can_fit(self, item: Item) -> bool:
        """Check if item weight fits on top of the current load."""
        return self.loaded + item.weight <= self.capacity

    def place(self, item: Item) -> bool:
        """
        Attempt to place the item. Returns True if committed, False otherwise.
        No overfill is allowed.
        """
        if self.can_fit(item):
            self.loaded += item.weight
            return True
        return False
