# -*- coding: utf-8 -*-
"""
Parcel model: one line's capacity plus its candidate items.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import StateValidationError
from .items import Item

# Chosen item indices, ascending.
Selection = Tuple[int, ...]


@dataclass(frozen=True)
class Parcel:
    """
    Immutable input of a single selection.

    Attributes
    ----------
    capacity : int
        Maximum total weight the selection may carry.
    items : tuple[Item, ...]
        Candidate items in the order the selector will consider them.
    """
    capacity: int
    items: Tuple[Item, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.capacity < 0:
            raise StateValidationError("Parcel.capacity must be >= 0.")

        seen: set[int] = set()
        for it in self.items:
            if it.index in seen:
                raise StateValidationError(f"Duplicate Item.index: {it.index}")
            seen.add(it.index)
