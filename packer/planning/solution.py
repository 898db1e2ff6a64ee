# -*- coding: utf-8 -*-
"""
Solution and decision models for packing results.

These data classes define the shape of outputs produced by the greedy solver
and consumed by the formatting/metrics layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from packer.business_objects.parcels import Selection


@dataclass(frozen=True)
class PackingDecision:
    """
    Outcome of considering a single item.

    Attributes
    ----------
    index : int
        The item acted upon.
    included : bool
        Whether the item was placed in the parcel.
    loaded_after : Decimal
        Parcel load after the decision.
    reason : str | None
        Optional short label (e.g., "placed", "over_capacity").
    """
    index: int
    included: bool
    loaded_after: Decimal
    reason: Optional[str] = None


@dataclass(frozen=True)
class Solution:
    """
    Aggregated results of packing one parcel.

    Attributes
    ----------
    selection : tuple[int, ...]
        Chosen item indices, ascending.
    total_weight : Decimal
        Sum of weights of the chosen items.
    total_price : Decimal
        Sum of prices of the chosen items.
    decisions : tuple[PackingDecision, ...]
        One decision per considered item, in consideration order.
    """
    selection: Selection
    total_weight: Decimal
    total_price: Decimal
    decisions: Tuple[PackingDecision, ...] = ()
