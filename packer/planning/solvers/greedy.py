# -*- coding: utf-8 -*-
"""
Greedy single-pass solver.

The parcel's items arrive already sorted (price descending, lighter first on
ties; see heuristics.select_next). Each item is considered once, left to right:
  - if it fits on top of the current load it is placed,
  - otherwise it is skipped and never reconsidered.

This is a heuristic. It does not search for the maximum-value subset; a
lighter, cheaper item later in the queue can lose out to an earlier pricier
one even when swapping them would raise the total.
"""

from __future__ import annotations
import logging
from decimal import Decimal
from typing import List

from packer.business_objects.items import Item
from packer.business_objects.parcels import Parcel, Selection
from packer.planning import RuntimeParcel, PackingDecision, Solution

logger = logging.getLogger(__name__)


def run_greedy(parcel: Parcel) -> Solution:
    """
    Pack `parcel` greedily and return the full Solution.

    Parameters
    ----------
    parcel : Parcel
        Validated parcel whose items are in consideration order.

    Returns
    -------
    Solution
        Selection (ascending indices), totals and per-item decisions.
    """
    rt = RuntimeParcel.from_parcel(parcel)

    chosen: List[Item] = []
    decisions: List[PackingDecision] = []
    for it in parcel.items:
        placed = rt.place(it)
        if placed:
            chosen.append(it)
        decisions.append(
            PackingDecision(
                index=it.index,
                included=placed,
                loaded_after=rt.loaded,
                reason="placed" if placed else "over_capacity",
            )
        )
        logger.debug(
            "item %d (weight=%.2f, price=%s%.2f): %s, load %.2f/%d",
            it.index, it.weight, it.currency, it.price,
            "placed" if placed else "skipped", rt.loaded, rt.capacity,
        )

    selection: Selection = tuple(sorted(it.index for it in chosen))
    return Solution(
        selection=selection,
        total_weight=sum((it.weight for it in chosen), Decimal(0)),
        total_price=sum((it.price for it in chosen), Decimal(0)),
        decisions=tuple(decisions),
    )


def select_items(parcel: Parcel) -> Selection:
    """Return the ascending indices of the items the greedy pass includes."""
    return run_greedy(parcel).selection
