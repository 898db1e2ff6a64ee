# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute per-line KPIs for packing runs.
- No side effects
- Works off a Parcel and its Solution

Public API:
  - compute_parcel_metrics(parcel, solution) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Dict

from packer.business_objects.parcels import Parcel
from packer.planning.solution import Solution


def _safe_pct(num: float, den: float) -> float:
    if den <= 0.0:
        return 0.0
    return 100.0 * num / den


def compute_parcel_metrics(parcel: Parcel, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Price": ...,
        "Total Weight": ...,
        "Capacity": ...,
        "Utilization": ...,      # percent (0..100) of capacity used
        "Selected Items": ...,
        "Total Items": ...,
        "Selection Rate": ...,   # percent (0..100) of items selected
        "Total Possible Price": ...
      }
    """
    total_items = len(parcel.items)
    selected = len(solution.selection)
    return {
        "Total Price": float(solution.total_price),
        "Total Weight": float(solution.total_weight),
        "Capacity": float(parcel.capacity),
        "Utilization": _safe_pct(float(solution.total_weight), float(parcel.capacity)),
        "Selected Items": float(selected),
        "Total Items": float(total_items),
        "Selection Rate": _safe_pct(selected, float(total_items)),
        "Total Possible Price": float(sum(it.price for it in parcel.items)),
    }
