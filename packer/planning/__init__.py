# -*- coding: utf-8 -*-
"""
Planning layer public API for the packer pipeline.

This module exposes the planning-time data contracts:
  - RuntimeParcel state model
  - Policy configuration
  - Solution and PackingDecision models

The greedy solver is intentionally not exported here; import it from
`packer.planning.solvers.greedy` when needed.
"""

from .state import RuntimeParcel
from .policy import Policy, DEFAULT_POLICY, MAX_ITEMS_PER_LINE
from .solution import PackingDecision, Solution

__all__ = [
    "RuntimeParcel",
    "Policy",
    "DEFAULT_POLICY",
    "MAX_ITEMS_PER_LINE",
    "PackingDecision",
    "Solution",
]
