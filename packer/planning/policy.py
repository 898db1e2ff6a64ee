# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the packer pipeline.

Parsing:
  - max_items: upper bound on items per line.

Run control:
  - max_workers: threads used to process lines; None means sequential.

Item order (price descending, lighter first on ties) and the capacity check
are fixed; see heuristics.select_next.selector and planning.state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

MAX_ITEMS_PER_LINE: int = 15


@dataclass(frozen=True)
class Policy:
    """
    Packing knobs (pure data holder).

    Attributes
    ----------
    max_items : int
        Lines with more item groups than this are rejected.
    max_workers : int | None
        Thread count for per-line processing.
    """
    # Parsing
    max_items: int = MAX_ITEMS_PER_LINE

    # Run control
    max_workers: Optional[int] = None


DEFAULT_POLICY = Policy()
