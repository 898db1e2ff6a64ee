# -*- coding: utf-8 -*-
"""
Greedy parcel packer.

Reads lines of the form
    <capacity> : (<index>,<weight>,<currency><price>) ...
and, for each, picks items by descending price until the capacity is used up.
"""

from .business_objects import (
    PackerError,
    StateValidationError,
    MalformedLineError,
    InvalidCapacityError,
    InvalidItemError,
    TooManyItemsError,
    SourceUnavailableError,
    Item,
    Parcel,
    Selection,
)
from .planning import Policy, Solution
from .parsing.line_parser import parse_line
from .planning.solvers.greedy import select_items, run_greedy
from .formatting import format_selection
from .api import pack, pack_lines, pack_line

__all__ = [
    "PackerError",
    "StateValidationError",
    "MalformedLineError",
    "InvalidCapacityError",
    "InvalidItemError",
    "TooManyItemsError",
    "SourceUnavailableError",
    "Item",
    "Parcel",
    "Selection",
    "Policy",
    "Solution",
    "parse_line",
    "select_items",
    "run_greedy",
    "format_selection",
    "pack",
    "pack_lines",
    "pack_line",
]
