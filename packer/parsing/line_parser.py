# -*- coding: utf-8 -*-
"""
Line parser: turns one input line into a Parcel.

Line format:
    <capacity> : (<index>,<weight>,<currency><price>) (<index>,...) ...

Example:
    81 : (1,53.38,€45) (2,88.62,€98) (3,78.48,€3)

Text between item groups that does not match the item pattern is ignored.
The returned parcel's items are already in selection order
(price descending, lighter first on ties).
"""

from __future__ import annotations
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import List

from packer.business_objects import (
    Item,
    Parcel,
    StateValidationError,
    MalformedLineError,
    InvalidCapacityError,
    InvalidItemError,
    TooManyItemsError,
)
from packer.heuristics.select_next.selector import select_next
from packer.planning.policy import Policy, DEFAULT_POLICY

logger = logging.getLogger(__name__)

_CAPACITY_RE = re.compile(r"[0-9]+")
_ITEM_RE = re.compile(
    r"\s*\("
    r"(?P<index>[0-9]+),"
    r"(?P<weight>[0-9]+\.[0-9]+),"
    r"(?P<currency>[^\w\s(),.])"
    r"(?P<price>[0-9]+(?:\.[0-9]+)?)"
    r"\)"
)


def _parse_capacity(text: str, line: str) -> int:
    raw = text.strip()
    if not _CAPACITY_RE.fullmatch(raw):
        raise InvalidCapacityError(f"{line!r}: capacity {raw!r} is not a non-negative integer")
    return int(raw)


def _parse_item(match: re.Match, line: str) -> Item:
    group = match.group(0).strip()
    try:
        index = int(match.group("index"))
        weight = Decimal(match.group("weight"))
        price = Decimal(match.group("price"))
    except (ValueError, InvalidOperation) as e:
        raise InvalidItemError(f"{line!r}: item {group}: {e}") from e

    try:
        return Item(index=index, weight=weight, currency=match.group("currency"), price=price)
    except StateValidationError as e:
        raise InvalidItemError(f"{line!r}: item {group}: {e}") from e


def parse_line(line: str, policy: Policy = DEFAULT_POLICY) -> Parcel:
    """
    Parse one line into a Parcel whose items are sorted by price descending,
    lighter first on ties.

    Raises
    ------
    MalformedLineError
        The line does not contain exactly one ':'.
    InvalidCapacityError
        The left part is not a non-negative integer.
    InvalidItemError
        An item group has unusable fields or repeats an index.
    TooManyItemsError
        More than `policy.max_items` item groups were found.
    """
    parts = line.split(":")
    if len(parts) != 2:
        raise MalformedLineError(f"{line!r}: expected '<capacity> : <items>', found {len(parts) - 1} ':'")
    left, right = parts

    capacity = _parse_capacity(left, line)

    items: List[Item] = [_parse_item(m, line) for m in _ITEM_RE.finditer(right)]
    if len(items) > policy.max_items:
        raise TooManyItemsError(f"{line!r}: {len(items)} items exceed the limit of {policy.max_items}")

    try:
        parcel = Parcel(capacity=capacity, items=tuple(select_next(items)))
    except StateValidationError as e:
        raise InvalidItemError(f"{line!r}: {e}") from e

    logger.debug("Parsed parcel: capacity=%d, items=%d", parcel.capacity, len(parcel.items))
    return parcel
