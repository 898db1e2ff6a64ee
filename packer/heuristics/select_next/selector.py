# -*- coding: utf-8 -*-
"""
Select Next: the order in which the greedy pass considers items.

Direction rules (fixed):
  - price  -> descending (higher first)
  - weight -> ascending (lighter first), only to break price ties

Sorting is stable, so items that tie on both keys keep their file order.
"""

from __future__ import annotations
from typing import Iterable, List, Tuple

from packer.business_objects.items import Item


def _sort_key_for_item(item: Item) -> Tuple:
    # Python sorts ascending; price is negated for "descending".
    return (-item.price, item.weight)


def select_next(items: Iterable[Item]) -> List[Item]:
    """
    Return the items sorted by price descending, then weight ascending.

    No mutation occurs here; a new list is returned.
    """
    return sorted(items, key=_sort_key_for_item)
