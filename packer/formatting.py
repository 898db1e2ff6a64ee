# -*- coding: utf-8 -*-
"""
Output rendering for selections.
"""

from __future__ import annotations

from packer.business_objects.parcels import Selection

EMPTY_SELECTION = "-"


def format_selection(selection: Selection) -> str:
    """
    Render a selection as ascending, comma-separated indices (e.g. "2,7").
    An empty selection renders as "-".
    """
    if not selection:
        return EMPTY_SELECTION
    return ",".join(str(i) for i in sorted(selection))
