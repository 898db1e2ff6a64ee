# -*- coding: utf-8 -*-
"""
Parsing layer public API: turns input lines into Parcels.
"""

from .line_parser import parse_line

__all__ = ["parse_line"]
