# -*- coding: utf-8 -*-
"""
Public exports for the quality metrics layer.
"""

from .core import compute_parcel_metrics

__all__ = ["compute_parcel_metrics"]
