# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    PackerError,
    StateValidationError,
    MalformedLineError,
    InvalidCapacityError,
    InvalidItemError,
    TooManyItemsError,
    SourceUnavailableError,
)
from .items import Item
from .parcels import Parcel, Selection

__all__ = [
    # errors
    "PackerError",
    "StateValidationError",
    "MalformedLineError",
    "InvalidCapacityError",
    "InvalidItemError",
    "TooManyItemsError",
    "SourceUnavailableError",
    # core models
    "Item",
    "Parcel",
    "Selection",
]
