# -*- coding: utf-8 -*-
"""
Common exceptions for the packer.

Every failure surfaces as a PackerError so callers can treat the whole run
as failed with a single except clause.
"""


class PackerError(Exception):
    """Raised when processing an input source fails."""


class StateValidationError(PackerError, ValueError):
    """Raised when an in-memory model violates domain constraints."""


class MalformedLineError(PackerError):
    """Raised when a line does not split into '<capacity> : <items>'."""


class InvalidCapacityError(PackerError):
    """Raised when the capacity part is not a non-negative integer."""


class InvalidItemError(PackerError):
    """Raised when an item group cannot be turned into an Item."""


class TooManyItemsError(PackerError):
    """Raised when a line carries more items than the policy allows."""


class SourceUnavailableError(PackerError):
    """Raised when the input file cannot be opened or read."""
