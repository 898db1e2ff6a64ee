# -*- coding: utf-8 -*-
"""
I/O helpers for loading packer input files.

The input is UTF-8 text with one parcel per line:
    <capacity> : (<index>,<weight>,<currency><price>) ...
"""

from __future__ import annotations
import logging
from typing import List

from packer.business_objects.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    """
    Load all lines of a text file, without line terminators.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"Error when reading '{path}': {e}") from e

    logger.info("Read %d lines from %s", len(lines), path)
    return lines
