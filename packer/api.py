# -*- coding: utf-8 -*-
"""
File-level entry points: parse → select → format for every line.

Any failing line aborts the whole run; there is no partial output.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Tuple

from packer.business_objects.errors import PackerError
from packer.formatting import format_selection
from packer.parsing.line_parser import parse_line
from packer.planning.policy import Policy, DEFAULT_POLICY
from packer.planning.solvers.greedy import select_items
from packer.utils.read_lines import read_lines

logger = logging.getLogger(__name__)


def pack_line(line: str, policy: Policy = DEFAULT_POLICY) -> str:
    """Pack a single line and return its formatted selection."""
    return format_selection(select_items(parse_line(line, policy)))


def _pack_numbered(numbered: Tuple[int, str], policy: Policy) -> str:
    lineno, line = numbered
    try:
        return pack_line(line, policy)
    except PackerError as e:
        raise type(e)(f"line {lineno}: {e}") from e


def pack_lines(lines: Iterable[str], policy: Policy = DEFAULT_POLICY) -> str:
    """
    Pack every non-blank line and join the results with newlines.

    Lines keep their input order in the output even when processed by
    `policy.max_workers` threads.
    """
    numbered: List[Tuple[int, str]] = [
        (n, raw.rstrip("\r\n"))
        for n, raw in enumerate(lines, start=1)
        if raw.strip()
    ]

    if policy.max_workers and policy.max_workers > 1 and len(numbered) > 1:
        with ThreadPoolExecutor(max_workers=policy.max_workers) as pool:
            results = list(pool.map(lambda nl: _pack_numbered(nl, policy), numbered))
    else:
        results = [_pack_numbered(nl, policy) for nl in numbered]

    return "\n".join(results)


def pack(file_path: str, policy: Policy = DEFAULT_POLICY) -> str:
    """
    Read `file_path` and return one formatted selection per parcel line.

    Raises
    ------
    PackerError
        The file is unreadable (SourceUnavailableError) or any line is invalid.
    """
    logger.info("Packing %s", file_path)
    return pack_lines(read_lines(file_path), policy)
