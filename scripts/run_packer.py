#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the greedy packer on an input file and print one selection per line,
logging per-line KPIs along the way.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_packer.py
"""

from __future__ import annotations
import logging
from typing import List

# ====== CONFIGURATION ======
INPUT_PATH = "tests/resources/example_input"

LOG_LEVEL = logging.INFO
# ============================

from packer.formatting import format_selection
from packer.parsing.line_parser import parse_line
from packer.planning import Policy
from packer.planning.solvers.greedy import run_greedy
from packer.quality_metrics.core import compute_parcel_metrics
from packer.utils.read_lines import read_lines

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

    policy = Policy()
    lines: List[str] = [ln for ln in read_lines(INPUT_PATH) if ln.strip()]

    outputs: List[str] = []
    for lineno, line in enumerate(lines, start=1):
        parcel = parse_line(line, policy)
        solution = run_greedy(parcel)
        metrics = compute_parcel_metrics(parcel, solution)
        logger.info(
            "line %d: price %.2f of %.2f, weight %.2f/%d (%.1f%%), %d/%d items",
            lineno,
            metrics["Total Price"], metrics["Total Possible Price"],
            metrics["Total Weight"], parcel.capacity, metrics["Utilization"],
            int(metrics["Selected Items"]), int(metrics["Total Items"]),
        )
        outputs.append(format_selection(solution.selection))

    print("\n=== Selections ===")
    print("\n".join(outputs))


if __name__ == "__main__":
    main()
