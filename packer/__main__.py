# -*- coding: utf-8 -*-
"""
Command-line entry point.

Usage:
    python -m packer path/to/input [--workers N] [--verbose]
"""

from __future__ import annotations
import argparse
import logging
import sys

from packer.api import pack
from packer.business_objects.errors import PackerError
from packer.planning.policy import Policy

logger = logging.getLogger("packer")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Greedy parcel packer")
    parser.add_argument("path", help="input file, one parcel per line")
    parser.add_argument("--workers", type=int, default=None, help="threads used to process lines")
    parser.add_argument("--verbose", action="store_true", help="log per-item decisions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        output = pack(args.path, Policy(max_workers=args.workers))
    except PackerError as e:
        logger.error("Packing failed: %s", e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
