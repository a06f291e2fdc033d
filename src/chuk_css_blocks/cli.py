#!/usr/bin/env python3
"""
Command line entry point.

Loads a block definition file and prints the debug listing of each
block: every class and state with its authored and generated names.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from chuk_css_blocks.errors import BlockError
from chuk_css_blocks.loader import BlockLoader
from chuk_css_blocks.options import OptionsReader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="CHUK CSS Blocks debug listing")
    parser.add_argument("file", type=Path, help="Block definition file (YAML)")
    parser.add_argument(
        "--options",
        type=Path,
        default=None,
        help="Options file (YAML)",
    )
    parser.add_argument(
        "--output-mode",
        default=None,
        help="Naming convention, overrides the options file (default: BEM)",
    )
    parser.add_argument(
        "--block",
        default=None,
        help="Only list this block",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        opts = OptionsReader.from_yaml(args.options) if args.options else OptionsReader()
        if args.output_mode:
            opts = OptionsReader.from_dict({"output_mode": args.output_mode})

        blocks = BlockLoader().load_file(args.file)
        if args.block:
            blocks = [b for b in blocks if b.name == args.block]
            if not blocks:
                logger.error(f"Block not found: {args.block}")
                return 1

        for block in blocks:
            for line in block.debug(opts):
                print(line)
    except (BlockError, OSError, yaml.YAMLError):
        logger.exception("Failed to list blocks")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
