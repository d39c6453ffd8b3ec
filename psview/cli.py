# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import sys

from .cli_args import MAX_RESOLUTION, MIN_RESOLUTION, build_argument_parser
from .cli_runner import run


def main(argv=None) -> int:
    """
    Main entry point for the psview command.

    Returns:
        Exit code: 0 for success, 1 for error
    """

    parser = build_argument_parser()
    args = parser.parse_args(argv)

    # Validate resolution range
    if args.resolution is not None:
        if args.resolution < MIN_RESOLUTION or args.resolution > MAX_RESOLUTION:
            print(f"psview: Resolution must be between {MIN_RESOLUTION} and {MAX_RESOLUTION} DPI.")
            return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run(args, parser)


if __name__ == "__main__":
    sys.exit(main())
