# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for psview.

Handles command-line argument definition and output file naming.
"""

from __future__ import annotations

import argparse
import os
from importlib import metadata

MIN_RESOLUTION = 36
MAX_RESOLUTION = 9600


def get_output_base_name(outputfile: str | None, inputfile: str | None) -> str:
    """
    Derive output base name from command-line arguments.

    Args:
        outputfile: The -o argument value (or None)
        inputfile: The --file argument value (or None)

    Returns:
        Base name for output files (without extension)
    """
    if outputfile:
        # Extract base name from -o argument (remove path and extension)
        base = os.path.basename(outputfile)
        return os.path.splitext(base)[0]
    elif inputfile:
        base = os.path.basename(inputfile)
        return os.path.splitext(base)[0]
    else:
        return "page"


def _get_version() -> str:
    """Read the installed psview version."""
    try:
        return metadata.version("psview")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the psview argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="psview",
        description="psview - A viewer for postscript files/programs.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"psview {_get_version()}"
    )
    parser.add_argument(
        "-f", "--file", dest="inputfile", default="", help="PostScript program to run"
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile",
        help="Render completed pages to PNG; multiple pages are numbered base-0001.png, base-0002.png, ..."
    )
    parser.add_argument(
        "-r", "--resolution", type=int,
        help="Set output resolution in DPI, 36 to 9600 (default: 72)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    return parser
