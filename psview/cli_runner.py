# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview execution logic.

Runs one program file through an interpreter and hands the completed pages
to the PNG device.
"""

import logging
import os

from .cli_args import get_output_base_name
from .core.context_init import init_system_params
from .core.interpreter import Interpreter

logger = logging.getLogger(__name__)


def _output_pages(interp, args, system_params) -> None:
    gfx = interp.graphics
    pages = list(gfx.pages)

    # a program that paints without a final showpage still has a page to show
    pending = gfx.pending_page()
    if pending is not None:
        pages.append(pending)

    if not pages:
        print("psview: no pages to render.")
        return

    # pycairo is only needed once there is output to write
    from .devices.png import png

    resolution = system_params["Resolution"]
    output_dir = os.path.dirname(args.outputfile) or system_params["OutputDirectory"]
    os.makedirs(output_dir, exist_ok=True)

    if len(pages) == 1:
        png.write_png(pages[0], args.outputfile, resolution)
        return

    base_name = get_output_base_name(args.outputfile, args.inputfile)
    png.write_pages(pages, output_dir, base_name, resolution)


def run(args, parser) -> int:
    """
    Execute the program named by ``--file``.

    Returns:
        Exit code: 1 when the file is missing or unreadable, 0 otherwise,
        including when the program itself stops on an error.
    """

    if not args.inputfile:
        print("Please provide at least one input file!")
        parser.print_usage()
        return 1

    try:
        with open(args.inputfile, "rb") as fin:
            program = fin.read()
    except OSError as e:
        print(f"Failed to open the specified file! ({e})")
        parser.print_usage()
        return 1

    system_params = init_system_params()
    if args.resolution is not None:
        system_params["Resolution"] = args.resolution

    interp = Interpreter(system_params, graphics=True)
    if not interp.load(program):
        logger.info("%s stopped: %s", args.inputfile, interp.error)

    if args.outputfile:
        _output_pages(interp, args, system_params)

    return 0
