# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PNG Output Device

This device renders display lists to PNG image files using Cairo.
It uses the shared cairo_renderer module for display list rendering.
"""

import logging
import math
import os
from typing import List

import cairo

from ...core import types as ps
from ..common.cairo_renderer import render_display_list

logger = logging.getLogger(__name__)

# Anti-aliasing mode for Cairo rendering.
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY


def write_png(display_list: ps.DisplayList, output_file: str, resolution: float = ps.PPI) -> None:
    """
    Render one page to a PNG file.

    Args:
        display_list: the page to render; its width and height are in points
        output_file: path of the PNG file to write
        resolution: output resolution in dots per inch
    """
    scale = resolution / ps.PPI

    WIDTH = max(1, int(math.ceil(display_list.width * scale)))
    HEIGHT = max(1, int(math.ceil(display_list.height * scale)))

    # Create Cairo surface and context
    surface = cairo.ImageSurface(cairo.FORMAT_RGB24, WIDTH, HEIGHT)
    cc = cairo.Context(surface)
    cc.identity_matrix()

    # Fill in the white background
    cc.set_source_rgb(1.0, 1.0, 1.0)
    cc.rectangle(0, 0, WIDTH, HEIGHT)
    cc.fill()

    cc.set_antialias(ANTIALIAS_MODE)

    # Render display list using shared Cairo renderer
    render_display_list(display_list, cc, display_list.height, scale)

    surface.write_to_png(output_file)
    logger.info("wrote %s (%dx%d)", output_file, WIDTH, HEIGHT)


def write_pages(pages: List[ps.DisplayList], output_dir: str, base_name: str,
                resolution: float = ps.PPI) -> List[str]:
    """
    Write every page as ``<base_name>-NNNN.png`` in ``output_dir``, numbering from 1.

    Returns the paths written.
    """
    written = []
    for page_num, page in enumerate(pages, start=1):
        output_file = os.path.join(output_dir, f"{base_name}-{page_num:04d}.png")
        write_png(page, output_file, resolution)
        written.append(output_file)
    return written
