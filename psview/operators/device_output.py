# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from ..core import types as ps

logger = logging.getLogger(__name__)


def showpage(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    - **showpage** -


    transmits the current page to the output device. The display list built since
    the previous **showpage** becomes a completed page, and the graphics state is
    reinitialized for the next page.

    **Errors**:     none
    **See Also**:   **fill**, **stroke**
    """

    page = gfx.show_page()
    logger.debug("page %d completed with %d elements", len(gfx.pages), len(page))
