from __future__ import annotations

import os

from . import constants
from .carousel import CarouselState


def build_status_text(state: CarouselState) -> str:
    """Position and file name of the current item, e.g. "(2/5)  drawing.svg"."""
    item = state.current_item
    if item is None:
        return constants.EMPTY_PLACEHOLDER
    return f"({state.cursor + 1}/{state.count})  {os.path.basename(item)}"


def build_help_text() -> str:
    shift = constants.SHIFT_LABEL
    l_arr, l_let = constants.LEFT_ARROW_LABEL, constants.LEFT_LETTER_LABEL
    r_arr, r_let = constants.RIGHT_ARROW_LABEL, constants.RIGHT_LETTER_LABEL
    parts = [
        f"{shift} + {l_arr}/{l_let} - Start",
        f"{l_arr}/{l_let} - Left",
        f"{r_arr}/{r_let} - Right",
        f"{shift} + {r_arr}/{r_let} - End",
        f"{constants.ESC_LABEL}/{constants.QUIT_LETTER_LABEL} - Quit",
    ]
    return " | ".join(parts)
