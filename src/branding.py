from __future__ import annotations

import shutil
from typing import Literal

# --------------------------------------------------
# Layout constants
# --------------------------------------------------

DEFAULT_WIDTH = 72
LOG_GUTTER_WIDTH = 10  # "INFO      " column rendered by RichHandler

Width = int | Literal["auto"]


def _resolve_width(width: Width) -> int:
    if width == "auto":
        try:
            cols = shutil.get_terminal_size().columns
        except OSError:
            cols = DEFAULT_WIDTH
        return max(DEFAULT_WIDTH, cols - LOG_GUTTER_WIDTH)
    return max(DEFAULT_WIDTH, int(width))


# --------------------------------------------------
# Banner
# --------------------------------------------------

LIVELISTARR_BANNER = r"""
 _    _         _ _     _
| |  (_)_ _____| (_)___| |_ __ _ _ _ _ _
| |__| \ V / -_) | (_-<  _/ _` | '_| '_|
|____|_|\_/\___|_|_/__/\__\__,_|_| |_|
"""


# --------------------------------------------------
# Headers
# --------------------------------------------------


def LIVELISTARR_HEADER(
    title: str,
    *,
    width: Width = DEFAULT_WIDTH,
    motif: str = "•((●))•",
) -> str:
    title = title.strip()
    inner = max(_resolve_width(width) - 2, len(title) + 4)

    filler = max(0, inner - len(motif))
    left = filler // 2
    right = filler - left

    top = f"╔{'═' * left}{motif}{'═' * right}╗"
    mid = f"│{title.center(inner)}│"
    bot = f"╚{'═' * inner}╝"

    return f"\n{top}\n{mid}\n{bot}\n"
