"""Theme colors and color utilities for the UI."""

import re


class BoardColors:
    """Light theme palette for the menu and playfield."""

    BG_TOP = "#fdf6ee"
    BG_BOTTOM = "#eee4da"

    PRIMARY = "#f2b179"
    PRIMARY_DARK = "#c98a52"
    DESTRUCTIVE = "#d9534f"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    # Tiles
    TILE_HIDDEN = "#bbada0"
    TILE_REVEALED_EMPTY = "#eee4da"
    TILE_REVEALED_FILLED = "#000000"
    TILE_MARK = "#ffffff"

    CLUE_BG = "#f9f6f2"
    TEXT_PRIMARY = "#776e65"
    TEXT_MUTED = "#a39b92"
    TEXT_ERROR = "#c0392b"


_HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two #RRGGBB colors, t=0 gives *a* and t=1 gives *b*. Anything else returns *a* unchanged."""
    if not (_HEX_COLOR.fullmatch(a) and _HEX_COLOR.fullmatch(b)):
        return a
    t = max(0.0, min(1.0, t))
    mixed = []
    for i in (1, 3, 5):
        start, end = int(a[i:i + 2], 16), int(b[i:i + 2], 16)
        mixed.append(int(start + (end - start) * t))
    return "#" + "".join(f"{channel:02X}" for channel in mixed)
