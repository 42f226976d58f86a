"""
Color Namer

Maps a hex or RGB color sample to the nearest name in a curated palette
(nearest neighbor by squared Euclidean distance in RGB space).

Usage:
    from product_vision.color_namer import hex_to_color_name

    hex_to_color_name("#1a1a1a")   # "Black"
    hex_colors_to_names(["#000080", "zzz"])   # ["Navy"]
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

UNKNOWN_COLOR = "Unknown"

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


@dataclass(frozen=True)
class ColorPaletteEntry:
    name: str
    rgb: tuple[int, int, int]


# =============================================================================
# PALETTE (order matters: the first entry wins an exact distance tie)
# =============================================================================

COLOR_PALETTE: tuple[ColorPaletteEntry, ...] = (
    # Blacks and grays
    ColorPaletteEntry("Black", (0, 0, 0)),
    ColorPaletteEntry("Charcoal", (54, 69, 79)),
    ColorPaletteEntry("Dark Gray", (64, 64, 64)),
    ColorPaletteEntry("Gray", (128, 128, 128)),
    ColorPaletteEntry("Light Gray", (211, 211, 211)),
    ColorPaletteEntry("Silver", (192, 192, 192)),
    ColorPaletteEntry("Slate Gray", (112, 128, 144)),
    # Whites and beiges
    ColorPaletteEntry("White", (255, 255, 255)),
    ColorPaletteEntry("Ivory", (255, 255, 240)),
    ColorPaletteEntry("Cream", (255, 253, 208)),
    ColorPaletteEntry("Beige", (245, 245, 220)),
    ColorPaletteEntry("Tan", (210, 180, 140)),
    ColorPaletteEntry("Khaki", (240, 230, 140)),
    # Browns
    ColorPaletteEntry("Brown", (165, 42, 42)),
    ColorPaletteEntry("Dark Brown", (101, 67, 33)),
    ColorPaletteEntry("Light Brown", (205, 133, 63)),
    ColorPaletteEntry("Chocolate", (123, 63, 0)),
    ColorPaletteEntry("Coffee", (111, 78, 55)),
    ColorPaletteEntry("Camel", (193, 154, 107)),
    # Reds
    ColorPaletteEntry("Red", (255, 0, 0)),
    ColorPaletteEntry("Dark Red", (139, 0, 0)),
    ColorPaletteEntry("Crimson", (220, 20, 60)),
    ColorPaletteEntry("Burgundy", (128, 0, 32)),
    ColorPaletteEntry("Maroon", (128, 0, 0)),
    ColorPaletteEntry("Scarlet", (255, 36, 0)),
    ColorPaletteEntry("Coral", (255, 127, 80)),
    # Oranges
    ColorPaletteEntry("Orange", (255, 165, 0)),
    ColorPaletteEntry("Dark Orange", (255, 140, 0)),
    ColorPaletteEntry("Burnt Orange", (204, 85, 0)),
    ColorPaletteEntry("Peach", (255, 229, 180)),
    # Yellows and metals
    ColorPaletteEntry("Yellow", (255, 255, 0)),
    ColorPaletteEntry("Gold", (255, 215, 0)),
    ColorPaletteEntry("Mustard", (255, 219, 88)),
    ColorPaletteEntry("Amber", (255, 191, 0)),
    ColorPaletteEntry("Bronze", (205, 127, 50)),
    ColorPaletteEntry("Copper", (184, 115, 51)),
    # Greens
    ColorPaletteEntry("Green", (0, 128, 0)),
    ColorPaletteEntry("Dark Green", (0, 100, 0)),
    ColorPaletteEntry("Forest Green", (34, 139, 34)),
    ColorPaletteEntry("Olive", (128, 128, 0)),
    ColorPaletteEntry("Lime", (0, 255, 0)),
    ColorPaletteEntry("Mint", (152, 251, 152)),
    ColorPaletteEntry("Sage", (135, 174, 115)),
    ColorPaletteEntry("Emerald", (80, 200, 120)),
    # Blues
    ColorPaletteEntry("Blue", (0, 0, 255)),
    ColorPaletteEntry("Navy", (0, 0, 128)),
    ColorPaletteEntry("Dark Blue", (0, 0, 139)),
    ColorPaletteEntry("Royal Blue", (65, 105, 225)),
    ColorPaletteEntry("Sky Blue", (135, 206, 235)),
    ColorPaletteEntry("Light Blue", (173, 216, 230)),
    ColorPaletteEntry("Teal", (0, 128, 128)),
    ColorPaletteEntry("Turquoise", (64, 224, 208)),
    ColorPaletteEntry("Cyan", (0, 255, 255)),
    # Purples
    ColorPaletteEntry("Purple", (128, 0, 128)),
    ColorPaletteEntry("Dark Purple", (75, 0, 130)),
    ColorPaletteEntry("Lavender", (230, 230, 250)),
    ColorPaletteEntry("Violet", (138, 43, 226)),
    ColorPaletteEntry("Plum", (221, 160, 221)),
    # Pinks
    ColorPaletteEntry("Pink", (255, 192, 203)),
    ColorPaletteEntry("Hot Pink", (255, 105, 180)),
    ColorPaletteEntry("Rose", (255, 0, 127)),
    ColorPaletteEntry("Salmon", (250, 128, 114)),
    ColorPaletteEntry("Blush", (222, 93, 131)),
    # Specials
    ColorPaletteEntry("Indigo", (75, 0, 130)),
    ColorPaletteEntry("Magenta", (255, 0, 255)),
)


def hex_to_rgb(hex_color: Optional[str]) -> Optional[tuple[int, int, int]]:
    """Parse ``#rgb`` / ``#rrggbb`` (leading ``#`` optional). None when invalid."""
    if not hex_color or not isinstance(hex_color, str):
        return None

    clean = hex_color.strip().lstrip("#")
    if not _HEX_RE.match(clean):
        return None

    if len(clean) == 3:
        clean = "".join(ch * 2 for ch in clean)
    if len(clean) != 6:
        return None

    return (int(clean[0:2], 16), int(clean[2:4], 16), int(clean[4:6], 16))


def rgb_to_hex(red: float, green: float, blue: float) -> str:
    """Format RGB channels (rounded, clamped) as a lower-case ``#rrggbb`` string."""
    channels = (max(0, min(255, round(c or 0))) for c in (red, green, blue))
    return "#" + "".join(f"{c:02x}" for c in channels)


def _distance_sq(a: tuple[int, int, int], b: tuple[int, int, int]) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


def rgb_to_color_name(red: int, green: int, blue: int) -> str:
    """Name of the palette entry closest to the given RGB color."""
    sample = (int(red), int(green), int(blue))
    best_name = UNKNOWN_COLOR
    best_distance = None
    for entry in COLOR_PALETTE:
        distance = _distance_sq(sample, entry.rgb)
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_name = entry.name
    return best_name


def hex_to_color_name(hex_color: Optional[str]) -> str:
    """Readable color name for a hex code, or ``"Unknown"`` if unparsable."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return UNKNOWN_COLOR
    return rgb_to_color_name(*rgb)


def hex_colors_to_names(hex_colors: Iterable[str]) -> list[str]:
    """Batch variant; unparsable inputs are dropped, so the output may be shorter."""
    names = (hex_to_color_name(h) for h in hex_colors)
    return [name for name in names if name != UNKNOWN_COLOR]
