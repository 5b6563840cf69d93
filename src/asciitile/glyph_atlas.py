import logging
import os
import subprocess
import threading
from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from asciitile.charsets import check_printable

logger = logging.getLogger(__name__)

GLYPH_RESOLUTION = 16

# Pen position as fractions of GLYPH_RESOLUTION: left edge and text baseline
X_OFFSET_FACTOR = 0.2
Y_OFFSET_FACTOR = 0.75

FONT_ENV_VAR = "ASCIITILE_FONT"

FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/msttcorefonts/Courier_New.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/cour.ttf",
    "/Library/Fonts/Courier New.ttf",
    "C:/Windows/Fonts/cour.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]

_brightness: dict[str, float] = {}
_brightness_lock = threading.Lock()


def _fc_match_monospace() -> str | None:
    """Ask fontconfig for the system's monospace font."""
    try:
        result = subprocess.run(
            ["fc-match", "-f", "%{file}", "monospace"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        return None
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


def find_reference_font() -> str | None:
    """Locate the font file glyphs are measured with, or None for Pillow's bundled font."""
    override = os.environ.get(FONT_ENV_VAR)
    if override:
        if not Path(override).is_file():
            raise FileNotFoundError(f"{FONT_ENV_VAR} points to a missing file: {override}")
        return override
    for path in FONT_CANDIDATES:
        if Path(path).is_file():
            return path
    return _fc_match_monospace()


@lru_cache(maxsize=None)
def reference_font() -> ImageFont.FreeTypeFont:
    path = find_reference_font()
    if path is None:
        logger.debug("No monospace font found, using Pillow's default font")
        return ImageFont.load_default(size=GLYPH_RESOLUTION)
    logger.debug("Measuring glyphs with %s", path)
    return ImageFont.truetype(path, GLYPH_RESOLUTION)


def render_glyph(char: str) -> np.ndarray:
    """Rasterize a character into a GLYPH_RESOLUTION square boolean bitmap, True where inked."""
    check_printable(char)
    img = Image.new("1", (GLYPH_RESOLUTION, GLYPH_RESOLUTION), 0)
    draw = ImageDraw.Draw(img)
    x = round(GLYPH_RESOLUTION * X_OFFSET_FACTOR)
    y = round(GLYPH_RESOLUTION * Y_OFFSET_FACTOR)
    draw.text((x, y), char, fill=1, font=reference_font(), anchor="ls")
    return np.asarray(img, dtype=bool)


def brightness_of(char: str) -> float:
    """Fraction of inked pixels in the character's bitmap.

    Computed once per character for the life of the process. Raises
    OutOfRangeCharacter for anything outside the printable ASCII range.
    """
    check_printable(char)
    value = _brightness.get(char)
    if value is not None:
        return value
    with _brightness_lock:
        # Another thread may have rendered it while we waited
        value = _brightness.get(char)
        if value is None:
            bitmap = render_glyph(char)
            value = float(bitmap.sum()) / bitmap.size
            _brightness[char] = value
    return value
