from dataclasses import dataclass

import numpy as np
from PIL import Image

from asciitile.errors import InvalidResolution

BACKGROUND = (255, 255, 255)
MAX_INTENSITY = 255

# Rec. 709 luma weights for R, G, B in ten-thousandths; integer sums keep white at exactly 1.0
LUMA_WEIGHTS = np.array([2126, 7152, 722], dtype=np.int64)
LUMA_SCALE = 10000


@dataclass(frozen=True, eq=False)
class Tile:
    top: int
    left: int
    edge: int
    pixels: np.ndarray  # (edge, edge, 3) view into the padded image


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n."""
    if n < 1:
        raise ValueError(f"Dimension must be positive: {n}")
    return 1 << (n - 1).bit_length()


def pad_to_power_of_two(image: Image.Image) -> Image.Image:
    """Centre the image on a white canvas whose sides are powers of two.

    When the padding is odd the extra pixel goes on the right or bottom.
    Returns a new image; the input is left untouched.
    """
    image = image.convert("RGB")
    width, height = image.size
    new_width = next_power_of_two(width)
    new_height = next_power_of_two(height)
    if (new_width, new_height) == (width, height):
        return image.copy()
    padded = Image.new("RGB", (new_width, new_height), BACKGROUND)
    padded.paste(image, ((new_width - width) // 2, (new_height - height) // 2))
    return padded


def validate_resolution(image: Image.Image, resolution: int) -> bool:
    """Whether the image splits into exactly `resolution` columns of whole square tiles."""
    width, height = image.size
    if not isinstance(resolution, int) or isinstance(resolution, bool):
        return False
    if resolution < max(1, width // height) or resolution > width:
        return False
    if width % resolution:
        return False
    edge = width // resolution
    return height % edge == 0


def split_into_tiles(image: Image.Image, resolution: int) -> list[list[Tile]]:
    """Partition the image into a row-major grid of square tiles, `resolution` per row."""
    if not validate_resolution(image, resolution):
        raise InvalidResolution(resolution, image.width, image.height)
    arr = np.asarray(image.convert("RGB"))
    edge = image.width // resolution
    rows = image.height // edge
    grid = []
    for r in range(rows):
        top = r * edge
        row = []
        for c in range(resolution):
            left = c * edge
            row.append(Tile(top=top, left=left, edge=edge, pixels=arr[top : top + edge, left : left + edge]))
        grid.append(row)
    return grid


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Per-pixel grey level of an (..., 3) RGB array, on the 0-255 scale."""
    return _weighted(pixels) / LUMA_SCALE


def tile_brightness(tile: Tile | np.ndarray) -> float:
    """Mean luminance of a tile scaled to [0, 1]."""
    pixels = tile.pixels if isinstance(tile, Tile) else tile
    weighted = _weighted(pixels)
    return int(weighted.sum()) / (LUMA_SCALE * MAX_INTENSITY * weighted.size)


def _weighted(pixels: np.ndarray) -> np.ndarray:
    return pixels.astype(np.int64) @ LUMA_WEIGHTS
