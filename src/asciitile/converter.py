import logging
from pathlib import Path

from PIL import Image

from asciitile.errors import EmptyPalette, InvalidResolution
from asciitile.matcher import CharMatcher
from asciitile.palette import Palette
from asciitile.tiling import pad_to_power_of_two, split_into_tiles, tile_brightness, validate_resolution

logger = logging.getLogger(__name__)


def run(
    image: Image.Image,
    resolution: int,
    palette: Palette,
    matcher: CharMatcher | None = None,
) -> list[list[str]]:
    """Convert an image to a grid of characters, one per tile.

    Uses the palette's current normalized values; call palette.equalize()
    first if it has changed. Raises InvalidResolution or EmptyPalette before
    any tile is matched.
    """
    tiles = split_into_tiles(pad_to_power_of_two(image), resolution)
    if palette.is_empty():
        raise EmptyPalette()
    owned = matcher is None
    if owned:
        matcher = CharMatcher(palette)

    try:
        grid = [[matcher.match(tile_brightness(tile)) for tile in row] for row in tiles]
        logger.debug(
            "Rendered %dx%d tiles, %d distinct brightness values", len(grid[0]), len(grid), matcher.cache_size
        )
    finally:
        if owned:
            matcher.close()
    return grid


def image_to_ascii(
    image: Image.Image | str | Path,
    resolution: int,
    palette: Palette,
) -> list[list[str]]:
    """Load the image if given a path, equalize the palette, and run the conversion."""
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    padded = pad_to_power_of_two(image)
    if not validate_resolution(padded, resolution):
        raise InvalidResolution(resolution, padded.width, padded.height)
    if palette.is_empty():
        raise EmptyPalette()
    palette.equalize()
    return run(padded, resolution, palette)
