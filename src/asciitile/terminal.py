import os
import sys

from PIL import Image

from asciitile.tiling import validate_resolution


def terminal_columns() -> int | None:
    """Width of the attached terminal, or None when stdout is not a tty."""
    if not sys.stdout.isatty():
        return None
    return os.get_terminal_size().columns


def fit_to_terminal(image: Image.Image, resolution: int, columns: int | None) -> int:
    """Halve resolution until it fits in `columns` and still tiles the (padded) image.

    Returns the original resolution when there is no terminal to fit or no
    smaller value works.
    """
    if columns is None:
        return resolution
    candidate = resolution
    while candidate > 1 and (candidate > columns or not validate_resolution(image, candidate)):
        candidate //= 2
    if candidate <= columns and validate_resolution(image, candidate):
        return candidate
    return resolution
