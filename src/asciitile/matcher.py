import logging
import math

from asciitile.errors import EmptyPalette, PaletteNotEqualized
from asciitile.palette import Palette

logger = logging.getLogger(__name__)


class CharMatcher:
    """Maps a brightness in [0, 1] to the palette member whose normalized brightness is closest.

    Matching reads the normalized values from the palette's most recent
    equalize(). Members added since then are not candidates until the next
    equalize(). Results are cached by exact brightness value; the cache is
    dropped whenever the palette reports a change.
    """

    def __init__(self, palette: Palette):
        self.palette = palette
        self._cache: dict[float, str] = {}
        palette.subscribe(self.clear_cache)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def close(self) -> None:
        """Stop listening to the palette; the matcher must not be used afterwards."""
        self.palette.unsubscribe(self.clear_cache)

    def clear_cache(self) -> None:
        if self._cache:
            logger.debug("Dropping %d cached matches", len(self._cache))
        self._cache.clear()

    def match(self, brightness: float) -> str:
        if not math.isfinite(brightness):
            raise ValueError(f"Brightness must be a finite number: {brightness!r}")
        cached = self._cache.get(brightness)
        if cached is not None:
            return cached
        if self.palette.is_empty():
            raise EmptyPalette()

        candidates = self.palette.normalized_items()
        if not candidates:
            raise PaletteNotEqualized()

        best_char, value = candidates[0]
        best_dist = abs(value - brightness)
        for char, value in candidates[1:]:
            dist = abs(value - brightness)
            if dist < best_dist or (dist == best_dist and ord(char) < ord(best_char)):
                best_dist = dist
                best_char = char

        self._cache[brightness] = best_char
        return best_char
