import logging
from collections.abc import Callable, Iterable, Iterator

from asciitile.charsets import check_printable
from asciitile.glyph_atlas import brightness_of

logger = logging.getLogger(__name__)


class Palette:
    """The set of characters available to the matcher.

    Keeps each member's raw glyph brightness and the running min/max over the
    active set. Normalized brightness is a snapshot taken by equalize(); it is
    not refreshed by add() or remove(). Subscribers are notified after every
    change to membership or to the normalized snapshot.

    Not thread-safe: mutations must not run concurrently with each other or
    with matching.
    """

    def __init__(self, chars: Iterable[str] = ()):
        self._raw: dict[str, float] = {}
        self._normalized: dict[str, float] = {}
        self._min: float | None = None
        self._max: float | None = None
        self._subscribers: list[Callable[[], None]] = []
        for char, raw in self._measured(self._validated(chars)).items():
            self._insert(char, raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __contains__(self, char: object) -> bool:
        return char in self._raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.export_sorted())

    def __repr__(self) -> str:
        return f"Palette({''.join(self.export_sorted())!r})"

    @property
    def min_brightness(self) -> float | None:
        return self._min

    @property
    def max_brightness(self) -> float | None:
        return self._max

    def is_empty(self) -> bool:
        return not self._raw

    def export_sorted(self) -> list[str]:
        return sorted(self._raw, key=ord)

    def raw_brightness(self, char: str) -> float:
        return self._raw[char]

    def normalized(self, char: str) -> float | None:
        """Normalized brightness from the last equalize(), or None if the member postdates it."""
        if char not in self._raw:
            raise KeyError(char)
        return self._normalized.get(char)

    def normalized_items(self) -> list[tuple[str, float]]:
        """Active members that carry a normalized value, paired with that value."""
        return [(char, self._normalized[char]) for char in self._raw if char in self._normalized]

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.remove(callback)

    def add(self, char: str) -> None:
        check_printable(char)
        if char in self._raw:
            return
        self._insert(char, brightness_of(char))
        logger.debug("Added %r (brightness %.4f)", char, self._raw[char])
        self._notify()

    def remove(self, char: str) -> None:
        check_printable(char)
        if char not in self._raw:
            return
        self._delete(char)
        self._rescan()
        logger.debug("Removed %r", char)
        self._notify()

    def add_many(self, chars: Iterable[str]) -> None:
        new = self._measured(char for char in self._validated(chars) if char not in self._raw)
        if not new:
            return
        for char, raw in new.items():
            self._insert(char, raw)
        logger.debug("Added %d characters", len(new))
        self._notify()

    def remove_many(self, chars: Iterable[str]) -> None:
        gone = [char for char in self._validated(chars) if char in self._raw]
        if not gone:
            return
        for char in gone:
            self._delete(char)
        self._rescan()
        logger.debug("Removed %d characters", len(gone))
        self._notify()

    def replace(self, chars: Iterable[str]) -> None:
        """Swap the whole active set for chars in one step."""
        measured = self._measured(self._validated(chars))
        self._raw.clear()
        self._normalized.clear()
        self._min = self._max = None
        for char, raw in measured.items():
            self._insert(char, raw)
        logger.debug("Replaced palette with %d characters", len(self._raw))
        self._notify()

    def equalize(self) -> None:
        """Stretch raw brightness of the active set linearly onto [0, 1].

        When every member has the same raw brightness they all normalize to 0.
        """
        self._normalized.clear()
        if self._raw:
            span = self._max - self._min
            for char, raw in self._raw.items():
                self._normalized[char] = (raw - self._min) / span if span > 0 else 0.0
            logger.debug("Equalized %d characters over [%.4f, %.4f]", len(self._raw), self._min, self._max)
        self._notify()

    @staticmethod
    def _validated(chars: Iterable[str]) -> list[str]:
        # Check everything up front so a bad character leaves the palette untouched
        chars = list(chars)
        for char in chars:
            check_printable(char)
        return list(dict.fromkeys(chars))

    @staticmethod
    def _measured(chars: Iterable[str]) -> dict[str, float]:
        # Measure before touching state so a rendering failure leaves the palette as it was
        return {char: brightness_of(char) for char in chars}

    def _insert(self, char: str, raw: float) -> None:
        self._raw[char] = raw
        self._min = raw if self._min is None else min(self._min, raw)
        self._max = raw if self._max is None else max(self._max, raw)

    def _delete(self, char: str) -> None:
        del self._raw[char]
        self._normalized.pop(char, None)

    def _rescan(self) -> None:
        if self._raw:
            self._min = min(self._raw.values())
            self._max = max(self._raw.values())
        else:
            self._min = self._max = None

    def _notify(self) -> None:
        for callback in self._subscribers:
            callback()
