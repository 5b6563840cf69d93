import pytest

from asciitile.errors import EmptyPalette, PaletteNotEqualized
from asciitile.matcher import CharMatcher
from asciitile.palette import Palette


@pytest.fixture
def table(glyph_brightness):
    glyph_brightness.update({"0": 0.0, "1": 1.0, "2": 0.25, "3": 0.75, "5": 0.25})
    return glyph_brightness


def equalized(chars):
    palette = Palette(chars)
    palette.equalize()
    return palette


def test_tie_goes_to_smaller_code(table):
    matcher = CharMatcher(equalized("10"))
    assert matcher.match(0.5) == "0"


def test_tie_between_equal_values(table):
    matcher = CharMatcher(equalized("5201"))
    assert matcher.match(0.25) == "2"


def test_nearest(table):
    matcher = CharMatcher(equalized("0123"))
    assert matcher.match(0.0) == "0"
    assert matcher.match(0.1) == "0"
    assert matcher.match(0.3) == "2"
    assert matcher.match(0.7) == "3"
    assert matcher.match(1.0) == "1"


def test_caches_results(table):
    matcher = CharMatcher(equalized("01"))
    matcher.match(0.2)
    matcher.match(0.2)
    matcher.match(0.9)
    assert matcher.cache_size == 2


def test_add_and_remove_clear_cache(table):
    palette = equalized("01")
    matcher = CharMatcher(palette)
    matcher.match(0.5)
    palette.add("2")
    assert matcher.cache_size == 0
    matcher.match(0.5)
    palette.remove("2")
    assert matcher.cache_size == 0


def test_equalize_clears_cache(table):
    palette = equalized("013")
    matcher = CharMatcher(palette)
    assert matcher.match(0.8) == "3"
    palette.remove("1")
    palette.equalize()
    assert matcher.cache_size == 0
    assert matcher.match(0.8) == "3"
    assert palette.normalized("3") == 1.0


def test_stale_normalization_skips_new_members(table):
    palette = equalized("01")
    matcher = CharMatcher(palette)
    palette.add("3")
    assert matcher.match(0.75) == "1"


def test_stale_normalization_skips_removed_members(table):
    palette = equalized("012")
    matcher = CharMatcher(palette)
    palette.remove("2")
    assert matcher.match(0.25) == "0"


def test_empty_palette(table):
    with pytest.raises(EmptyPalette):
        CharMatcher(Palette()).match(0.5)


def test_never_equalized(table):
    with pytest.raises(PaletteNotEqualized):
        CharMatcher(Palette("01")).match(0.5)
    assert CharMatcher(Palette("01")).cache_size == 0


@pytest.mark.parametrize("query", [float("inf"), float("-inf"), float("nan")])
def test_rejects_non_finite(table, query):
    matcher = CharMatcher(equalized("01"))
    with pytest.raises(ValueError, match="finite"):
        matcher.match(query)
    assert matcher.cache_size == 0


def test_close_stops_invalidation(table):
    palette = equalized("01")
    matcher = CharMatcher(palette)
    matcher.match(0.2)
    matcher.close()
    palette.equalize()
    assert matcher.cache_size == 1
