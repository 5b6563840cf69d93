import pytest

from asciitile import palette as palette_module


@pytest.fixture
def glyph_brightness(monkeypatch):
    """Replace glyph rendering with a hand-written brightness table.

    Tests fill the returned dict; palette members must appear in it.
    """
    table: dict[str, float] = {}
    monkeypatch.setattr(palette_module, "brightness_of", lambda char: table[char])
    return table
