from PIL import Image

from asciitile.terminal import fit_to_terminal, terminal_columns


def test_no_terminal_keeps_resolution():
    img = Image.new("RGB", (256, 128))
    assert fit_to_terminal(img, 128, None) == 128


def test_halves_until_it_fits():
    img = Image.new("RGB", (256, 128))
    assert fit_to_terminal(img, 128, 80) == 64
    assert fit_to_terminal(img, 128, 20) == 16


def test_keeps_resolution_when_nothing_fits():
    img = Image.new("RGB", (256, 16))
    # width / height puts the floor at 16 columns
    assert fit_to_terminal(img, 128, 10) == 128


def test_terminal_columns_not_a_tty(capsys):
    assert terminal_columns() is None
