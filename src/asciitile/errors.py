class AsciiTileError(Exception):
    """Base class for every error raised by asciitile."""


class OutOfRangeCharacter(AsciiTileError, ValueError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Character out of supported range: {char!r}")


class EmptyPalette(AsciiTileError):
    def __init__(self, message: str = "Palette has no active characters"):
        super().__init__(message)


class PaletteNotEqualized(AsciiTileError):
    def __init__(self, message: str = "Palette has not been equalized since its members were added"):
        super().__init__(message)


class InvalidResolution(AsciiTileError, ValueError):
    def __init__(self, resolution: int, width: int, height: int):
        self.resolution = resolution
        self.width = width
        self.height = height
        super().__init__(f"Invalid resolution {resolution} for a {width}x{height} image")
