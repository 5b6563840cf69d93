"""Conversion settings shared by the command line and library callers.

Values come from the dataclass defaults, then ``ASCIITILE_*`` environment
variables, then explicit overrides (usually command line flags).
"""

import os
from dataclasses import dataclass, replace

from asciitile.charsets import DIGITS

OUTPUTS = ("console", "html")


@dataclass(frozen=True)
class ConversionConfig:
    resolution: int = 128
    charset: tuple[str, ...] = (DIGITS[0] + "-" + DIGITS[-1],)
    output: str = "console"
    html_file: str = "out.html"
    font_name: str = "Courier New"

    def __post_init__(self):
        if self.resolution < 1:
            raise ValueError(f"Resolution must be positive: {self.resolution}")
        if self.output not in OUTPUTS:
            raise ValueError(f"Unknown output {self.output!r}, expected one of {', '.join(OUTPUTS)}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ConversionConfig":
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if env.get("ASCIITILE_RESOLUTION"):
            values["resolution"] = int(env["ASCIITILE_RESOLUTION"])
        if env.get("ASCIITILE_CHARSET"):
            values["charset"] = tuple(env["ASCIITILE_CHARSET"].split())
        if env.get("ASCIITILE_OUTPUT"):
            values["output"] = env["ASCIITILE_OUTPUT"]
        if env.get("ASCIITILE_HTML_FILE"):
            values["html_file"] = env["ASCIITILE_HTML_FILE"]
        return cls(**values)

    def with_overrides(self, **overrides) -> "ConversionConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
