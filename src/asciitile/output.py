import html
from pathlib import Path

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII art</title>
</head>
<body>
<pre style="font-family: '{font}', monospace; font-size: 4px; line-height: 1;">
{body}
</pre>
</body>
</html>
"""


def to_text(grid: list[list[str]]) -> str:
    return "\n".join("".join(row) for row in grid)


def to_html(grid: list[list[str]], font_name: str = "Courier New") -> str:
    """Wrap the grid in a standalone HTML page, one <pre> line per row."""
    body = "\n".join(html.escape("".join(row)) for row in grid)
    return HTML_TEMPLATE.format(font=html.escape(font_name, quote=True), body=body)


def write_html(grid: list[list[str]], path: str | Path, font_name: str = "Courier New") -> Path:
    path = Path(path)
    path.write_text(to_html(grid, font_name), encoding="utf-8")
    return path
