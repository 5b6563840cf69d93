from asciitile.output import to_html, to_text, write_html


def test_to_text():
    assert to_text([["a", "b"], ["c", "d"]]) == "ab\ncd"


def test_to_html_escapes():
    page = to_html([["<", "&"], [">", '"']])
    assert "&lt;&amp;\n&gt;&quot;" in page
    assert "Courier New" in page
    assert page.startswith("<!DOCTYPE html>")


def test_write_html(tmp_path):
    path = write_html([["#"]], tmp_path / "out.html", font_name="Mono")
    text = path.read_text(encoding="utf-8")
    assert "'Mono'" in text
    assert "<pre" in text
