import pytest

from themeforge.css import CssVars, parse_css_vars, parse_hex


def test_parse_hex_primary_channels():
    assert parse_hex("#ff0000") == (1.0, 0.0, 0.0, 1.0)
    assert parse_hex("#00ff00") == (0.0, 1.0, 0.0, 1.0)
    assert parse_hex("#0000FF") == (0.0, 0.0, 1.0, 1.0)


@pytest.mark.parametrize("text", ["", "#fff", "ff0000", "red"])
def test_parse_hex_malformed_is_white(text):
    assert parse_hex(text) == (1.0, 1.0, 1.0, 1.0)


def test_parse_hex_invalid_digits_raise():
    with pytest.raises(ValueError):
        parse_hex("#zz0000")


def test_parse_hex_channels_in_range():
    r, g, b, a = parse_hex("#123abc")
    assert all(0.0 <= c <= 1.0 for c in (r, g, b))
    assert a == 1.0
    assert r < g < b


def test_parse_css_vars_reads_root_colors():
    css = """
body { color: #000000; }
:root {
    --surface: #ff0000;
    --text:#00ff00;
    --radius: 4px;
    --line : #0000ff ;
}
.other { --ignored: #ffffff; }
"""
    result = parse_css_vars(css)
    assert result.colors == {
        "--surface": parse_hex("#ff0000"),
        "--text": parse_hex("#00ff00"),
        "--line": parse_hex("#0000ff"),
    }


def test_parse_css_vars_skips_invalid_and_non_custom():
    css = ":root {\n  color: #ff0000;\n  --bad: #gg0000;\n  --short: #fff;\n  --ok: #ffffff;\n}"
    result = parse_css_vars(css)
    assert list(result.colors) == ["--ok"]


@pytest.mark.parametrize("css", ["", "body { --x: #ff0000; }", ":root --x: #ff0000;", ":root { --x: #ff0000;"])
def test_parse_css_vars_without_complete_root_block(css):
    assert parse_css_vars(css).colors == {}


def test_get_returns_value_or_fallback():
    fallback = (0.5, 0.5, 0.5, 1.0)
    vars_ = CssVars({"--text": (1.0, 0.0, 0.0, 1.0)})
    assert vars_.get("--text", fallback) == (1.0, 0.0, 0.0, 1.0)
    assert vars_.get("--missing", fallback) == fallback