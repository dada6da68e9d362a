"""Extraction of colour custom properties from a stylesheet's :root block."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[float, float, float, float]

_WHITE: Color = (1.0, 1.0, 1.0, 1.0)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass
class CssVars:
    """Colours declared as custom properties, keyed by property name."""

    colors: dict[str, Color] = field(default_factory=dict)

    def get(self, name: str, fallback: Color) -> Color:
        """Return the colour for ``name`` or ``fallback`` if it is not declared."""
        return self.colors.get(name, fallback)


def _channel(pair: str) -> float:
    digits = ""
    for ch in pair:
        if ch not in _HEX_DIGITS:
            break
        digits += ch
    if not digits:
        raise ValueError(f"not a hex channel: {pair!r}")
    return int(digits, 16) / 255.0


def parse_hex(text: str) -> Color:
    """Parse ``#rrggbb`` into an opaque RGBA colour; malformed input gives white.

    Raises ValueError when a channel has no hex digits.
    """
    if len(text) < 7 or text[0] != "#":
        return _WHITE
    return (_channel(text[1:3]), _channel(text[3:5]), _channel(text[5:7]), 1.0)


def _trim(text: str) -> str:
    return text.lstrip(" \t\r\n").rstrip(" \t\r\n;")


def parse_css_vars(css: str) -> CssVars:
    """Collect ``--name: #rrggbb`` declarations from the first ``:root`` block."""
    out = CssVars()
    root = css.find(":root")
    if root < 0:
        return out
    open_brace = css.find("{", root)
    if open_brace < 0:
        return out
    close_brace = css.find("}", open_brace)
    if close_brace < 0:
        return out

    for raw in css[open_brace + 1:close_brace].split("\n"):
        line = _trim(raw)
        if not line.startswith("--"):
            continue
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name = _trim(name)
        value = _trim(value)
        if len(value) >= 7 and value[0] == "#":
            try:
                out.colors[name] = parse_hex(value)
            except ValueError:
                pass
    return out