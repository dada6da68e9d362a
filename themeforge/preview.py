"""Geometry and text of the main-screen and splash-screen previews."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from .css import Color
from .theme import Theme

BUTTON_HEIGHT = 26.0
BUTTON_GAP = 5.0
BUTTON_WIDTH_RATIO = 0.45
BUTTON_TOP_RATIO = 0.38
SPLASH_TEXTS_PER_SECOND = 0.5

DEFAULT_SURFACE: Color = (0.12, 0.12, 0.18, 1.0)
DEFAULT_LINE: Color = (0.20, 0.20, 0.28, 1.0)
DEFAULT_TEXT: Color = (0.85, 0.85, 0.90, 1.0)


@dataclass(frozen=True)
class ButtonPlacement:
    """Where one main-screen button is drawn inside the preview area."""

    label: str
    x: float
    y: float
    width: float
    height: float


def _area(width: float, height: float) -> tuple[float, float]:
    return max(width, 1.0), max(height, 1.0)


def button_layout(
    width: float, height: float, labels: Mapping[str, str] | Iterable[str]
) -> list[ButtonPlacement]:
    """Stack the buttons in a centred column placed a little above the middle.

    A mapping of button ids to labels is laid out in id order; any other
    iterable of labels keeps its own order.
    """
    width, height = _area(width, height)
    if isinstance(labels, Mapping):
        texts = [label for _, label in sorted(labels.items())]
    else:
        texts = list(labels)

    button_width = width * BUTTON_WIDTH_RATIO
    step = BUTTON_HEIGHT + BUTTON_GAP
    total_height = len(texts) * step - BUTTON_GAP
    top = (height - total_height) * BUTTON_TOP_RATIO
    left = (width - button_width) * 0.5
    return [
        ButtonPlacement(text, left, top + position * step, button_width, BUTTON_HEIGHT)
        for position, text in enumerate(texts)
    ]


def splash_text_index(seconds: float, count: int) -> int:
    """Index of the splash text shown after ``seconds``; texts change every two seconds."""
    if count <= 0:
        raise ValueError("there are no splash texts to choose from")
    return math.trunc(seconds * SPLASH_TEXTS_PER_SECOND) % count


def centered_position(
    width: float, height: float, text_width: float, text_height: float
) -> tuple[float, float]:
    """Top-left corner that centres a block of text in the preview area."""
    width, height = _area(width, height)
    return (width - text_width) * 0.5, (height - text_height) * 0.5


def watermark_text(theme: Theme) -> str:
    """The name and version line drawn in the corner of the main preview."""
    return f"{theme.name}  v{theme.version}"