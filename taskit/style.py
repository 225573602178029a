"""Building the application stylesheet from the user's configuration."""

from __future__ import annotations

import math
from decimal import Decimal

from taskit.config import Config
from taskit.themes import get_theme_css


def _parse_size(token: str) -> float | None:
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _format_size(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def font_css(font: str | None) -> str:
    """CSS rule for a font description such as ``"Sans 12"``.

    A trailing number is taken as the size in points and the rest as the
    family; otherwise the whole description is used as the family.
    """
    if font is None:
        return ""
    parts = font.split()
    if not parts:
        return ""
    *family_parts, last = parts
    size = _parse_size(last)
    if size is None:
        return f'* {{ font-family: "{font}"; }}'
    family = " ".join(family_parts)
    return f'* {{ font-family: "{family}"; font-size: {_format_size(size)}pt; }}'


def build_css(config: Config) -> str:
    """Full stylesheet: theme, font override and the done-task style."""
    return (
        f"\n        {get_theme_css(config.theme)}"
        f"\n        {font_css(config.font)}"
        "\n        .task-done { text-decoration: line-through; opacity: 0.6; }"
        "\n    "
    )


def prefers_dark(config: Config) -> bool:
    """Whether the configuration asks for a dark appearance."""
    return config.theme == "Dark"