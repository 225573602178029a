"""Stylesheets for the available colour themes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_THEMES = ("System", "Dark")

_Rule = tuple[str, Sequence[tuple[str, str]]]

_TRANSPARENT_BORDER = "1px solid transparent"
_SOFT_BORDER = "1px solid alpha(currentColor, 0.15)"

_COMMON_COLORS: tuple[tuple[str, str], ...] = (("border_radius", "6px"),)

_COMMON_RULES: tuple[_Rule, ...] = (
    ("window, box, grid, paned", ()),
    (
        "button, entry, .card, .sidebar-item, .boxed-list, menu, popover",
        (("border-radius", "6px"),),
    ),
    (".sidebar", (("background-color", "@theme_bg_color"),)),
    (
        ".sidebar-row",
        (("background", "transparent"), ("border", "none"), ("padding", "0")),
    ),
    (
        ".sidebar-item",
        (
            ("background-color", "transparent"),
            ("color", "@theme_fg_color"),
            ("border", _TRANSPARENT_BORDER),
            ("padding", "6px 10px"),
            ("transition", "all 200ms ease"),
        ),
    ),
    (
        ".sidebar-item:hover",
        (("background-color", "alpha(@theme_fg_color, 0.05)"),),
    ),
    (
        ".sidebar-item:selected, .sidebar-item.selected",
        (
            ("background-color", "@theme_selected_bg_color"),
            ("color", "@theme_selected_fg_color"),
            ("border", "1px solid @theme_selected_bg_color"),
        ),
    ),
    (
        "button",
        (
            ("min-height", "24px"),
            ("padding", "2px 8px"),
            ("border", _SOFT_BORDER),
            ("background-image", "none"),
            ("box-shadow", "none"),
        ),
    ),
    ("button:hover", (("background-color", "alpha(currentColor, 0.05)"),)),
    (
        "button.flat",
        (("border-color", "transparent"), ("background-color", "transparent")),
    ),
    (
        "entry",
        (
            ("min-height", "28px"),
            ("padding", "2px 6px"),
            ("border", _SOFT_BORDER),
            ("background-image", "none"),
            ("box-shadow", "none"),
        ),
    ),
    (
        ".title-label",
        (
            ("font-weight", "800"),
            ("font-size", "14pt"),
            ("letter-spacing", "-0.5px"),
        ),
    ),
    (
        ".dim-label",
        (
            ("opacity", "0.5"),
            ("font-weight", "600"),
            ("font-size", "9pt"),
            ("text-transform", "uppercase"),
            ("letter-spacing", "0.5px"),
        ),
    ),
    (
        "scrollbar slider",
        (("min-width", "4px"), ("border-radius", "10px")),
    ),
)

_DARK_BG = "#1e1e2e"
_DARK_FG = "#cdd6f4"

_DARK_COLORS: tuple[tuple[str, str], ...] = (
    ("theme_bg_color", _DARK_BG),
    ("theme_fg_color", _DARK_FG),
    ("theme_selected_bg_color", "#89b4fa"),
    ("theme_selected_fg_color", _DARK_BG),
)

_DARK_RULES: tuple[_Rule, ...] = (
    ("window", (("color", _DARK_FG), ("background-color", _DARK_BG))),
)


def _render(colors: Iterable[tuple[str, str]], rules: Iterable[_Rule]) -> str:
    parts = [f"@define-color {name} {value};\n" for name, value in colors]
    for selector, declarations in rules:
        body = "".join(f"    {prop}: {value};\n" for prop, value in declarations)
        parts.append(f"\n{selector} {{\n{body}}}\n")
    return "\n" + "".join(parts)


_COMMON_CSS = _render(_COMMON_COLORS, _COMMON_RULES)
_DARK_OVERRIDES = _render(_DARK_COLORS, _DARK_RULES)


def get_theme_css(theme_name: str) -> str:
    """Stylesheet for a theme; unknown names get the system theme."""
    if theme_name == "Dark":
        return _DARK_OVERRIDES + _COMMON_CSS
    return _COMMON_CSS


def get_all_themes() -> list[str]:
    """Names of the selectable themes, in display order."""
    return list(_THEMES)