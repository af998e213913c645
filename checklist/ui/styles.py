"""Rich styles for the checklist view.

Colors are 8-bit palette indices and are always emitted as 8-bit escapes;
downgrading for less capable terminals is left to the runtime.
"""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

COLOR_SYSTEM = ColorSystem.EIGHT_BIT

HEADER_STYLE = Style(color="color(240)", bold=True, underline=True)
CURSOR_STYLE = Style(color="color(205)")
SELECTED_STYLE = Style(color="color(48)")
CHOICE_STYLE = Style(color="color(254)")
FOOTER_STYLE = Style(color="color(245)", italic=True)

HEADER_PADDING = 1


def render(style: Style, text: str, padding: int = 0) -> str:
    """Render *text* with *style* as an ANSI string.

    Each line is styled separately so escape sequences never span a
    newline. Empty lines stay empty; ``padding`` spaces are added on both
    sides of every other line, inside the styled span.
    """
    pad = " " * padding
    lines = []
    for line in text.split("\n"):
        if line:
            line = style.render(f"{pad}{line}{pad}", color_system=COLOR_SYSTEM)
        lines.append(line)
    return "\n".join(lines)


__all__ = [
    "CHOICE_STYLE",
    "CURSOR_STYLE",
    "FOOTER_STYLE",
    "HEADER_PADDING",
    "HEADER_STYLE",
    "SELECTED_STYLE",
    "render",
]
