"""Regex-based reader for palette/theme files.

Palette files look like JSON:

    {
      "name": "Solarized",
      "red": "#DC322F",
      ...
    }

but are NOT parsed as JSON. Each line is scanned on its own for a quoted
identifier and a `#` followed by hex digits; a line with both records one
colour. Nested objects, arrays and escapes are not understood, and lines
that do not fit the pattern are ignored. The `"name"` key is the palette
title, never a colour.
"""

import re
from pathlib import Path

from PIL import ImageColor

from show_colors.core.types import PaletteTheme

NAME_KEY = 'name'

_NAME_RE = re.compile(r'"name":\s*"([^"]+)"')
_KEY_RE = re.compile(r'"([A-Za-z0-9]+)"')
_HEX_RE = re.compile(r'#[A-Fa-f0-9]+')


class PaletteError(Exception):
    """The palette file could not be used. Never fatal to a run."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class PaletteNotFoundError(PaletteError):
    def __init__(self, path: str):
        super().__init__(path, f"Palette file '{path}' not found. Skipping theme codes and colors.")


class PaletteUnreadableError(PaletteError):
    def __init__(self, path: str, reason: str):
        super().__init__(
            path,
            f"Palette file '{path}' could not be read ({reason}). Skipping theme codes and colors.",
        )


def load_palette(path: str) -> PaletteTheme:
    """Read a palette file from disk.

    Raises PaletteNotFoundError if it does not exist and
    PaletteUnreadableError for any other OS-level failure.
    """
    p = Path(path)
    if not p.exists():
        raise PaletteNotFoundError(path)
    try:
        text = p.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        raise PaletteUnreadableError(path, e.strerror or type(e).__name__) from e
    return parse_palette_string(text)


def parse_palette_string(text: str) -> PaletteTheme:
    """Parse palette text into a PaletteTheme."""
    colors: dict[str, str] = {}
    for line in text.splitlines():
        entry = _extract_color(line)
        if entry is None:
            continue
        key, value = entry
        colors[key] = value
    return PaletteTheme(display_name=_extract_display_name(text), colors=colors)


def _extract_display_name(text: str) -> str | None:
    m = _NAME_RE.search(text)
    return m.group(1) if m else None


def _extract_color(line: str) -> tuple[str, str] | None:
    """First quoted identifier and first #hex on the line, if both exist."""
    key = _KEY_RE.search(line)
    value = _HEX_RE.search(line)
    if not key or not value:
        return None
    if key.group(1) == NAME_KEY:
        return None
    return key.group(1), value.group(0)


def hex_to_rgb(hex_value: str) -> tuple[int, int, int] | None:
    """Split '#RRGGBB' into decimal channels.

    Only the first six hex digits are used, two per channel, with no
    rounding. Returns None when fewer than six digits are present.
    """
    digits = hex_value.lstrip('#')
    if len(digits) < 6 or not re.fullmatch(r'[A-Fa-f0-9]+', digits):
        return None
    r, g, b = ImageColor.getrgb(f'#{digits[:6]}')[:3]
    return r, g, b


def format_rgb(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'rgb({r},{g},{b})'
