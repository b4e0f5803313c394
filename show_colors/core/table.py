"""Main colour table: codes, ANSI swatch and optional theme columns."""

from show_colors.core.ansi import INVERT, align_columns, sgr, swatch, truecolor_bg, underline
from show_colors.core.catalog import FOREGROUND, display_order
from show_colors.core.palette_parser import format_rgb, hex_to_rgb
from show_colors.core.types import ColorEntry, PaletteTheme

NOT_AVAILABLE = 'N/A'

BASE_HEADERS = ('Name', 'Code (FG)', 'Code (BG)', 'ANSI Color')
THEME_HEADERS = ('Theme Hex', 'Theme RGB', 'Theme Color')


def shows_theme_columns(theme: PaletteTheme | None) -> bool:
    """Theme columns are decided once for the whole table."""
    return theme is not None and not theme.is_empty


def ansi_swatch(entry: ColorEntry) -> str:
    # 49 would just be the default background again, so paint the default
    # foreground colour by swapping the two.
    if entry.name == FOREGROUND:
        return swatch(INVERT)
    if entry.bg_code is None:
        return swatch('')
    return swatch(sgr(entry.bg_code))


def theme_cells(hex_value: str | None) -> list[str]:
    """Hex, RGB and 24-bit swatch cells for one row."""
    if hex_value is None:
        return [NOT_AVAILABLE, NOT_AVAILABLE, '']
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        return [hex_value, NOT_AVAILABLE, '']
    return [hex_value, format_rgb(rgb), swatch(truecolor_bg(rgb))]


def _code(code: int | None) -> str:
    return '' if code is None else str(code)


def build_rows(theme: PaletteTheme | None = None) -> list[str]:
    """Tab-delimited header and one row per colour in display order."""
    with_theme = shows_theme_columns(theme)
    headers = BASE_HEADERS + THEME_HEADERS if with_theme else BASE_HEADERS
    rows = ['\t'.join(underline(h) for h in headers)]

    for entry in display_order(theme if with_theme else None):
        cells = [entry.name, _code(entry.fg_code), _code(entry.bg_code), ansi_swatch(entry)]
        if with_theme:
            cells.extend(theme_cells(theme.hex_for(entry.name)))
        rows.append('\t'.join(cells))
    return rows


def render_table(theme: PaletteTheme | None = None) -> str:
    return align_columns(build_rows(theme))
