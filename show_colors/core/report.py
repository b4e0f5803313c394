"""Report builder — assembles the text printed by show-colors."""

from show_colors.core.ansi import italic
from show_colors.core.catalog import display_order
from show_colors.core.table import render_table, shows_theme_columns
from show_colors.core.types import PaletteTheme
from show_colors.core.variations import render_variations


def format_text(
    terminal: str,
    theme: PaletteTheme | None = None,
    show_variations: bool = False,
) -> str:
    """Terminal/theme header, main table and optional variation tables."""
    lines = ['']
    lines.append(f'Terminal: {italic(terminal)}')
    if theme is not None and theme.display_name:
        lines.append(f'Theme: {italic(theme.display_name)}')
    lines.append('')
    lines.append(render_table(theme))
    lines.append('')

    if show_variations:
        entries = display_order(theme if shows_theme_columns(theme) else None)
        background_table, text_table = render_variations(entries)
        lines.append(italic('Background Color Variations Table'))
        lines.append('')
        lines.append(background_table)
        lines.append('')
        lines.append(italic('Text Color Variations Table'))
        lines.append('')
        lines.append(text_table)
        lines.append('')

    return '\n'.join(lines)
