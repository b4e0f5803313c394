"""ANSI escape helpers and tab-delimited column alignment."""

import re

ESC = '\x1b'
RESET = f'{ESC}[0m'
ITALIC = f'{ESC}[3m'
UNDERLINE = f'{ESC}[4m'
INVERT = f'{ESC}[7m'
HIDDEN = f'{ESC}[8m'

SWATCH_WIDTH = 5
COLUMN_GUTTER = '  '

_ESCAPE_RE = re.compile(r'\x1b\[[0-9;]*m')


def sgr(*codes: int) -> str:
    """Build a Select Graphic Rendition sequence, e.g. sgr(31) -> ESC[31m."""
    return f'{ESC}[{";".join(str(c) for c in codes)}m'


def truecolor_bg(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return sgr(48, 2, r, g, b)


def swatch(prefix: str) -> str:
    """A short run of spaces painted with prefix, then reset."""
    return f'{prefix}{" " * SWATCH_WIDTH}{RESET}'


def underline(text: str) -> str:
    return f'{UNDERLINE}{text}{RESET}'


def italic(text: str) -> str:
    return f'{ITALIC}{text}{RESET}'


def strip_escapes(text: str) -> str:
    return _ESCAPE_RE.sub('', text)


def visible_width(text: str) -> int:
    """Printed width of text, ignoring SGR sequences."""
    return len(strip_escapes(text))


def align_columns(rows: list[str]) -> str:
    """Pad tab-delimited rows so every column lines up.

    Widths are computed over the whole table from visible text, so embedded
    escape sequences do not push columns out of line. Trailing tabs and
    empty rows are dropped. Rows may have different cell counts.
    """
    table = [row.rstrip('\t').split('\t') for row in rows if row.strip('\t')]
    if not table:
        return ''
    ncols = max(len(cells) for cells in table)
    widths = [0] * ncols
    for cells in table:
        for i, cell in enumerate(cells):
            widths[i] = max(widths[i], visible_width(cell))

    lines = []
    for cells in table:
        padded = []
        for i, cell in enumerate(cells):
            if i == len(cells) - 1:
                padded.append(cell)
            else:
                padded.append(cell + ' ' * (widths[i] - visible_width(cell)))
        lines.append(COLUMN_GUTTER.join(padded))
    return '\n'.join(lines)
