"""Background and text colour variation matrices.

Every catalog colour with both codes is rendered as `  Test Text  ` against
each reference colour (black, brightBlack, white, brightWhite, foreground,
background):

  background table  reference colour is the text, tested colour the background
  text table        reference colour is the background, tested colour the text

`foreground` and `background` have no real colour of their own, only the
terminal defaults, so pairs involving them borrow reverse video (INVERT) in
place of a missing code. A pseudo-colour tested against itself would invert
an inversion; those diagonal cells hide the ambiguous side instead.

The styles come from a decision table keyed on (reference role, tested role)
so each case can be read and tested in isolation.
"""

from show_colors.core.ansi import HIDDEN, INVERT, RESET, align_columns, sgr, underline
from show_colors.core.catalog import BACKGROUND, CANONICAL, FOREGROUND, REFERENCE_COLORS, lookup
from show_colors.core.types import CellStyle, ColorEntry

SAMPLE_TEXT = '  Test Text  '

# Roles
CONCRETE = 'concrete'
SELF = 'self'
OTHER = 'other'

# Attribute tokens: (context, whose colour) or a bare attribute.
FG_TESTED = ('fg', 'tested')
BG_TESTED = ('bg', 'tested')
FG_REFERENCE = ('fg', 'reference')
BG_REFERENCE = ('bg', 'reference')

Token = tuple[str, str] | str
Rule = tuple[tuple[Token, ...], tuple[Token, ...]]

# (reference role, tested role) -> (background table tokens, text table tokens)
CELL_RULES: dict[tuple[str, str], Rule] = {
    (BACKGROUND, SELF): ((BG_TESTED, HIDDEN), (HIDDEN, FG_TESTED)),
    (BACKGROUND, OTHER): ((FG_TESTED, INVERT), (BG_REFERENCE, FG_TESTED)),
    (FOREGROUND, SELF): ((INVERT, HIDDEN), (HIDDEN, INVERT)),
    (FOREGROUND, OTHER): ((BG_TESTED, FG_REFERENCE), (INVERT, BG_TESTED)),
    (CONCRETE, FOREGROUND): ((FG_TESTED, BG_REFERENCE, INVERT), (FG_REFERENCE, INVERT, BG_TESTED)),
    (CONCRETE, OTHER): ((BG_TESTED, FG_REFERENCE), (BG_REFERENCE, FG_TESTED)),
}

_HEADER_LABELS = {
    'black': 'Black',
    'brightBlack': 'Black',
    'white': 'White',
    'brightWhite': 'White',
    FOREGROUND: 'Default',
    BACKGROUND: 'Default',
}


def roles(tested: str, reference: str) -> tuple[str, str]:
    """Classify a (tested, reference) pair for CELL_RULES."""
    if reference in (FOREGROUND, BACKGROUND):
        return reference, SELF if tested == reference else OTHER
    return CONCRETE, FOREGROUND if tested == FOREGROUND else OTHER


def _resolve(token: Token, tested: ColorEntry, reference: ColorEntry) -> str:
    if isinstance(token, str):
        return token
    context, whose = token
    entry = tested if whose == 'tested' else reference
    code = entry.fg_code if context == 'fg' else entry.bg_code
    if code is None:
        raise ValueError(f'{entry.name} has no {context} code')
    return sgr(code)


def cell_style(tested: str, reference: str) -> CellStyle:
    """Escape prefixes for tested colour against reference colour."""
    tested_entry = lookup(tested)
    reference_entry = lookup(reference)
    background_tokens, text_tokens = CELL_RULES[roles(tested, reference)]
    return CellStyle(
        background=''.join(_resolve(t, tested_entry, reference_entry) for t in background_tokens),
        text=''.join(_resolve(t, tested_entry, reference_entry) for t in text_tokens),
    )


def render_cell(prefix: str) -> str:
    return f'{prefix}{SAMPLE_TEXT}{RESET}'


def _header(context: str) -> str:
    cells = []
    for name in REFERENCE_COLORS:
        entry = lookup(name)
        code = entry.fg_code if context == 'fg' else entry.bg_code
        cells.append(underline(f'{_HEADER_LABELS[name]} ({code})'))
    return '\t'.join(cells)


def build_variation_rows(entries: list[ColorEntry] | None = None) -> tuple[list[str], list[str]]:
    """Rows of the background and text variation tables, headers first.

    Entries without both codes (palette-only names) get no row.
    """
    if entries is None:
        entries = list(CANONICAL)
    background_rows = [_header('fg')]
    text_rows = [_header('bg')]
    for entry in entries:
        if not entry.has_codes:
            continue
        styles = [cell_style(entry.name, ref) for ref in REFERENCE_COLORS]
        background_rows.append('\t'.join(render_cell(s.background) for s in styles))
        text_rows.append('\t'.join(render_cell(s.text) for s in styles))
    return background_rows, text_rows


def render_variations(entries: list[ColorEntry] | None = None) -> tuple[str, str]:
    background_rows, text_rows = build_variation_rows(entries)
    return align_columns(background_rows), align_columns(text_rows)
