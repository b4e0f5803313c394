"""Fixed ANSI colour catalog.

16 base colours (8 hues, normal and bright) plus the `foreground` and
`background` pseudo-colours, which stand for the terminal's default colours.
Codes are SGR parameters: 30-37/90-97 select text colour, 40-47/100-107
select background colour. 39/49 reset to the default foreground/background;
99/109 are the codes listed for `background`.
"""

from show_colors.core.types import ColorEntry, PaletteTheme

FOREGROUND = 'foreground'
BACKGROUND = 'background'
PSEUDO_COLORS = (FOREGROUND, BACKGROUND)

# Display order matters: each hue is followed by its bright variant.
CANONICAL: tuple[ColorEntry, ...] = (
    ColorEntry('black', 30, 40),
    ColorEntry('brightBlack', 90, 100),
    ColorEntry('red', 31, 41),
    ColorEntry('brightRed', 91, 101),
    ColorEntry('green', 32, 42),
    ColorEntry('brightGreen', 92, 102),
    ColorEntry('yellow', 33, 43),
    ColorEntry('brightYellow', 93, 103),
    ColorEntry('blue', 34, 44),
    ColorEntry('brightBlue', 94, 104),
    ColorEntry('purple', 35, 45),
    ColorEntry('brightPurple', 95, 105),
    ColorEntry('cyan', 36, 46),
    ColorEntry('brightCyan', 96, 106),
    ColorEntry('white', 37, 47),
    ColorEntry('brightWhite', 97, 107),
    ColorEntry(FOREGROUND, 39, 49),
    ColorEntry(BACKGROUND, 99, 109),
)

_BY_NAME: dict[str, ColorEntry] = {entry.name: entry for entry in CANONICAL}

# Reference axis of the variation tables, in column order.
REFERENCE_COLORS: tuple[str, ...] = (
    'black',
    'brightBlack',
    'white',
    'brightWhite',
    FOREGROUND,
    BACKGROUND,
)


def is_canonical(name: str) -> bool:
    return name in _BY_NAME


def lookup(name: str) -> ColorEntry:
    """Return the catalog entry for name, or an entry without codes."""
    return _BY_NAME.get(name) or ColorEntry(name)


def display_order(theme: PaletteTheme | None = None) -> list[ColorEntry]:
    """Canonical entries followed by palette-only names in file order."""
    entries = list(CANONICAL)
    if theme is not None:
        entries.extend(ColorEntry(name) for name in theme.colors if not is_canonical(name))
    return entries
