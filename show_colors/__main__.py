"""show-colors — ANSI colour codes and palette swatches for the current terminal.

Usage: uv run show-colors [-d] [-t [file]] [-v] [-h]

Prints, for each named colour, the SGR foreground/background codes and a live
swatch. With --theme, a palette file adds hex, rgb() and a 24-bit swatch per
colour. With --variations, two extra tables render sample text for every
colour against black, white and the terminal default colours.

Environment variables:
  TERM                 Shown in the output header.
  SHOW_COLORS_PALETTE  Palette file used by a bare --theme
                       (default: 16-ansi-color-palette.json).
"""

import argparse
import sys
from typing import NoReturn

from show_colors.core.catalog import is_canonical
from show_colors.core.env import default_palette_file, terminal_name
from show_colors.core.palette_parser import PaletteError, load_palette
from show_colors.core.report import format_text
from show_colors.core.types import PaletteTheme, RunConfig

EPILOG = r"""
This script displays ANSI color codes and their corresponding colors in your terminal.
It can also load custom color palettes from JSON files (specified with the -t option).
The output includes foreground and background color codes, ANSI color representation,
and, if a theme file is provided, the hexadecimal and RGB values of the colors.

Color codes in your terminal can be used to style text output. ANSI escape sequences
are used to change text color, background color, and other attributes. The basic format
for setting foreground and background colors is:

  \e[<foreground_code>;<background_code>m<text>\e[0m

where:
  <foreground_code> is the ANSI code for the foreground color (e.g., 31 for red).
  <background_code> is the ANSI code for the background color (e.g., 42 for green).
  <text> is the text you want to color.
  \e[0m resets the color back to the default.

Example: To print 'Hello' in red on a green background:

  echo -e "\e[31;42mHello\e[0m"

The script outputs tables of color codes, which you can use in this manner. For example,
if the script shows that the foreground code for 'blue' is 34 and the background code
for 'yellow' is 43, you would use \e[34;43m to get blue text on a yellow background.

Custom palettes should be JSON files with the following structure:

{
  "name": "Palette Name",
  "black": "#000000",
  "red": "#FF0000",
  "green": "#00FF00",
  "yellow": "#FFFF00",
  "blue": "#0000FF",
  "purple": "#FF00FF",
  "cyan": "#00FFFF",
  "white": "#FFFFFF",
  "brightBlack": "#808080",
  "brightRed": "#FF8080",
  "brightGreen": "#80FF80",
  "brightYellow": "#FFFF80",
  "brightBlue": "#8080FF",
  "brightPurple": "#FF80FF",
  "brightCyan": "#80FFFF",
  "brightWhite": "#C0C0C0",
  "foreground": "#000000",
  "background": "#FFFFFF"
}

Where the color values are hexadecimal RGB codes (e.g., #FF0000 for red).
Additional colors can be included without issue.
"""


FLAG_OPTIONS = frozenset({'-d', '--debug', '-v', '--variations'})
THEME_OPTIONS = frozenset({'-t', '--theme'})
HELP_OPTIONS = frozenset({'-h', '--help'})


def _invalid_option(parser: argparse.ArgumentParser, token: str) -> NoReturn:
    print(f'Invalid option: {token}', file=sys.stderr)
    parser.print_help()
    sys.exit(1)


def _takes_value(token: str) -> bool:
    return bool(token) and not token.startswith('-')


def _checked_argv(parser: argparse.ArgumentParser, argv: list[str]) -> list[str]:
    """Walk argv left to right, accepting only the exact option spellings.

    `-t/--theme` takes the next token as its file only when it is non-empty
    and does not start with '-'. Scanning stops at help, so anything after
    it is ignored. Combined short flags, `--opt=value` and `-tFILE` are
    rejected.
    """
    accepted = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in HELP_OPTIONS:
            accepted.append(token)
            break
        if token in FLAG_OPTIONS:
            accepted.append(token)
        elif token in THEME_OPTIONS:
            accepted.append(token)
            if i + 1 < len(argv) and _takes_value(argv[i + 1]):
                accepted.append(argv[i + 1])
                i += 1
        else:
            _invalid_option(parser, token)
        i += 1
    return accepted


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='show-colors',
        description='Display ANSI color codes, palette colors and text/background variations.',
        epilog=EPILOG,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument('-d', '--debug', action='store_true', help='Turns on debug output messages (if any).')
    parser.add_argument(
        '-t',
        '--theme',
        nargs='?',
        const=default_palette_file(),
        default=None,
        metavar='file',
        help='Print theme codes and colors. Optionally specify a palette file.',
    )
    parser.add_argument(
        '-v',
        '--variations',
        action='store_true',
        help='Prints tables with variations of background/text combinations.',
    )
    return parser


def parse_args(argv: list[str] | None = None) -> RunConfig:
    """Parse argv into a RunConfig. Exits 0 on --help, 1 on anything unknown."""
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_checked_argv(parser, argv))

    return RunConfig(
        show_theme=args.theme is not None,
        palette_file=args.theme if args.theme is not None else default_palette_file(),
        show_variations=args.variations,
        debug=args.debug,
    )


def _debug(config: RunConfig, message: str) -> None:
    if config.debug:
        print(f'show-colors: {message}', file=sys.stderr)


def _load_theme(config: RunConfig) -> PaletteTheme | None:
    """Load the palette if --theme was given. Problems downgrade to no theme."""
    if not config.show_theme:
        return None

    _debug(config, f'loading palette {config.palette_file}')
    try:
        theme = load_palette(config.palette_file)
    except PaletteError as e:
        print(f'Warning: {e}', file=sys.stderr)
        return None

    _debug(config, f'palette name: {theme.display_name or "(none)"}')
    _debug(config, f'loaded {len(theme.colors)} colour(s)')
    extras = [name for name in theme.colors if not is_canonical(name)]
    if extras:
        _debug(config, f'palette-only colours: {", ".join(extras)}')
    return theme


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)
    theme = _load_theme(config)
    print(format_text(terminal_name(), theme, show_variations=config.show_variations))
    return 0


if __name__ == '__main__':
    sys.exit(main())
