"""Shared types for show-colors: RunConfig, ColorEntry, PaletteTheme, CellStyle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_PALETTE_FILE = '16-ansi-color-palette.json'


@dataclass(frozen=True)
class RunConfig:
    """Parsed command line options. Built once by the CLI."""

    show_theme: bool = False
    palette_file: str = DEFAULT_PALETTE_FILE
    show_variations: bool = False
    debug: bool = False


@dataclass(frozen=True)
class ColorEntry:
    """A named colour with its SGR codes in foreground and background context."""

    name: str
    fg_code: int | None = None
    bg_code: int | None = None

    @property
    def has_codes(self) -> bool:
        return self.fg_code is not None and self.bg_code is not None


@dataclass(frozen=True)
class PaletteTheme:
    """Colours read from a palette file.

    `colors` keeps file-encounter order and is read-only once built.
    """

    display_name: str | None = None
    colors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'colors', MappingProxyType(dict(self.colors)))

    @property
    def is_empty(self) -> bool:
        return not self.colors

    def hex_for(self, name: str) -> str | None:
        return self.colors.get(name)


@dataclass(frozen=True)
class CellStyle:
    """Escape prefixes for one variation cell.

    `background` is used in the background variations table (reference colour
    as text), `text` in the text variations table (reference colour as
    background).
    """

    background: str
    text: str
