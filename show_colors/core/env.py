"""Environment lookups for show-colors.

  TERM                 Shown in the report header. Display only.
  SHOW_COLORS_PALETTE  Palette file used by a bare --theme. An explicit
                       --theme FILE always wins.

Nothing is written back to the environment.
"""

import os
from collections.abc import Mapping

from show_colors.core.types import DEFAULT_PALETTE_FILE

PALETTE_ENV_VAR = 'SHOW_COLORS_PALETTE'


def terminal_name(environ: Mapping[str, str] | None = None) -> str:
    """Value of TERM, or an empty string when unset."""
    env = os.environ if environ is None else environ
    return env.get('TERM', '')


def default_palette_file(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(PALETTE_ENV_VAR) or DEFAULT_PALETTE_FILE
