"""Tests for show_colors.core.variations — cell decision table and matrices."""

import pytest
from show_colors.core.ansi import strip_escapes
from show_colors.core.catalog import CANONICAL, REFERENCE_COLORS, lookup
from show_colors.core.types import ColorEntry
from show_colors.core.variations import (
    CELL_RULES,
    SAMPLE_TEXT,
    build_variation_rows,
    cell_style,
    render_cell,
    roles,
)

INVERT = '\x1b[7m'
HIDDEN = '\x1b[8m'


def e(code: int) -> str:
    return f'\x1b[{code}m'


class TestRoles:
    def test_concrete_pair(self):
        assert roles('red', 'black') == ('concrete', 'other')

    def test_foreground_against_concrete(self):
        assert roles('foreground', 'white') == ('concrete', 'foreground')

    def test_background_against_concrete_is_plain(self):
        assert roles('background', 'white') == ('concrete', 'other')

    def test_self_pairs(self):
        assert roles('foreground', 'foreground') == ('foreground', 'self')
        assert roles('background', 'background') == ('background', 'self')

    def test_pseudo_against_other_pseudo(self):
        assert roles('foreground', 'background') == ('background', 'other')
        assert roles('background', 'foreground') == ('foreground', 'other')

    def test_every_role_has_a_rule(self):
        for entry in CANONICAL:
            for ref in REFERENCE_COLORS:
                assert roles(entry.name, ref) in CELL_RULES


class TestConcreteReference:
    def test_plain_colour(self):
        style = cell_style('red', 'black')
        assert style.background == e(41) + e(30)
        assert style.text == e(40) + e(31)

    def test_bright_reference(self):
        style = cell_style('green', 'brightWhite')
        assert style.background == e(42) + e(97)
        assert style.text == e(107) + e(32)

    def test_foreground_tested_uses_invert(self):
        style = cell_style('foreground', 'black')
        assert style.background == e(39) + e(40) + INVERT
        assert style.text == e(30) + INVERT + e(49)

    def test_background_tested_composes_codes(self):
        style = cell_style('background', 'white')
        assert style.background == e(109) + e(37)
        assert style.text == e(47) + e(99)


class TestBackgroundReference:
    def test_concrete_tested(self):
        style = cell_style('red', 'background')
        assert style.background == e(31) + INVERT
        assert style.text == e(109) + e(31)

    def test_foreground_tested(self):
        style = cell_style('foreground', 'background')
        assert style.background == e(39) + INVERT
        assert style.text == e(109) + e(39)

    def test_diagonal_hides(self):
        style = cell_style('background', 'background')
        assert style.background == e(109) + HIDDEN
        assert style.text == HIDDEN + e(99)
        assert INVERT not in style.background + style.text


class TestForegroundReference:
    def test_concrete_tested(self):
        style = cell_style('red', 'foreground')
        assert style.background == e(41) + e(39)
        assert style.text == INVERT + e(41)

    def test_background_tested(self):
        style = cell_style('background', 'foreground')
        assert style.background == e(109) + e(39)
        assert style.text == INVERT + e(109)

    def test_diagonal_hides(self):
        style = cell_style('foreground', 'foreground')
        assert style.background == INVERT + HIDDEN
        assert style.text == HIDDEN + INVERT


class TestCellStyleErrors:
    def test_palette_only_colour_rejected(self):
        with pytest.raises(ValueError, match='cursorColor'):
            cell_style('cursorColor', 'black')


class TestRenderCell:
    def test_sample_text_and_reset(self):
        assert render_cell(e(31)) == '\x1b[31m  Test Text  \x1b[0m'
        assert SAMPLE_TEXT == '  Test Text  '


class TestBuildVariationRows:
    def test_one_row_per_coded_entry(self):
        background_rows, text_rows = build_variation_rows()
        assert len(background_rows) == 1 + 18
        assert len(text_rows) == 1 + 18

    def test_six_cells_per_row(self):
        background_rows, text_rows = build_variation_rows()
        for row in background_rows + text_rows:
            assert len(row.split('\t')) == 6

    def test_palette_only_entries_skipped(self):
        entries = list(CANONICAL) + [ColorEntry('cursorColor')]
        background_rows, _text_rows = build_variation_rows(entries)
        assert len(background_rows) == 19

    def test_headers(self):
        background_rows, text_rows = build_variation_rows()
        assert [strip_escapes(c) for c in background_rows[0].split('\t')] == [
            'Black (30)',
            'Black (90)',
            'White (37)',
            'White (97)',
            'Default (39)',
            'Default (99)',
        ]
        assert [strip_escapes(c) for c in text_rows[0].split('\t')] == [
            'Black (40)',
            'Black (100)',
            'White (47)',
            'White (107)',
            'Default (49)',
            'Default (109)',
        ]

    def test_diagonal_cells(self):
        background_rows, text_rows = build_variation_rows()
        names = [entry.name for entry in CANONICAL]
        fg_row = background_rows[1 + names.index('foreground')].split('\t')
        bg_row = text_rows[1 + names.index('background')].split('\t')
        assert fg_row[REFERENCE_COLORS.index('foreground')] == render_cell(INVERT + HIDDEN)
        assert bg_row[REFERENCE_COLORS.index('background')] == render_cell(HIDDEN + e(99))

    def test_rows_follow_entry_order(self):
        entries = [lookup('blue'), lookup('red')]
        background_rows, _ = build_variation_rows(entries)
        assert background_rows[1].startswith(e(44))
        assert background_rows[2].startswith(e(41))
