"""
Tests for the fixed-width result table
"""
from io import StringIO

import pytest
from rich.console import Console

from core.table import SEPARATOR, Table, pad_cell
from models.types import Align


def row(*cells: str) -> tuple[str, str, str, str, str]:
    return (cells[0], cells[1], cells[2], cells[3], cells[4])


class TestWidths:
    """Column widths follow the widest pushed cell"""

    def test_empty_table_has_zero_widths(self):
        table = Table()
        assert table.widths == (0, 0, 0, 0)
        assert table.row_count() == 0

    def test_width_is_max_over_pushed_rows(self):
        table = Table()
        rows = [
            row("en", "https://twitch.tv/a", "5 viewers", "01:00", "short"),
            row("fr", "https://twitch.tv/longer_name", "1234 viewers", "101:05", "x"),
            row("de", "https://twitch.tv/b", "0 viewers", "", "a much longer title here"),
        ]
        for r in rows:
            table.push(r)

        for i in range(4):
            assert table.widths[i] == max(len(r[i]) for r in rows)

    def test_last_column_is_not_tracked(self):
        table = Table()
        table.push(row("en", "u", "1 viewers", "00:01", "t" * 500))
        assert len(table.widths) == 4
        assert max(table.widths) < 500

    def test_multibyte_cells_measured_in_characters(self):
        table = Table()
        table.push(row("日本語", "u", "1 viewers", "00:01", "title"))
        table.push(row("en", "u", "1 viewers", "00:01", "title"))
        assert table.widths[0] == 3

        lines = table.render()
        # Separators line up when both sides count characters
        assert lines[0].index(SEPARATOR) == lines[1].index(SEPARATOR) == 3

    def test_row_with_wrong_arity_is_rejected(self):
        table = Table()
        with pytest.raises(ValueError):
            table.push(("en", "u", "1 viewers", "00:01"))
        with pytest.raises(ValueError):
            table.push(("en", "u", "1 viewers", "00:01", "t", "extra"))
        assert table.row_count() == 0


class TestAlignment:
    """Padding laws for each alignment"""

    @pytest.mark.parametrize("align", [Align.LEFT, Align.CENTER, Align.RIGHT])
    def test_padded_length_equals_width(self, align):
        assert len(pad_cell("abc", 10, align)) == 10

    def test_right_pads_with_leading_spaces(self):
        assert pad_cell("42", 6, Align.RIGHT) == "    42"

    def test_left_pads_with_trailing_spaces(self):
        assert pad_cell("42", 6, Align.LEFT) == "42    "

    def test_center_puts_extra_space_on_the_right(self):
        assert pad_cell("ab", 5, Align.CENTER) == " ab  "
        assert pad_cell("ab", 6, Align.CENTER) == "  ab  "

    def test_cell_as_wide_as_column_is_unchanged(self):
        for align in Align:
            assert pad_cell("abcd", 4, align) == "abcd"

    def test_set_align_out_of_range(self):
        with pytest.raises(IndexError):
            Table().set_align(5, Align.RIGHT)


class TestRender:
    """Rendered lines use final widths and insertion order"""

    def test_render_uses_final_widths(self):
        table = Table()
        table.set_align(2, Align.RIGHT)
        table.set_align(3, Align.RIGHT)
        table.push(row("en", "https://twitch.tv/a", "5 viewers", "01:00", "first"))
        table.push(row("fr", "https://twitch.tv/bb", "1234 viewers", "101:05", "second"))

        assert table.render() == [
            "en | https://twitch.tv/a  |    5 viewers |  01:00 | first",
            "fr | https://twitch.tv/bb | 1234 viewers | 101:05 | second",
        ]

    def test_last_column_never_padded(self):
        table = Table()
        table.push(row("en", "u", "1 viewers", "00:01", "x"))
        table.push(row("en", "u", "1 viewers", "00:01", "a longer title"))
        assert table.render()[0].endswith(" | x")

    def test_print_writes_titles_verbatim(self):
        output = StringIO()
        console = Console(file=output, width=40)
        table = Table()
        table.push(row("en", "u", "1 viewers", "00:01", "[bold]not markup[/bold] :smile: " + "x" * 60))

        table.print(console)

        printed = output.getvalue()
        assert printed == table.render()[0] + "\n"
