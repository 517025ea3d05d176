import unittest

from junit2md.render.table import (
    EmptyCell,
    IntCell,
    TextCell,
    as_cell,
    column_widths,
    pad_cell,
    render_table,
)


class TestCells(unittest.TestCase):
    def test_as_cell_coerces_plain_values(self) -> None:
        self.assertEqual(TextCell("x"), as_cell("x"))
        self.assertEqual(IntCell(3), as_cell(3))
        self.assertEqual(EmptyCell(), as_cell(None))
        self.assertEqual(TextCell("True"), as_cell(True))
        self.assertEqual(IntCell(-1), as_cell(IntCell(-1)))

    def test_display(self) -> None:
        self.assertEqual("abc", TextCell("abc").display())
        self.assertEqual("-7", IntCell(-7).display())
        self.assertEqual("", EmptyCell().display())


class TestPadding(unittest.TestCase):
    def test_center_puts_odd_remainder_on_the_right(self) -> None:
        self.assertEqual(" ab  ", pad_cell("ab", 5))
        self.assertEqual("  ab  ", pad_cell("ab", 6))
        self.assertEqual("ab ", pad_cell("ab", 3))

    def test_left_alignment_pads_right_only(self) -> None:
        self.assertEqual("ab   ", pad_cell("ab", 5, center=False))

    def test_empty_text_fills_width(self) -> None:
        self.assertEqual("    ", pad_cell("", 4))

    def test_text_at_or_over_width_is_untouched(self) -> None:
        self.assertEqual("abcd", pad_cell("abcd", 4))
        self.assertEqual("abcdef", pad_cell("abcdef", 4))

    def test_non_ascii_is_measured_in_characters(self) -> None:
        self.assertEqual("  ✓   ", pad_cell("✓", 6))


class TestRenderTable(unittest.TestCase):
    def test_fewer_than_two_rows_renders_nothing(self) -> None:
        self.assertEqual("", render_table([]))
        self.assertEqual("", render_table([["only", "header"]]))

    def test_minimum_width_is_three(self) -> None:
        self.assertEqual([3, 3], column_widths([["a", ""], ["b", "c"]]))

    def test_renders_header_divider_and_rows(self) -> None:
        md = render_table([["Name", "N"], ["alpha", 1], ["b", 22]])
        expected = (
            "|Name | N |\n"
            "|-----|---|\n"
            "|alpha| 1 |\n"
            "|  b  |22 |\n"
            "\n"
        )
        self.assertEqual(expected, md)

    def test_first_column_left_aligned_in_body_only(self) -> None:
        md = render_table([["Name", "N"], ["alpha", 1], ["b", None]], align_left_first_column=True)
        expected = (
            "|Name | N |\n"
            "|-----|---|\n"
            "|alpha| 1 |\n"
            "|b    |   |\n"
            "\n"
        )
        self.assertEqual(expected, md)

    def test_glyph_columns_stay_aligned(self) -> None:
        md = render_table([["Status"], ["✓"], ["‼"]])
        lines = md.splitlines()
        self.assertEqual({8}, {len(line) for line in lines if line})

    def test_rendering_is_deterministic(self) -> None:
        rows = [["a", "b", "c"], ["x", 1, None], [TextCell("yy"), IntCell(2), EmptyCell()]]
        self.assertEqual(render_table(rows), render_table(rows))


if __name__ == "__main__":
    unittest.main()
