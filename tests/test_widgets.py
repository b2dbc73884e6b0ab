from rich.cells import cell_len

from dockpeek.widgets import ELLIPSIS, TableWidget, Viewport, fit_cell


def make_table(n_rows, height=5, focused=True):
    table = TableWidget(columns=[("ID", 6), ("Name", 8)], height=height, focused=focused)
    table.set_rows([(f"id{i}", f"name{i}") for i in range(n_rows)])
    return table


class TestTableWidget:
    def test_empty_table_has_no_selection(self):
        table = make_table(0)
        assert table.selected_index() is None
        table.update("down")
        assert table.selected_index() is None

    def test_cursor_is_clamped(self):
        table = make_table(3)
        table.update("down")
        assert table.selected_index() == 1
        for _ in range(10):
            table.update("j")
        assert table.selected_index() == 2
        for _ in range(10):
            table.update("up")
        assert table.selected_index() == 0

    def test_paging_and_jumps(self):
        table = make_table(20, height=5)  # 4 body rows
        table.update("pagedown")
        assert table.selected_index() == 4
        table.update("end")
        assert table.selected_index() == 19
        table.update("pageup")
        assert table.selected_index() == 15
        table.update("ctrl+u")
        assert table.selected_index() == 13
        table.update("g")
        assert table.selected_index() == 0

    def test_blurred_table_ignores_keys(self):
        table = make_table(3, focused=False)
        assert table.update("down") is False
        assert table.selected_index() == 0

    def test_unknown_key_is_not_handled(self):
        assert make_table(3).update("x") is False

    def test_set_rows_clamps_cursor(self):
        table = make_table(10)
        table.update("end")
        table.set_rows([("a", "b"), ("c", "d")])
        assert table.selected_index() == 1

    def test_view_scrolls_with_cursor(self):
        table = make_table(10, height=4)  # header + 3 rows
        table.update("end")
        lines = table.view().plain.split("\n")
        assert len(lines) == 4
        assert lines[0].startswith("ID")
        assert lines[-1].startswith("id9")
        assert "id6" not in table.view().plain


class TestFitCell:
    def test_pads_to_width(self):
        assert fit_cell("ab", 5) == "ab   "

    def test_truncates_leaving_gap(self):
        cell = fit_cell("abcdefgh", 5)
        assert len(cell) == 5
        assert cell.endswith(" ")
        assert cell.startswith("abc")

    def test_zero_width(self):
        assert fit_cell("abc", 0) == ""

    def test_wide_characters_measured_in_cells(self):
        cell = fit_cell("数据库服务器", 8)
        assert cell_len(cell) == 8
        assert cell.startswith("数据库")
        assert ELLIPSIS in cell

    def test_wide_characters_padded_in_cells(self):
        cell = fit_cell("日本", 8)
        assert cell == "日本    "
        assert cell_len(cell) == 8


class TestViewport:
    def make(self, n_lines=30, height=10):
        vp = Viewport(width=40, height=height)
        vp.set_content("\n".join(f"line {i}" for i in range(n_lines)))
        return vp

    def test_set_content_resets_scroll(self):
        vp = self.make()
        vp.update("pagedown")
        assert vp.y_offset == 10
        vp.set_content("fresh\ntext")
        assert vp.y_offset == 0
        assert vp.content == "fresh\ntext"

    def test_scroll_bounds(self):
        vp = self.make(n_lines=30, height=10)
        vp.update("end")
        assert vp.y_offset == 20
        assert vp.at_bottom()
        vp.update("down")
        assert vp.y_offset == 20
        vp.update("home")
        vp.update("up")
        assert vp.y_offset == 0
        assert vp.at_top()

    def test_navigation_does_not_change_content(self):
        vp = self.make()
        before = vp.content
        for key in ("down", "space", "ctrl+d", "b", "G"):
            vp.update(key)
        assert vp.content == before

    def test_view_shows_window(self):
        vp = self.make(height=3)
        vp.update("down")
        assert vp.view().plain == "line 1\nline 2\nline 3"

    def test_short_content_does_not_scroll(self):
        vp = self.make(n_lines=2, height=10)
        vp.update("pagedown")
        assert vp.y_offset == 0
        assert vp.scroll_percent() == 1.0

    def test_ansi_escapes_become_styles(self):
        vp = Viewport(width=40, height=5)
        vp.set_content("\x1b[31mERROR\x1b[0m disk full\nplain line")
        view = vp.view()
        assert view.plain == "ERROR disk full\nplain line"
        assert "\x1b" not in view.plain
        assert any("red" in str(span.style) for span in view.spans)

    def test_ansi_lines_cropped_by_visible_width(self):
        vp = Viewport(width=5, height=2)
        vp.set_content("\x1b[1;32mabcdefgh\x1b[0m")
        assert vp.view().plain == "abcde"

    def test_resize_clamps_offset(self):
        vp = self.make(n_lines=30, height=10)
        vp.update("end")
        vp.resize(40, 25)
        assert vp.y_offset == 5
