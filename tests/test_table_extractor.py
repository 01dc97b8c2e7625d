"""
Tests for grid_exporter/services/table_extractor.py — headers and data matrix.
"""

import pandas as pd

from grid_exporter import ColumnDef, DataFrameGrid, ExportScope, GridRow
from grid_exporter.services import ExportHeader, TableExtractor


class TestColumnHeaders:

    def test_headers_follow_column_order(self, grid):
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.ALL)
        assert [header.name for header in table.headers] == ["name", "age", "active", "notes"]
        assert [header.display_name for header in table.headers] == ["Name", "Age", "Active", "Notes"]

    def test_numeric_columns_align_right(self, grid):
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.ALL)
        aligns = {header.name: header.align for header in table.headers}
        assert aligns == {"name": "left", "age": "right", "active": "left", "notes": "left"}

    def test_drawn_width_wins_over_configured_width(self):
        columns = [
            ColumnDef("a", width=100, drawn_width=140),
            ColumnDef("b", width="30%"),
        ]
        headers = TableExtractor.get_column_headers(columns)
        assert headers == [
            ExportHeader("a", "A", 140, "left"),
            ExportHeader("b", "B", "30%", "left"),
        ]


class TestExtract:

    def test_rows_match_header_count(self, grid):
        grid.set_column_visible("active", False)
        for row_type in (ExportScope.ALL, ExportScope.VISIBLE):
            for col_type in (ExportScope.ALL, ExportScope.VISIBLE):
                table = TableExtractor(grid).extract(row_type, col_type)
                assert all(len(row) == len(table.headers) for row in table.rows)

    def test_all_columns_count(self, grid):
        grid.set_column_visible("notes", False)
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.ALL)
        assert len(table.headers) == len(grid.columns)

    def test_visible_columns_count(self, grid):
        grid.set_column_visible("notes", False)
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.VISIBLE)
        assert len(table.headers) == sum(1 for column in grid.columns if column.visible)

    def test_cell_values_are_raw(self, grid):
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.ALL)
        assert table.rows[0] == ["Bob", 42, True, None]
        assert type(table.rows[0][1]) is int

    def test_selected_rows_only(self, grid):
        grid.selection.select_row(GridRow(1))
        table = TableExtractor(grid).extract(ExportScope.SELECTED, ExportScope.VISIBLE)
        assert table.rows == [['Frank "The Tank"', 35, False, "ok"]]

    def test_missing_selection_gives_empty_body(self, plain_grid):
        table = TableExtractor(plain_grid).extract(ExportScope.SELECTED, ExportScope.VISIBLE)
        assert len(table.headers) == 4
        assert table.rows == []

    def test_cell_filter_is_applied(self):
        df = pd.DataFrame({"price": [1.5, 2.0]})
        columns = [ColumnDef("price", type="number", cell_filter=lambda value: f"${value:.2f}")]
        grid = DataFrameGrid(df, column_defs=columns)
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.ALL)
        assert table.rows == [["$1.50"], ["$2.00"]]

    def test_columns_hidden_during_extraction_keep_rows_aligned(self, people_df):
        class HidingGrid(DataFrameGrid):
            def get_cell_value(self, row, column):
                self.get_column("notes").visible = False
                return super().get_cell_value(row, column)

        grid = HidingGrid(people_df)
        table = TableExtractor(grid).extract(ExportScope.ALL, ExportScope.VISIBLE)
        assert [header.name for header in table.headers] == ["name", "age", "active", "notes"]
        assert all(len(row) == len(table.headers) for row in table.rows)
        assert table.rows[1] == ['Frank "The Tank"', 35, False, "ok"]
        assert not grid.get_column("notes").visible
