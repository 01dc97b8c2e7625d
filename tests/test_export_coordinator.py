"""
Tests for grid_exporter/services/export_coordinator.py — end to end exports.
"""

import logging
from unittest.mock import MagicMock

import pandas as pd
import pytest

from grid_exporter import (
    ColumnFilter,
    DataFrameGrid,
    ExportCoordinator,
    ExporterConfig,
    ExportScope,
    GridRow,
)


class TestExportText:

    def test_all_rows_all_columns(self, grid):
        csv = ExportCoordinator(grid).export_text(ExportScope.ALL, ExportScope.ALL)
        assert csv == (
            '"Name","Age","Active","Notes"\n'
            '"Bob",42,TRUE,\n'
            '"Frank ""The Tank""",35,FALSE,"ok"\n'
            '"Alice",29,TRUE,"late"'
        )

    def test_visible_rows_and_columns(self, grid):
        grid.set_column_visible("notes", False)
        grid.add_filter(ColumnFilter("active", values=[True]))
        csv = ExportCoordinator(grid).export_text(ExportScope.VISIBLE, ExportScope.VISIBLE)
        assert csv == '"Name","Age","Active"\n"Bob",42,TRUE\n"Alice",29,TRUE'

    def test_selected_without_selection_feature(self, plain_grid, caplog):
        with caplog.at_level(logging.ERROR):
            csv = ExportCoordinator(plain_grid).export_text(ExportScope.SELECTED, ExportScope.VISIBLE)
        assert csv == '"Name","Age","Active","Notes"'
        assert sum(1 for record in caplog.records if record.levelno == logging.ERROR) == 1

    def test_selected_columns_propagate_error(self, grid):
        with pytest.raises(ValueError):
            ExportCoordinator(grid).export_text(ExportScope.ALL, ExportScope.SELECTED)

    def test_idempotent(self, grid):
        coordinator = ExportCoordinator(grid)
        first = coordinator.export_text("all", "all")
        assert coordinator.export_text("all", "all") == first

    def test_separator_from_config(self, grid):
        config = ExporterConfig(CSV_SEPARATOR=";")
        csv = ExportCoordinator(grid, config).export_text("all", "all")
        assert csv.split("\n")[0] == '"Name";"Age";"Active";"Notes"'

    def test_integer_column_labels(self):
        grid = DataFrameGrid(pd.DataFrame([[1, "a"], [2, "b"]]))
        assert ExportCoordinator(grid).export_text("all", "all") == '"0","1"\n1,"a"\n2,"b"'


class TestCsvExport:

    def test_hands_content_to_sink(self, grid):
        sink = MagicMock()
        content = ExportCoordinator(grid).csv_export("all", "all", sink=sink)
        sink.assert_called_once_with(content)

    def test_without_sink(self, grid):
        content = ExportCoordinator(grid).csv_export("visible", "visible")
        assert content.count("\n") == 3


class TestExportDocument:

    def test_layout_for_selected_rows(self, grid):
        grid.selection.select_row(GridRow(0))
        layout = ExportCoordinator(grid).export_document(ExportScope.SELECTED, ExportScope.VISIBLE)
        body = layout["content"][0]["table"]["body"]
        assert body[1] == ["Bob", "42", "TRUE", ""]
        assert layout["content"][0]["table"]["widths"] == ["*", "*", "*", "*"]

    def test_empty_body_on_configuration_error(self, plain_grid):
        layout = ExportCoordinator(plain_grid).export_document("selected", "visible")
        assert len(layout["content"][0]["table"]["body"]) == 1

    def test_widths_recomputed_per_export(self, grid):
        coordinator = ExportCoordinator(grid, ExporterConfig(PDF_MAX_GRID_WIDTH=720))
        grid.get_column("name").width = 100
        grid.get_column("age").width = "50%"
        first = coordinator.export_document("all", "all")["content"][0]["table"]["widths"]
        second = coordinator.export_document("all", "all")["content"][0]["table"]["widths"]
        assert first == second
        assert grid.get_column("age").width == "50%"


class TestPdfExport:

    def test_renders_bytes(self, grid):
        assert ExportCoordinator(grid).pdf_export("all", "all").startswith(b"%PDF")

    def test_uses_given_renderer(self, grid):
        renderer = MagicMock()
        renderer.render.return_value = b"%PDF-fake"
        coordinator = ExportCoordinator(grid, document_renderer=renderer)
        assert coordinator.pdf_export("all", "all") == b"%PDF-fake"
        layout = renderer.render.call_args[0][0]
        assert layout["content"][0]["table"]["headerRows"] == 1
