"""Extraction of headers and cell data from a grid."""
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from ..data.grid import ColumnDef, GridSource, Width
from .row_column_selector import RowColumnSelector, ScopeLike


@dataclass(frozen=True)
class ExportHeader:
    name: str
    display_name: str
    width: Width
    align: str


@dataclass
class ExtractedTable:
    """Headers plus one list of cell values per row, aligned with the headers."""

    headers: List[ExportHeader] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)


class TableExtractor:
    """Builds the header list and data matrix for an export."""

    def __init__(self, grid: GridSource, selector: RowColumnSelector = None):
        self.grid = grid
        self.selector = selector or RowColumnSelector(grid)

    def extract(self, row_type: ScopeLike, col_type: ScopeLike) -> ExtractedTable:
        """Resolve columns once and use them for both headers and row cells."""
        columns = self.selector.select_columns(col_type)
        headers = self.get_column_headers(columns)
        rows = self.get_data(row_type, columns)
        return ExtractedTable(headers=headers, rows=rows)

    @staticmethod
    def get_column_headers(columns: Sequence[ColumnDef]) -> List[ExportHeader]:
        headers = []
        for column in columns:
            width = column.drawn_width if column.drawn_width else column.width
            headers.append(
                ExportHeader(
                    name=column.field,
                    display_name=column.display_name,
                    width=width,
                    align="right" if column.is_numeric else "left",
                )
            )
        return headers

    def get_data(self, row_type: ScopeLike, columns: Sequence[ColumnDef]) -> List[List[Any]]:
        data = []
        for row in self.selector.select_rows(row_type):
            data.append([self.grid.get_cell_value(row, column) for column in columns])
        return data
