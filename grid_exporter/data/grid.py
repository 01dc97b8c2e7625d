"""pandas-backed grid that the export pipeline reads from.

The exporter only relies on the members listed in ``GridSource``; any object
providing them can be exported. ``DataFrameGrid`` is the implementation used
by the demo app and the tests.
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Sequence, Set, Union

import numpy as np
import pandas as pd

from ..config.constants import FLEX_WIDTH, NUMERIC_COLUMN_TYPE
from ..utils import TextNormalizer
from .filter import ColumnFilter, DataFilter

Width = Union[int, float, str]


@dataclass
class ColumnDef:
    """Column state as the grid currently shows it."""

    field: str
    display_name: Optional[str] = None
    width: Width = FLEX_WIDTH
    drawn_width: Optional[float] = None
    visible: bool = True
    type: str = "string"
    cell_filter: Optional[Callable[[Any], Any]] = None

    def __post_init__(self):
        if self.display_name is None:
            self.display_name = TextNormalizer.readable_column_name(self.field)

    @property
    def is_numeric(self) -> bool:
        return self.type == NUMERIC_COLUMN_TYPE


@dataclass(frozen=True)
class GridRow:
    """Handle to a row in grid storage."""

    index: int


class RowSelection:
    """Row selection state of a grid."""

    def __init__(self, grid: "DataFrameGrid"):
        self._grid = grid
        self._selected: Set[int] = set()

    def select_row(self, row: GridRow) -> None:
        self._selected.add(row.index)

    def unselect_row(self, row: GridRow) -> None:
        self._selected.discard(row.index)

    def select_all(self) -> None:
        self._selected = {row.index for row in self._grid.rows}

    def clear_selection(self) -> None:
        self._selected.clear()

    def is_selected(self, row: GridRow) -> bool:
        return row.index in self._selected

    def get_selected_grid_rows(self) -> List[GridRow]:
        """Selected rows in storage order."""
        return [row for row in self._grid.rows if row.index in self._selected]


class GridSource(Protocol):
    """What the export pipeline reads from a grid."""

    rows: Sequence[GridRow]
    columns: Sequence[ColumnDef]
    selection: Optional[RowSelection]

    def get_visible_rows(self) -> List[GridRow]:
        ...

    def get_cell_value(self, row: GridRow, column: ColumnDef) -> Any:
        ...


class DataFrameGrid:
    """Grid backed by a DataFrame, with column state, filters, sort and selection."""

    def __init__(
        self,
        data: pd.DataFrame,
        column_defs: Optional[List[ColumnDef]] = None,
        enable_selection: bool = False,
    ):
        self._data = data.reset_index(drop=True)
        # Column fields are strings, so labels must be too.
        self._data.columns = [str(label) for label in self._data.columns]
        self.columns: List[ColumnDef] = (
            list(column_defs) if column_defs is not None else self._infer_columns(self._data)
        )
        self.filters: List[ColumnFilter] = []
        self.sort_field: Optional[str] = None
        self.sort_ascending = True
        self.data_filter = DataFilter()
        self.selection: Optional[RowSelection] = RowSelection(self) if enable_selection else None

    @property
    def data(self) -> pd.DataFrame:
        return self._data

    @property
    def rows(self) -> List[GridRow]:
        return [GridRow(index) for index in range(len(self._data))]

    @staticmethod
    def _infer_columns(df: pd.DataFrame) -> List[ColumnDef]:
        """Build column definitions from the frame's dtypes."""
        columns = []
        for name in df.columns:
            dtype = df[name].dtype
            is_number = pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)
            columns.append(
                ColumnDef(field=str(name), type=NUMERIC_COLUMN_TYPE if is_number else "string")
            )
        return columns

    def get_column(self, field: str) -> ColumnDef:
        for column in self.columns:
            if column.field == field:
                return column
        raise KeyError(f"Unknown column: {field}")

    def set_column_visible(self, field: str, visible: bool) -> None:
        self.get_column(field).visible = visible

    def add_filter(self, column_filter: ColumnFilter) -> None:
        self.filters.append(column_filter)

    def clear_filters(self) -> None:
        self.filters = []

    def sort_by(self, field: Optional[str], ascending: bool = True) -> None:
        """Set the display sort column; ``None`` restores storage order."""
        self.sort_field = field
        self.sort_ascending = ascending

    def get_visible_rows(self) -> List[GridRow]:
        """Rows passing every filter, in display order."""
        mask = self.data_filter.build_mask(self._data, self.filters)
        view = self._data[mask]
        if self.sort_field is not None and self.sort_field in view.columns:
            view = view.sort_values(
                by=self.sort_field,
                ascending=self.sort_ascending,
                kind="mergesort",
                na_position="last",
            )
        return [GridRow(int(index)) for index in view.index]

    def get_cell_value(self, row: GridRow, column: ColumnDef) -> Any:
        """Value shown in a cell, after the column's cell filter."""
        if column.field in self._data.columns:
            value = self._data[column.field].iat[row.index]
            if isinstance(value, np.generic):
                value = value.item()
            if pd.api.types.is_scalar(value) and pd.isna(value):
                value = None
        else:
            value = None
        if column.cell_filter is not None:
            value = column.cell_filter(value)
        return value
