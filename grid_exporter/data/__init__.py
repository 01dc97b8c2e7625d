"""Grid data module."""
from .filter import ColumnFilter, DataFilter
from .grid import ColumnDef, DataFrameGrid, GridRow, GridSource, RowSelection
from .loader import GridDataLoader

__all__ = [
    "ColumnDef",
    "ColumnFilter",
    "DataFilter",
    "DataFrameGrid",
    "GridDataLoader",
    "GridRow",
    "GridSource",
    "RowSelection",
]
