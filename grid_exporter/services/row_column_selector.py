"""Resolution of row and column export scopes against grid state."""
import logging
from typing import List, Optional, Sequence, Union

from ..config.constants import ExportScope
from ..data.grid import ColumnDef, GridRow, GridSource

logger = logging.getLogger(__name__)

ScopeLike = Union[ExportScope, str]


class RowColumnSelector:
    """Picks the rows and columns that take part in one export."""

    def __init__(self, grid: GridSource):
        self.grid = grid

    def select_rows(self, row_type: ScopeLike) -> List[GridRow]:
        """Rows for the given scope.

        Asking for selected rows on a grid without a selection capability is a
        configuration error: it is logged and no rows are returned.
        """
        row_type = ExportScope(row_type)
        if row_type is ExportScope.ALL:
            return list(self.grid.rows)
        if row_type is ExportScope.VISIBLE:
            return list(self.grid.get_visible_rows())

        selection = getattr(self.grid, "selection", None)
        if selection is None:
            logger.error("selection feature must be enabled to allow selected rows to be exported")
            return []
        return list(selection.get_selected_grid_rows())

    def select_columns(
        self, col_type: ScopeLike, columns: Optional[Sequence[ColumnDef]] = None
    ) -> List[ColumnDef]:
        """Columns for the given scope, in display order.

        Raises:
            ValueError: for ``SELECTED``, column subsets cannot be exported.
        """
        col_type = ExportScope(col_type)
        if columns is None:
            columns = self.grid.columns
        if col_type is ExportScope.SELECTED:
            raise ValueError("Selected columns cannot be exported, use ALL or VISIBLE")
        if col_type is ExportScope.ALL:
            return list(columns)
        return [column for column in columns if column.visible]
