"""Grid exporter public API.

Exports grid data as CSV text or as a PDF document, for all, visible or
selected rows and all or visible columns.
"""

__version__ = "1.0.0"

from .config import ExporterConfig, ExportScope, setup_logging
from .data import ColumnDef, ColumnFilter, DataFrameGrid, GridRow, RowSelection
from .services import (
    DelimitedTextRenderer,
    ExportCoordinator,
    PdfDocumentRenderer,
    PdfLayoutBuilder,
    RowColumnSelector,
    TableExtractor,
    ValueFormatter,
)

__all__ = [
    "ColumnDef",
    "ColumnFilter",
    "DataFrameGrid",
    "DelimitedTextRenderer",
    "ExportCoordinator",
    "ExportScope",
    "ExporterConfig",
    "GridRow",
    "PdfDocumentRenderer",
    "PdfLayoutBuilder",
    "RowColumnSelector",
    "RowSelection",
    "TableExtractor",
    "ValueFormatter",
    "setup_logging",
]
