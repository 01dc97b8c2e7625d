"""Export pipeline services."""
from .csv_renderer import DelimitedTextRenderer
from .export_coordinator import ExportCoordinator
from .pdf_layout_builder import PdfLayoutBuilder
from .pdf_renderer import PdfDocumentRenderer
from .row_column_selector import RowColumnSelector
from .table_extractor import ExportHeader, ExtractedTable, TableExtractor
from .value_formatter import CellKind, CellValue, ValueFormatter

__all__ = [
    "CellKind",
    "CellValue",
    "DelimitedTextRenderer",
    "ExportCoordinator",
    "ExportHeader",
    "ExtractedTable",
    "PdfDocumentRenderer",
    "PdfLayoutBuilder",
    "RowColumnSelector",
    "TableExtractor",
    "ValueFormatter",
]
