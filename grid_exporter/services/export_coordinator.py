"""Export orchestration: selection, extraction, rendering and hand-off."""
import logging
from typing import Any, Callable, Dict, Optional

from ..config.settings import ExporterConfig
from ..data.grid import GridSource
from .csv_renderer import DelimitedTextRenderer
from .pdf_layout_builder import PdfLayoutBuilder
from .pdf_renderer import PdfDocumentRenderer
from .row_column_selector import RowColumnSelector, ScopeLike
from .table_extractor import ExtractedTable, TableExtractor
from .value_formatter import ValueFormatter

logger = logging.getLogger(__name__)


class ExportCoordinator:
    """Runs CSV and PDF exports of a grid.

    Each export resolves rows and columns afresh; nothing from one export is
    reused by the next.
    """

    def __init__(
        self,
        grid: GridSource,
        config: ExporterConfig = None,
        document_renderer: Optional[PdfDocumentRenderer] = None,
    ):
        self.grid = grid
        self.config = config or ExporterConfig()
        self.formatter = ValueFormatter()
        self.text_renderer = DelimitedTextRenderer(self.formatter, self.config.CSV_SEPARATOR)
        self.layout_builder = PdfLayoutBuilder(self.config, self.formatter)
        self.document_renderer = document_renderer or PdfDocumentRenderer()

    def extract(self, row_type: ScopeLike, col_type: ScopeLike) -> ExtractedTable:
        extractor = TableExtractor(self.grid, RowColumnSelector(self.grid))
        return extractor.extract(row_type, col_type)

    def export_text(self, row_type: ScopeLike, col_type: ScopeLike) -> str:
        """CSV text for the given row and column scopes."""
        table = self.extract(row_type, col_type)
        content = self.text_renderer.render(table.headers, table.rows)
        logger.info(f"CSV export built: {len(table.rows)} rows, {len(table.headers)} columns")
        return content

    def export_document(self, row_type: ScopeLike, col_type: ScopeLike) -> Dict[str, Any]:
        """Declarative PDF layout for the given row and column scopes."""
        table = self.extract(row_type, col_type)
        layout = self.layout_builder.build(table.headers, table.rows)
        logger.info(f"PDF layout built: {len(table.rows)} rows, {len(table.headers)} columns")
        return layout

    def csv_export(
        self,
        row_type: ScopeLike,
        col_type: ScopeLike,
        sink: Optional[Callable[[str], Any]] = None,
    ) -> str:
        """Build the CSV text and hand it to ``sink`` when one is given."""
        content = self.export_text(row_type, col_type)
        if sink is not None:
            sink(content)
        return content

    def pdf_export(self, row_type: ScopeLike, col_type: ScopeLike) -> bytes:
        """Build the layout and render it into PDF bytes."""
        layout = self.export_document(row_type, col_type)
        pdf_bytes = self.document_renderer.render(layout)
        logger.info(f"PDF export rendered: {len(pdf_bytes)} bytes")
        return pdf_bytes
