"""Declarative PDF layout for an extracted table.

The layout is a plain dict describing page orientation, one table block with
its column widths and body, and the named styles. ``PdfDocumentRenderer``
turns it into a file; any other renderer understanding the same keys can be
used instead.

Column widths are redistributed so that the table fits the configured
``PDF_MAX_GRID_WIDTH``:

1. absolute widths are summed into a base width;
2. every flexible ``"*"`` column adds 100 to an extra width and stays flexible;
3. every ``"<n>%"`` column resolves to n percent of the base width, which is
   also added to the extra width;
4. each non-flexible width is scaled by ``max_width / (base + extra)``.
"""
import copy
import logging
import math
import numbers
import re
from typing import Any, Dict, List, Sequence, Union

from ..config.constants import FLEX_WIDTH
from ..config.settings import ExporterConfig
from .table_extractor import ExportHeader
from .value_formatter import ValueFormatter

logger = logging.getLogger(__name__)

PERCENT_PATTERN = re.compile(r"(\d+)%")
FLEX_COLUMN_UNITS = 100

LayoutWidth = Union[float, str]


class PdfLayoutBuilder:
    """Builds the layout dict handed to the document renderer."""

    def __init__(self, config: ExporterConfig = None, formatter: ValueFormatter = None):
        self.config = config or ExporterConfig()
        self.formatter = formatter or ValueFormatter()

    def build(self, headers: Sequence[ExportHeader], rows: Sequence[Sequence[Any]]) -> Dict[str, Any]:
        """Assemble the layout for ``headers`` and ``rows``."""
        widths = self.calculate_header_widths(headers)
        header_row = [{"text": header.display_name, "style": "tableHeader"} for header in headers]
        body = [header_row] + [self.format_row(row) for row in rows]

        layout = {
            "pageOrientation": self.config.PDF_ORIENTATION,
            "pageSize": self.config.PDF_PAGE_SIZE,
            "content": [
                {
                    "style": "tableStyle",
                    "table": {
                        "headerRows": 1,
                        "widths": widths,
                        "body": body,
                    },
                }
            ],
            "styles": {
                "tableStyle": copy.deepcopy(self.config.PDF_TABLE_STYLE),
                "tableHeader": copy.deepcopy(self.config.PDF_TABLE_HEADER_STYLE),
            },
            "defaultStyle": copy.deepcopy(self.config.PDF_DEFAULT_STYLE),
        }
        if self.config.PDF_LAYOUT:
            layout["layout"] = copy.deepcopy(self.config.PDF_LAYOUT)
        return layout

    def format_row(self, row: Sequence[Any]) -> List[str]:
        return [self.formatter.format_for_document(value) for value in row]

    def calculate_header_widths(self, headers: Sequence[ExportHeader]) -> List[LayoutWidth]:
        """Page widths for ``headers``; the headers themselves are left untouched."""
        widths = [self._normalize_width(header.width) for header in headers]
        base_width = sum(width for width in widths if isinstance(width, float))

        resolved: List[LayoutWidth] = list(widths)
        extra_width = 0.0
        for index, width in enumerate(widths):
            if width == FLEX_WIDTH:
                extra_width += FLEX_COLUMN_UNITS
                continue
            if isinstance(width, str):
                percent = int(PERCENT_PATTERN.fullmatch(width).group(1))
                resolved[index] = base_width * percent / 100
                extra_width += resolved[index]

        total_width = base_width + extra_width
        logger.debug(
            f"Column widths: base={base_width} extra={extra_width} total={total_width}"
        )
        if not total_width:
            return [FLEX_WIDTH] * len(resolved)

        max_width = self.config.PDF_MAX_GRID_WIDTH
        return [
            width if width == FLEX_WIDTH else width * max_width / total_width
            for width in resolved
        ]

    @staticmethod
    def _normalize_width(width: Any) -> LayoutWidth:
        """Absolute widths become floats, percentages stay strings, anything else is flexible."""
        if isinstance(width, bool) or width is None:
            return FLEX_WIDTH
        if isinstance(width, numbers.Real) and math.isfinite(width):
            return float(width)
        if isinstance(width, str):
            text = width.strip()
            if text == FLEX_WIDTH:
                return FLEX_WIDTH
            if PERCENT_PATTERN.fullmatch(text):
                return text
            try:
                value = float(text)
            except ValueError:
                value = None
            if value is not None and math.isfinite(value):
                return value
        logger.warning(f"Unrecognized column width {width!r}, treating it as flexible")
        return FLEX_WIDTH
