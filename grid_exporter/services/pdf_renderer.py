"""PDF rendering of declarative table layouts with reportlab."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Dict, List, Optional, Sequence, Tuple

from reportlab.lib import colors, pagesizes
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Spacer, Table, TableStyle

from ..config.constants import FLEX_WIDTH

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

NAMED_LAYOUTS = ("noBorders", "headerLineOnly", "lightHorizontalLines")


class PdfDocumentRenderer:
    """Renders the layout built by ``PdfLayoutBuilder`` into PDF bytes."""

    def __init__(self, margin: float = 10 * mm):
        self.margin = margin

    def render(self, layout: Dict[str, Any]) -> bytes:
        """Build a PDF file from ``layout``."""
        page_size = self._resolve_page_size(
            layout.get("pageSize", "A4"), layout.get("pageOrientation", "landscape")
        )
        output = BytesIO()
        doc = SimpleDocTemplate(
            output,
            pagesize=page_size,
            leftMargin=self.margin,
            rightMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin,
        )
        styles = layout.get("styles", {})
        default_style = layout.get("defaultStyle", {})

        story: List[Any] = [Spacer(1, 0)]
        for block in layout.get("content", []):
            table_spec = block.get("table")
            if not table_spec:
                continue
            block_style = styles.get(block.get("style"), {})
            top, bottom = self._vertical_margins(block_style.get("margin"))
            table = self._build_table(
                table_spec, styles, default_style, layout.get("layout"), doc.width
            )
            if table is None:
                continue
            story.append(Spacer(1, top))
            story.append(table)
            story.append(Spacer(1, bottom))

        doc.build(story)
        output.seek(0)
        return output.getvalue()

    def _build_table(
        self,
        table_spec: Dict[str, Any],
        styles: Dict[str, Dict[str, Any]],
        default_style: Dict[str, Any],
        table_layout: Any,
        frame_width: float,
    ) -> Optional[Table]:
        body = table_spec.get("body", [])
        if not body or not body[0]:
            logger.warning("Table layout has no columns, nothing to render")
            return None

        header_rows = int(table_spec.get("headerRows", 0))
        matrix = [[self._cell_text(cell) for cell in row] for row in body]
        col_widths = self._resolve_widths(table_spec.get("widths", []), len(body[0]), frame_width)

        commands: List[tuple] = [("VALIGN", (0, 0), (-1, -1), "MIDDLE")]
        commands.extend(self._style_commands(default_style, (0, 0), (-1, -1)))
        for row_index, row in enumerate(body):
            for col_index, cell in enumerate(row):
                if isinstance(cell, dict) and cell.get("style") in styles:
                    position = (col_index, row_index)
                    commands.extend(self._style_commands(styles[cell["style"]], position, position))
        commands.extend(self._border_commands(table_layout, header_rows))

        table = Table(matrix, colWidths=col_widths, repeatRows=header_rows)
        table.setStyle(TableStyle(commands))
        return table

    @staticmethod
    def _cell_text(cell: Any) -> str:
        if isinstance(cell, dict):
            return str(cell.get("text", ""))
        return "" if cell is None else str(cell)

    @staticmethod
    def _resolve_page_size(name: str, orientation: str) -> Tuple[float, float]:
        size = getattr(pagesizes, str(name).upper(), None)
        if not (isinstance(size, tuple) and len(size) == 2):
            logger.warning(f"Unknown page size {name!r}, using A4")
            size = pagesizes.A4
        if orientation == "portrait":
            return pagesizes.portrait(size)
        return pagesizes.landscape(size)

    @staticmethod
    def _resolve_widths(widths: Sequence[Any], column_count: int, frame_width: float) -> List[Optional[float]]:
        """Flexible columns share the frame width left over by the fixed ones."""
        widths = list(widths)[:column_count]
        widths += [FLEX_WIDTH] * (column_count - len(widths))
        fixed_total = sum(width for width in widths if width != FLEX_WIDTH)
        flex_count = sum(1 for width in widths if width == FLEX_WIDTH)
        flex_width = None
        if flex_count:
            remaining = frame_width - fixed_total
            # None lets reportlab size the column from its content
            flex_width = remaining / flex_count if remaining > 0 else None
        return [flex_width if width == FLEX_WIDTH else float(width) for width in widths]

    @staticmethod
    def _vertical_margins(margin: Any) -> Tuple[float, float]:
        if margin is None:
            return 0, 0
        if isinstance(margin, (int, float)):
            return margin, margin
        margin = list(margin)
        if len(margin) == 4:
            return margin[1], margin[3]
        if len(margin) == 2:
            return margin[1], margin[1]
        return 0, 0

    @staticmethod
    def _style_commands(style: Dict[str, Any], start: Cell, end: Cell) -> List[tuple]:
        """Translate a named style dict into reportlab table style commands."""
        commands = []
        if not style:
            return commands
        font_size = style.get("fontSize")
        if font_size:
            commands.append(("FONTSIZE", start, end, font_size))
            commands.append(("LEADING", start, end, font_size * 1.2))
        bold = style.get("bold", False)
        italics = style.get("italics", False)
        if bold or italics:
            font_name = {
                (True, False): "Helvetica-Bold",
                (False, True): "Helvetica-Oblique",
                (True, True): "Helvetica-BoldOblique",
            }[(bool(bold), bool(italics))]
            commands.append(("FONTNAME", start, end, font_name))
        if style.get("color"):
            commands.append(("TEXTCOLOR", start, end, colors.toColor(style["color"])))
        if style.get("fillColor"):
            commands.append(("BACKGROUND", start, end, colors.toColor(style["fillColor"])))
        if style.get("alignment"):
            commands.append(("ALIGN", start, end, str(style["alignment"]).upper()))
        return commands

    @staticmethod
    def _border_commands(table_layout: Any, header_rows: int) -> List[tuple]:
        header_end = max(header_rows - 1, 0)
        if table_layout is None:
            return [("GRID", (0, 0), (-1, -1), 0.25, colors.grey)]
        if table_layout == "noBorders":
            return []
        if table_layout == "headerLineOnly":
            return [("LINEBELOW", (0, header_end), (-1, header_end), 1, colors.black)]
        if table_layout == "lightHorizontalLines":
            return [
                ("LINEBELOW", (0, 0), (-1, -1), 0.5, colors.lightgrey),
                ("LINEBELOW", (0, header_end), (-1, header_end), 1, colors.black),
            ]
        if isinstance(table_layout, dict):
            commands = []
            h_width = table_layout.get("hLineWidth", 1)
            v_width = table_layout.get("vLineWidth", 1)
            h_color = colors.toColor(table_layout.get("hLineColor", "black"))
            v_color = colors.toColor(table_layout.get("vLineColor", "black"))
            if h_width:
                commands.append(("LINEABOVE", (0, 0), (-1, -1), h_width, h_color))
                commands.append(("LINEBELOW", (0, -1), (-1, -1), h_width, h_color))
            if v_width:
                commands.append(("LINEBEFORE", (0, 0), (-1, -1), v_width, v_color))
                commands.append(("LINEAFTER", (-1, 0), (-1, -1), v_width, v_color))
            return commands
        logger.warning(
            f"Unknown table layout {table_layout!r}, expected a dict or one of {NAMED_LAYOUTS}"
        )
        return [("GRID", (0, 0), (-1, -1), 0.25, colors.grey)]
