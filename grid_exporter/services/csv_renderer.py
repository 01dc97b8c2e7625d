"""Delimited text (CSV) rendering of extracted tables."""
from typing import Any, List, Sequence

from .table_extractor import ExportHeader
from .value_formatter import ValueFormatter


class DelimitedTextRenderer:
    """Serializes headers and rows into one CSV string."""

    def __init__(self, formatter: ValueFormatter = None, separator: str = ","):
        self.formatter = formatter or ValueFormatter()
        self.separator = separator

    def render(self, headers: Sequence[ExportHeader], rows: Sequence[Sequence[Any]]) -> str:
        """Header line then one line per row, joined by ``\\n`` without a trailing newline."""
        lines = [self.format_row([header.display_name for header in headers])]
        lines.extend(self.format_row(row) for row in rows)
        return "\n".join(lines)

    def format_row(self, row: Sequence[Any]) -> str:
        fields: List[str] = [self.formatter.format_for_text(value) for value in row]
        return self.separator.join(fields)
