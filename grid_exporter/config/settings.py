"""Exporter configuration settings."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .constants import CSV_CONTENT, LINK_LABEL

VALID_ORIENTATIONS = ("landscape", "portrait")


@dataclass
class ExporterConfig:
    """Configuration container for export options.

    Every option is optional; unset values are filled with the defaults below
    in ``__post_init__``.
    """

    SUPPRESS_BUTTON: bool = False
    LINK_TEMPLATE: str = None
    LINK_LABEL: str = None
    BUTTON_LABEL: str = None
    CSV_SEPARATOR: str = None
    PDF_DEFAULT_STYLE: Dict[str, Any] = None
    PDF_TABLE_STYLE: Dict[str, Any] = None
    PDF_TABLE_HEADER_STYLE: Dict[str, Any] = None
    PDF_ORIENTATION: str = None
    PDF_PAGE_SIZE: str = None
    PDF_MAX_GRID_WIDTH: float = None
    PDF_LAYOUT: Optional[Any] = None

    def __post_init__(self):
        if self.LINK_TEMPLATE is None:
            self.LINK_TEMPLATE = (
                '<span class="grid-exporter-csv-link-span">'
                f'<a href="data:text/csv;charset=UTF-8,{CSV_CONTENT}" download="export.csv">'
                f"{LINK_LABEL}</a></span>"
            )

        if self.LINK_LABEL is None:
            self.LINK_LABEL = "Download CSV"

        if self.BUTTON_LABEL is None:
            self.BUTTON_LABEL = "Export"

        if self.CSV_SEPARATOR is None:
            self.CSV_SEPARATOR = ","
        if not self.CSV_SEPARATOR:
            raise ValueError("CSV_SEPARATOR must be a non-empty string")

        if self.PDF_DEFAULT_STYLE is None:
            self.PDF_DEFAULT_STYLE = {"fontSize": 11}

        if self.PDF_TABLE_STYLE is None:
            self.PDF_TABLE_STYLE = {"margin": [0, 5, 0, 15]}

        if self.PDF_TABLE_HEADER_STYLE is None:
            self.PDF_TABLE_HEADER_STYLE = {"bold": True, "fontSize": 12, "color": "black"}

        if self.PDF_ORIENTATION is None:
            self.PDF_ORIENTATION = "landscape"
        if self.PDF_ORIENTATION not in VALID_ORIENTATIONS:
            raise ValueError(
                f"PDF_ORIENTATION must be one of {VALID_ORIENTATIONS}, got {self.PDF_ORIENTATION!r}"
            )

        if self.PDF_PAGE_SIZE is None:
            self.PDF_PAGE_SIZE = "A4"

        if self.PDF_MAX_GRID_WIDTH is None:
            self.PDF_MAX_GRID_WIDTH = 720
        if self.PDF_MAX_GRID_WIDTH <= 0:
            raise ValueError("PDF_MAX_GRID_WIDTH must be positive")

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "ExporterConfig":
        """Build a config from a loose mapping, keys are matched case-insensitively."""
        known = {name for name in cls.__dataclass_fields__}
        values = {}
        unknown: List[str] = []
        for key, value in options.items():
            name = str(key).upper()
            if name in known:
                values[name] = value
            else:
                unknown.append(str(key))
        if unknown:
            raise ValueError("Unknown exporter options: " + ", ".join(sorted(unknown)))
        return cls(**values)
