"""Constants shared by the export pipeline."""
from enum import Enum


class ExportScope(str, Enum):
    """Which rows or columns take part in an export.

    ``SELECTED`` only applies to rows, selecting a subset of columns is not
    supported.
    """

    ALL = "all"
    VISIBLE = "visible"
    SELECTED = "selected"


FLEX_WIDTH = "*"

# Placeholders replaced in the CSV link template
CSV_CONTENT = "CSV_CONTENT"
LINK_LABEL = "LINK_LABEL"

NUMERIC_COLUMN_TYPE = "number"
