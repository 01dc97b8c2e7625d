"""Cell value formatting for CSV and PDF exports."""
import datetime as dt
import json
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd


class CellKind(Enum):
    EMPTY = "empty"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class CellValue:
    """A raw cell value tagged with the kind that decides its formatting."""

    kind: CellKind
    raw: Any

    @classmethod
    def of(cls, value: Any) -> "CellValue":
        if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
            return cls(CellKind.EMPTY, None)
        # bool before numbers, bool is an int subclass
        if isinstance(value, (bool, np.bool_)):
            return cls(CellKind.BOOLEAN, bool(value))
        if isinstance(value, numbers.Number):
            return cls(CellKind.NUMBER, value)
        if isinstance(value, str):
            return cls(CellKind.TEXT, value)
        return cls(CellKind.STRUCTURED, value)


class ValueFormatter:
    """Turns any cell value into a string that is safe for the target format.

    Formatting never raises: every value maps to a string.
    """

    def format_for_text(self, value: Any) -> str:
        """Format a value as a CSV field; strings are quoted with ``"`` doubled."""
        cell = CellValue.of(value)
        if cell.kind is CellKind.EMPTY:
            return ""
        if cell.kind is CellKind.NUMBER:
            return self._format_number(cell.raw)
        if cell.kind is CellKind.BOOLEAN:
            return self._format_boolean(cell.raw)
        if cell.kind is CellKind.TEXT:
            return '"' + cell.raw.replace('"', '""') + '"'
        if cell.kind is CellKind.STRUCTURED:
            return self._to_json(cell.raw)
        raise AssertionError(f"Unhandled cell kind: {cell.kind}")

    def format_for_document(self, value: Any) -> str:
        """Format a value as PDF cell text; quotes are doubled but not wrapped."""
        cell = CellValue.of(value)
        if cell.kind is CellKind.EMPTY:
            return ""
        if cell.kind is CellKind.NUMBER:
            return self._format_number(cell.raw)
        if cell.kind is CellKind.BOOLEAN:
            return self._format_boolean(cell.raw)
        if cell.kind is CellKind.TEXT:
            return cell.raw.replace('"', '""')
        if cell.kind is CellKind.STRUCTURED:
            text = self._to_json(cell.raw)
            if text.startswith('"'):
                text = text[1:]
            if text.endswith('"'):
                text = text[:-1]
            return text
        raise AssertionError(f"Unhandled cell kind: {cell.kind}")

    @staticmethod
    def _format_number(value: numbers.Number) -> str:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def _format_boolean(value: bool) -> str:
        return "TRUE" if value else "FALSE"

    @staticmethod
    def _json_default(value: Any) -> Any:
        if isinstance(value, (dt.date, dt.time, pd.Timestamp)):
            return value.isoformat()
        if isinstance(value, np.generic):
            return value.item()
        if isinstance(value, np.ndarray):
            return value.tolist()
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=repr)
        return str(value)

    @classmethod
    def _to_json(cls, value: Any) -> str:
        """Compact JSON for structured values, ``repr`` when JSON cannot encode them."""
        try:
            return json.dumps(value, default=cls._json_default, separators=(",", ":"))
        except (TypeError, ValueError, RecursionError):
            return repr(value)
