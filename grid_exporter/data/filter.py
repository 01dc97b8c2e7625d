"""Row visibility filtering for grid data."""
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import pandas as pd


@dataclass(frozen=True)
class ColumnFilter:
    """A filter on one column.

    ``values`` keeps rows whose cell is one of the given values, ``term`` keeps
    rows whose text contains the term (case-insensitive). Both may be set.
    """

    field: str
    values: Optional[Sequence[Any]] = None
    term: Optional[str] = None


class DataFilter:
    """Computes which grid rows pass the active filters."""

    def build_mask(self, df: pd.DataFrame, filters: Iterable[ColumnFilter]) -> pd.Series:
        """Return a boolean mask aligned with ``df``; filters are combined with AND."""
        mask = pd.Series(True, index=df.index)
        for column_filter in filters:
            mask &= self.filter_mask(df, column_filter)
        return mask

    def filter_mask(self, df: pd.DataFrame, column_filter: ColumnFilter) -> pd.Series:
        """Mask for a single filter, filters on unknown columns keep every row."""
        if column_filter.field not in df.columns:
            return pd.Series(True, index=df.index)

        series = df[column_filter.field]
        mask = pd.Series(True, index=df.index)
        if column_filter.values is not None:
            mask &= self.filter_by_values(series, column_filter.values)
        if column_filter.term:
            mask &= self.filter_by_term(series, column_filter.term)
        return mask

    @staticmethod
    def filter_by_values(series: pd.Series, values: Sequence[Any]) -> pd.Series:
        """Keep rows whose value is in ``values``."""
        return series.isin(list(values))

    @staticmethod
    def filter_by_term(series: pd.Series, term: str) -> pd.Series:
        """Keep rows whose text contains ``term``, ignoring case."""
        text = series.astype(str).where(series.notna(), "")
        return text.str.contains(term, case=False, regex=False, na=False)
