"""Tabular data loading for the grid."""
import io

import pandas as pd
import streamlit as st

SUPPORTED_EXTENSIONS = ("xlsx", "csv")


class GridDataLoader:
    """Handles loading grid data from uploaded CSV or Excel files."""

    @staticmethod
    @st.cache_data(show_spinner=False)
    def load(file_bytes: bytes, file_name: str = "") -> pd.DataFrame:
        """Load a CSV or Excel file from bytes; the extension picks the reader."""
        name = file_name.lower()
        if name.endswith(".csv"):
            return pd.read_csv(io.BytesIO(file_bytes))
        if name.endswith(".xls"):
            # openpyxl only reads the xlsx format
            raise ValueError(f"Legacy .xls files are not supported: {file_name}")
        return pd.read_excel(io.BytesIO(file_bytes), engine="openpyxl")
