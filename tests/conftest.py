"""
Shared fixtures for the grid exporter tests.
"""

import pandas as pd
import pytest

from grid_exporter import DataFrameGrid, ExporterConfig
from grid_exporter.services import ExportHeader


@pytest.fixture
def people_df() -> pd.DataFrame:
    """Small table mixing text, numbers, booleans and missing values."""
    return pd.DataFrame(
        {
            "name": ["Bob", 'Frank "The Tank"', "Alice"],
            "age": [42, 35, 29],
            "active": [True, False, True],
            "notes": [None, "ok", "late"],
        }
    )


@pytest.fixture
def grid(people_df) -> DataFrameGrid:
    """Grid with the selection feature enabled."""
    return DataFrameGrid(people_df, enable_selection=True)


@pytest.fixture
def plain_grid(people_df) -> DataFrameGrid:
    """Grid without a selection feature."""
    return DataFrameGrid(people_df)


@pytest.fixture
def config() -> ExporterConfig:
    return ExporterConfig()


@pytest.fixture
def mixed_width_headers() -> list:
    return [
        ExportHeader(name="id", display_name="Id", width=100, align="right"),
        ExportHeader(name="name", display_name="Name", width="*", align="left"),
        ExportHeader(name="city", display_name="City", width="50%", align="left"),
    ]
