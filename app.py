"""
Streamlit app for browsing a table and exporting it as CSV or PDF.

This is the main entry point for the demo application.
"""
import streamlit as st

from grid_exporter import ColumnFilter, DataFrameGrid, ExportCoordinator, ExporterConfig, setup_logging
from grid_exporter.data import GridDataLoader
from grid_exporter.data.loader import SUPPORTED_EXTENSIONS
from grid_exporter.ui import ExporterMenu


class GridExportApp:
    """Main application class that coordinates all components."""

    def __init__(self):
        self.config = ExporterConfig()
        self.data_loader = GridDataLoader()

    def run(self) -> None:
        """Run the main application."""
        setup_logging("INFO")
        st.set_page_config(page_title="Grid Exporter", layout="wide")
        st.title("Grid Exporter")

        uploaded = st.file_uploader(
            "Table (CSV or Excel)",
            type=list(SUPPORTED_EXTENSIONS),
            accept_multiple_files=False,
        )
        if uploaded is None:
            st.info("Upload a file to start.")
            return

        df = self.data_loader.load(uploaded.getvalue(), uploaded.name)
        grid = DataFrameGrid(df, enable_selection=True)
        self._render_grid_controls(grid)

        visible_rows = grid.get_visible_rows()
        visible_fields = [column.field for column in grid.columns if column.visible]
        preview = grid.data.loc[[row.index for row in visible_rows], visible_fields]
        st.dataframe(preview, use_container_width=True)
        st.caption(f"{len(visible_rows)} of {len(grid.rows)} rows visible")

        coordinator = ExportCoordinator(grid, self.config)
        ExporterMenu(coordinator, self.config, grid_name=uploaded.name.rsplit(".", 1)[0]).render()

    @staticmethod
    def _render_grid_controls(grid: DataFrameGrid) -> None:
        """Render column, filter, sort and selection controls."""
        fields = [column.field for column in grid.columns]
        col1, col2, col3 = st.columns(3)

        with col1:
            shown = st.multiselect("Visible columns", fields, default=fields)
            for field in fields:
                grid.set_column_visible(field, field in shown)

        with col2:
            filter_field = st.selectbox("Filter column", ["(none)"] + fields)
            term = st.text_input("Contains")
            if filter_field != "(none)" and term:
                grid.add_filter(ColumnFilter(filter_field, term=term))

        with col3:
            sort_field = st.selectbox("Sort by", ["(none)"] + fields)
            ascending = st.checkbox("Ascending", value=True)
            if sort_field != "(none)":
                grid.sort_by(sort_field, ascending)

        selected = st.multiselect("Selected rows", list(range(len(grid.rows))))
        for row in grid.rows:
            if row.index in selected:
                grid.selection.select_row(row)


def main():
    """Application entry point."""
    app = GridExportApp()
    app.run()


if __name__ == "__main__":
    main()
