"""Export menu rendering for Streamlit."""
from dataclasses import dataclass
from typing import Dict, List, MutableMapping, Optional
from urllib.parse import quote

import streamlit as st

from ..config.constants import CSV_CONTENT, LINK_LABEL, ExportScope
from ..config.settings import ExporterConfig
from ..services import ExportCoordinator
from ..utils import TextNormalizer

# Characters encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class MenuItem:
    title: str
    export_format: str
    row_type: ExportScope
    col_type: ExportScope

    @property
    def key(self) -> str:
        return f"{self.export_format}_{self.row_type.value}"


def build_menu_items() -> List[MenuItem]:
    """The six export actions offered by the menu."""
    items = []
    for export_format in ("csv", "pdf"):
        items.extend(
            [
                MenuItem(f"Export all data as {export_format}", export_format, ExportScope.ALL, ExportScope.ALL),
                MenuItem(
                    f"Export visible data as {export_format}",
                    export_format,
                    ExportScope.VISIBLE,
                    ExportScope.VISIBLE,
                ),
                MenuItem(
                    f"Export selected data as {export_format}",
                    export_format,
                    ExportScope.SELECTED,
                    ExportScope.VISIBLE,
                ),
            ]
        )
    return items


class ExporterMenu:
    """Renders the export menu and the download for the last export."""

    def __init__(
        self,
        coordinator: ExportCoordinator,
        config: ExporterConfig = None,
        grid_name: str = "grid",
        key_prefix: str = "exporter",
    ):
        self.coordinator = coordinator
        self.config = config or coordinator.config
        self.grid_name = grid_name
        self.key_prefix = key_prefix

    def build_csv_link(self, csv_content: str) -> str:
        """Fill the link template with the label and the encoded CSV content."""
        contents = self.config.LINK_TEMPLATE.replace(LINK_LABEL, self.config.LINK_LABEL)
        return contents.replace(CSV_CONTENT, quote(csv_content, safe=URI_COMPONENT_SAFE))

    def run_action(self, item: MenuItem) -> Dict[str, object]:
        """Run one menu action and describe the resulting download."""
        filename = TextNormalizer.build_filename_base(self.grid_name, item.row_type.value)
        if item.export_format == "csv":
            content = self.coordinator.csv_export(item.row_type, item.col_type)
            return {
                "data": content,
                "file_name": f"{filename}.csv",
                "mime": "text/csv",
                "link": self.build_csv_link(content),
            }
        return {
            "data": self.coordinator.pdf_export(item.row_type, item.col_type),
            "file_name": f"{filename}.pdf",
            "mime": "application/pdf",
            "link": None,
        }

    def render(self, cache: Optional[MutableMapping] = None) -> None:
        """Render the menu; the last export is kept in ``cache`` across reruns."""
        if self.config.SUPPRESS_BUTTON:
            return
        if cache is None:
            cache = st.session_state.setdefault(f"{self.key_prefix}_cache", {})
        cache.setdefault("download", None)

        with st.expander(self.config.BUTTON_LABEL):
            for item in build_menu_items():
                if st.button(item.title, key=f"{self.key_prefix}_{item.key}"):
                    cache["download"] = self.run_action(item)

        download = cache.get("download")
        if download is None:
            return
        st.download_button(
            self.config.LINK_LABEL if download["mime"] == "text/csv" else "Download PDF",
            data=download["data"],
            file_name=download["file_name"],
            mime=download["mime"],
            key=f"{self.key_prefix}_download",
        )
        if download["link"]:
            st.markdown(download["link"], unsafe_allow_html=True)
