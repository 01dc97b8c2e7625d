"""UI components module."""
from .exporter_menu import ExporterMenu, MenuItem, build_menu_items

__all__ = ["ExporterMenu", "MenuItem", "build_menu_items"]
