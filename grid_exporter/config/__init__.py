"""Configuration module."""
from .constants import FLEX_WIDTH, ExportScope
from .logging_config import setup_logging
from .settings import ExporterConfig

__all__ = ["ExporterConfig", "ExportScope", "FLEX_WIDTH", "setup_logging"]
