"""Utility module."""
from .text_normalizer import TextNormalizer

__all__ = ["TextNormalizer"]
