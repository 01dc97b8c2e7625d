"""Text normalization helpers for column names and file names."""
import re
import unicodedata


class TextNormalizer:
    """Handles text normalization operations."""

    @staticmethod
    def readable_column_name(value) -> str:
        """Turn a field key like ``first_name`` or ``orderTotal`` into a label."""
        if value is None:
            return ""
        text = str(value)
        text = re.sub(r"_+", " ", text)
        if text.isupper():
            text = text.lower()
        text = re.sub(r"([a-z0-9])(?=[A-Z])", r"\1 ", text)
        words = [word[:1].upper() + word[1:] for word in text.split()]
        return " ".join(words)

    @staticmethod
    def normalize_name(value: str) -> str:
        """Lower-case, strip accents and collapse non-alphanumerics to single spaces."""
        value = str(value).strip().lower()
        value = unicodedata.normalize("NFKD", value)
        cleaned_chars = []
        for ch in value:
            if unicodedata.combining(ch):
                continue
            if ch.isalnum():
                cleaned_chars.append(ch)
            else:
                cleaned_chars.append(" ")
        value = "".join(cleaned_chars)
        return " ".join(value.split())

    @staticmethod
    def build_filename_base(grid_name: str, row_scope: str) -> str:
        """Build a safe base filename for an export."""
        safe_grid = TextNormalizer.normalize_name(grid_name).replace(" ", "_") or "grid"
        safe_scope = TextNormalizer.normalize_name(row_scope).replace(" ", "_") or "all"
        return f"{safe_grid}_{safe_scope}"
