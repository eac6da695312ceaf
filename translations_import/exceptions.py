from __future__ import annotations

from pathlib import Path


class TranslationsImportError(Exception):
    """Base class for errors raised while importing translations."""


class TranslationFileError(TranslationsImportError, ValueError):
    """Raised when a group file does not hold a mapping of translations."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class TranslationColumnError(TranslationsImportError, ValueError):
    """Raised when a stored translations column is not a JSON object."""

    def __init__(self, group: str, key: str, message: str) -> None:
        super().__init__(f"{group}.{key}: {message}")
        self.group = group
        self.key = key
