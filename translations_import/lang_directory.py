from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List

from translations_import.exceptions import TranslationFileError

logger = logging.getLogger(__name__)

# Order matters: the first suffix found for a group is the one loaded.
SUPPORTED_SUFFIXES = (".json", ".toml")
EXCLUDED_DIRECTORIES = {"vendor"}


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def _read_file(path: Path) -> Any:
    if path.suffix == ".toml":
        with path.open("rb") as fh:
            return tomllib.load(fh)
    with path.open("r", encoding="utf-8-sig") as fh:
        return json.load(fh)


class LangDirectory:
    """Translation sources laid out as ``<path>/<locale>/<group>.<suffix>``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def locales(self) -> List[str]:
        if not self.path.is_dir():
            raise FileNotFoundError(f"Language directory not found: {self.path}")
        return sorted(
            entry.name
            for entry in self.path.iterdir()
            if entry.is_dir()
            and not _is_hidden(entry)
            and entry.name not in EXCLUDED_DIRECTORIES
        )

    def groups_for_locale(self, locale: str) -> List[str]:
        root = self.path / locale
        groups: set[str] = set()
        for file in root.rglob("*"):
            if not file.is_file() or file.suffix not in SUPPORTED_SUFFIXES:
                continue
            relative = file.relative_to(root)
            if any(_is_hidden(Path(part)) for part in relative.parts):
                continue
            groups.add(relative.with_suffix("").as_posix())
        return sorted(groups)

    def groups_with_locales(self) -> Dict[str, List[str]]:
        """Map every group to the locales that provide it."""
        tree: Dict[str, List[str]] = {}
        for locale in self.locales():
            for group in self.groups_for_locale(locale):
                tree.setdefault(group, []).append(locale)
        logger.debug(
            "Scanned %s: %s group(s) across %s locale(s)",
            self.path,
            len(tree),
            len({locale for locales in tree.values() for locale in locales}),
        )
        return dict(sorted(tree.items()))

    def group_file(self, group: str, locale: str) -> Path:
        base = self.path / locale / group
        for suffix in SUPPORTED_SUFFIXES:
            candidate = base.with_name(base.name + suffix)
            if candidate.is_file():
                return candidate
        raise FileNotFoundError(
            f"No translation file for group '{group}' and locale '{locale}' in {self.path}"
        )

    def load(self, group: str, locale: str) -> Dict[str, Any]:
        path = self.group_file(group, locale)
        data = _read_file(path)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise TranslationFileError(path, "expected a mapping of translations")
        return data
