from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from dynaconf import Dynaconf
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SETTINGS_SECTION = "translations_import"


def _strip_wrapping_quotes(value: str) -> str:
    text = value.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {'"', "'"}:
        return text[1:-1].strip()
    return text


def parse_string_list(value: Any) -> List[str]:
    """Split a comma separated option (or JSON list) into clean items."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(item).strip() for item in value if str(item).strip()]
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return [str(item).strip() for item in parsed if str(item).strip()]
        text = _strip_wrapping_quotes(text)
        return [part.strip() for part in text.split(",") if part.strip()]
    return [str(value).strip()] if str(value).strip() else []


class Settings(BaseSettings):
    database_url: str = "sqlite:///./translations.db"
    lang_path: Path = Path("resources/lang")
    table: str = "translations"
    id_column: str = "id"
    group_column: str = "group"
    key_column: str = "key"
    translations_column: str = "translations"
    # Keep Any here so env parser doesn't force JSON for list fields.
    ignore_locales: Any = []
    ignore_groups: Any = []

    @field_validator(
        "table",
        "id_column",
        "group_column",
        "key_column",
        "translations_column",
        mode="before",
    )
    @classmethod
    def _normalize_identifier(cls, value: Any) -> str:
        text = _strip_wrapping_quotes(str(value or ""))
        if not text:
            raise ValueError("table and column names must not be empty")
        return text

    @field_validator("database_url", mode="before")
    @classmethod
    def _normalize_database_url(cls, value: Any) -> str:
        text = _strip_wrapping_quotes(str(value or ""))
        if not text:
            raise ValueError("database_url must not be empty")
        return text

    @field_validator("ignore_locales", "ignore_groups", mode="before")
    @classmethod
    def _split_names(cls, value: Any) -> List[str]:
        return parse_string_list(value)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRANSLATIONS_IMPORT_",
        extra="ignore",
    )


def _read_settings_file(settings_file: str | Path) -> dict[str, Any]:
    path = Path(settings_file)
    if not path.is_file():
        raise FileNotFoundError(f"Settings file not found: {path}")
    source = Dynaconf(
        envvar_prefix=False,
        environments=True,
        env_switcher="ENV_FOR_DYNACONF",
        settings_files=[str(path)],
        load_dotenv=False,
    )
    section = source.get(SETTINGS_SECTION) or {}
    return {str(name).lower(): value for name, value in section.items()}


def load_settings(settings_file: str | Path | None = None, **overrides: Any) -> Settings:
    """Build settings from the environment, an optional settings file and overrides.

    Precedence, highest first: explicit overrides (``None`` values are
    ignored), the ``[<env>.translations_import]`` section of the settings
    file, ``TRANSLATIONS_IMPORT_*`` environment variables, defaults.
    """
    values: dict[str, Any] = {}
    if settings_file is not None:
        values.update(_read_settings_file(settings_file))
    values.update({name: value for name, value in overrides.items() if value is not None})
    return Settings(**values)
