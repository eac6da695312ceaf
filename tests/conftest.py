from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
from sqlalchemy.engine import Engine

from translations_import.config import Settings
from translations_import.database import create_db_engine
from translations_import.lang_directory import LangDirectory
from translations_import.tables.translations import TranslationsTable


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env or exported variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("TRANSLATIONS_IMPORT_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("ENV_FOR_DYNACONF", raising=False)


@pytest.fixture
def lang_path(tmp_path: Path) -> Path:
    path = tmp_path / "lang"
    path.mkdir()
    return path


@pytest.fixture
def write_group(lang_path: Path) -> Callable[[str, str, Any], Path]:
    def _write(locale: str, group: str, data: Any) -> Path:
        target = lang_path / locale / f"{group}.json"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'translations.db'}"


@pytest.fixture
def settings(database_url: str, lang_path: Path) -> Settings:
    return Settings(database_url=database_url, lang_path=lang_path)


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    engine = create_db_engine(settings.database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def table(engine: Engine, settings: Settings) -> TranslationsTable:
    table = TranslationsTable(engine, settings)
    table.ensure_table()
    return table


@pytest.fixture
def lang_directory(lang_path: Path) -> LangDirectory:
    return LangDirectory(lang_path)
