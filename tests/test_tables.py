from __future__ import annotations

import pytest
from sqlalchemy import insert

from translations_import.config import Settings
from translations_import.exceptions import TranslationColumnError
from translations_import.tables.translations import TranslationsTable


def test_create_and_get_round_trip(table: TranslationsTable) -> None:
    table.create("messages", "welcome", {"en": "Hi", "ar": "مرحبا"})

    row = table.get("messages", "welcome")
    assert row is not None
    assert row.group == "messages"
    assert row.key == "welcome"
    assert row.translations == {"en": "Hi", "ar": "مرحبا"}
    assert table.exists("messages", "welcome")
    assert not table.exists("messages", "goodbye")
    assert not table.exists("other", "welcome")


def test_update_translations_replaces_whole_map(table: TranslationsTable) -> None:
    table.create("messages", "welcome", {"en": "Hi"})
    table.update_translations("messages", "welcome", {"en": "Hello", "fr": "Salut"})

    row = table.get("messages", "welcome")
    assert row is not None
    assert row.translations == {"en": "Hello", "fr": "Salut"}


def test_custom_table_and_column_names(engine, database_url: str, lang_path) -> None:
    settings = Settings(
        database_url=database_url,
        lang_path=lang_path,
        table="language_lines",
        id_column="line_id",
        group_column="namespace",
        key_column="name",
        translations_column="text",
    )
    table = TranslationsTable(engine, settings)
    table.ensure_table()
    table.create("messages", "welcome", {"en": "Hi"})

    assert table.table.name == "language_lines"
    assert [row.key for row in table.list_all()] == ["welcome"]


def test_invalid_translations_column_raises(table: TranslationsTable, engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(table.table).values(
                {"group": "messages", "key": "broken", "translations": "[1, 2]"}
            )
        )

    with pytest.raises(TranslationColumnError):
        table.get("messages", "broken")


def test_empty_translations_column_decodes_to_empty_map(table: TranslationsTable, engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(table.table).values({"group": "messages", "key": "blank", "translations": ""})
        )

    row = table.get("messages", "blank")
    assert row is not None
    assert row.translations == {}


def test_stored_non_string_values_are_read_safely(table: TranslationsTable, engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(table.table).values(
                {
                    "group": "messages",
                    "key": "mixed",
                    "translations": '{"en": 3, "fr": null, "de": true, "nl": ["a"]}',
                }
            )
        )

    row = table.get("messages", "mixed")
    assert row is not None
    assert row.translations == {"en": "3", "fr": None, "de": "true", "nl": '["a"]'}
    assert row.has_locale("fr")


def test_exists_does_not_decode_the_translations_column(table: TranslationsTable, engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(table.table).values({"group": "messages", "key": "broken", "translations": "{"})
        )

    assert table.exists("messages", "broken")
    assert not table.exists("messages", "missing")


def test_key_column_is_bounded(table: TranslationsTable) -> None:
    assert table.table.c["key"].type.length == 255
