from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine

from translations_import.config import Settings
from translations_import.database import session_scope
from translations_import.dotting import stringify
from translations_import.exceptions import TranslationColumnError
from translations_import.models import TranslationRow
from translations_import.tables.base import BaseTable
from translations_import.tables.enums import TranslationsTableAction

logger = logging.getLogger(__name__)


def build_translations_table(settings: Settings, metadata: MetaData | None = None) -> Table:
    metadata = metadata if metadata is not None else MetaData()
    return Table(
        settings.table,
        metadata,
        Column(settings.id_column, Integer, primary_key=True, autoincrement=True),
        Column(settings.group_column, String(255), nullable=False),
        Column(settings.key_column, String(255), nullable=False),
        Column(settings.translations_column, Text, nullable=False),
        UniqueConstraint(
            settings.group_column,
            settings.key_column,
            name=f"uq_{settings.table}_group_key",
        ),
    )


def encode_translations(translations: Mapping[str, str | None]) -> str:
    return json.dumps(dict(translations), ensure_ascii=False)


def decode_translations(raw: Any, *, group: str, key: str) -> Dict[str, str | None]:
    if raw is None or raw == "":
        return {}
    if isinstance(raw, dict):
        decoded = raw
    else:
        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            raise TranslationColumnError(group, key, f"invalid JSON ({exc})") from exc
    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        raise TranslationColumnError(group, key, "expected a JSON object")
    # Locales stored as null stay present so they can still be overwritten.
    return {
        str(locale): None if value is None else stringify(value)
        for locale, value in decoded.items()
    }


class TranslationsTable(BaseTable):
    """Gateway to the translations table; every write commits on its own."""

    def __init__(self, engine: Engine, settings: Settings) -> None:
        self.engine = engine
        self.settings = settings
        self.table = build_translations_table(settings)
        self.__tablename__ = settings.table

    @property
    def _group(self) -> Column:
        return self.table.c[self.settings.group_column]

    @property
    def _key(self) -> Column:
        return self.table.c[self.settings.key_column]

    @property
    def _translations(self) -> Column:
        return self.table.c[self.settings.translations_column]

    def _to_row(self, mapping: Mapping[str, Any]) -> TranslationRow:
        group = mapping[self.settings.group_column]
        key = mapping[self.settings.key_column]
        return TranslationRow(
            id=mapping[self.settings.id_column],
            group=group,
            key=key,
            translations=decode_translations(
                mapping[self.settings.translations_column], group=group, key=key
            ),
        )

    def ensure_table(self) -> None:
        self.table.metadata.create_all(self.engine, tables=[self.table], checkfirst=True)
        self._log(TranslationsTableAction.ENSURE_TABLE)

    def get(self, group: str, key: str) -> TranslationRow | None:
        stmt = (
            select(self.table)
            .where(self._key == key)
            .where(self._group == group)
            .limit(1)
        )
        with session_scope(self.engine) as conn:
            mapping = conn.execute(stmt).mappings().first()
        row = self._to_row(mapping) if mapping is not None else None
        self._log(TranslationsTableAction.GET, group=group, key=key, exists=bool(row))
        return row

    def exists(self, group: str, key: str) -> bool:
        stmt = (
            select(self.table.c[self.settings.id_column])
            .where(self._key == key)
            .where(self._group == group)
            .limit(1)
        )
        with session_scope(self.engine) as conn:
            found = conn.execute(stmt).first() is not None
        self._log(TranslationsTableAction.EXISTS, group=group, key=key, exists=found)
        return found

    def create(self, group: str, key: str, translations: Mapping[str, str]) -> None:
        stmt = insert(self.table).values(
            {
                self.settings.group_column: group,
                self.settings.key_column: key,
                self.settings.translations_column: encode_translations(translations),
            }
        )
        with session_scope(self.engine) as conn:
            conn.execute(stmt)
        self._log(
            TranslationsTableAction.CREATE,
            group=group,
            key=key,
            locales=list(translations),
        )

    def update_translations(
        self, group: str, key: str, translations: Mapping[str, str | None]
    ) -> None:
        stmt = (
            update(self.table)
            .where(self._key == key)
            .where(self._group == group)
            .values({self.settings.translations_column: encode_translations(translations)})
        )
        with session_scope(self.engine) as conn:
            conn.execute(stmt)
        self._log(
            TranslationsTableAction.UPDATE_TRANSLATIONS,
            group=group,
            key=key,
            locales=list(translations),
        )

    def list_all(self) -> list[TranslationRow]:
        stmt = select(self.table).order_by(self._group, self._key)
        with session_scope(self.engine) as conn:
            rows = [self._to_row(mapping) for mapping in conn.execute(stmt).mappings()]
        self._log(TranslationsTableAction.LIST_ALL, count=len(rows))
        return rows
