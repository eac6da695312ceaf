from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from translations_import.dotting import dot, is_empty, stringify
from translations_import.lang_directory import LangDirectory
from translations_import.models import (
    FlattenedTranslation,
    ImportOptions,
    ImportResult,
    ReconcileOutcome,
)
from translations_import.tables.translations import TranslationsTable

logger = logging.getLogger(__name__)


class Importer:
    """Reconcile translation files with the rows of the translations table."""

    def __init__(
        self,
        table: TranslationsTable,
        lang_directory: LangDirectory,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.table = table
        self.lang_directory = lang_directory
        self.echo = echo

    def flatten(self, group: str, locale: str) -> Iterator[FlattenedTranslation]:
        tree = self.lang_directory.load(group, locale)
        for key, value in dot(tree).items():
            yield FlattenedTranslation(group=group, key=key, locale=locale, value=value)

    def run(self, options: ImportOptions) -> ImportResult:
        result = ImportResult()
        groups = self.lang_directory.groups_with_locales()

        for group, locales in groups.items():
            if not options.group_can_be_imported(group):
                self.echo(f"Skipping group: {group}")
                continue

            for locale in locales:
                if not options.locale_can_be_imported(locale):
                    self.echo(f"Skipping locale: {locale}")
                    continue

                self.echo(f"Importing group: {group} for locale: {locale}")
                for item in self.flatten(group, locale):
                    outcome = self.reconcile(
                        item.group,
                        item.key,
                        item.locale,
                        item.value,
                        overwrite=options.overwrite_existing,
                    )
                    result.record(outcome)

        if result.missing_locale:
            logger.warning(
                "%s existing translation(s) were left untouched because their "
                "row has no entry for the imported locale",
                result.missing_locale,
            )
        self.echo(result.summary())
        return result

    def reconcile(
        self,
        group: str,
        key: str,
        locale: str,
        value: Any,
        overwrite: bool = False,
    ) -> ReconcileOutcome:
        if self.table.exists(group, key):
            if not overwrite:
                return ReconcileOutcome.SKIPPED_EXISTING
            if self.update_locale(group, key, locale, value):
                return ReconcileOutcome.UPDATED
            return ReconcileOutcome.SKIPPED_MISSING_LOCALE

        if is_empty(value):
            logger.debug("Skipping empty translation %s.%s [%s]", group, key, locale)
            return ReconcileOutcome.SKIPPED_EMPTY

        self.table.create(group, key, {locale: stringify(value)})
        return ReconcileOutcome.CREATED

    def update_locale(self, group: str, key: str, locale: str, value: Any) -> bool:
        """Overwrite ``locale`` in an existing row; locales not yet present are not added."""
        row = self.table.get(group, key)
        if row is None or not row.has_locale(locale):
            logger.debug(
                "Locale %s is not present in %s.%s, leaving row unchanged",
                locale,
                group,
                key,
            )
            return False

        translations = dict(row.translations)
        translations[locale] = stringify(value)
        self.table.update_translations(group, key, translations)
        return True
