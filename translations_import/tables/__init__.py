from translations_import.tables.translations import (
    TranslationsTable,
    build_translations_table,
)

__all__ = ["TranslationsTable", "build_translations_table"]
