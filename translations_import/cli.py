from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from translations_import.config import load_settings, parse_string_list
from translations_import.database import create_db_engine
from translations_import.importer import Importer
from translations_import.lang_directory import LangDirectory
from translations_import.models import ImportOptions, ImportResult
from translations_import.tables.translations import TranslationsTable

logger = logging.getLogger(__name__)

COMMAND_NAME = "translations:import"
OVERWRITE_QUESTION = (
    "Are you really sure you want to overwrite all translations in the database ? "
    "This action cannot be undone."
)
LOG_FORMAT = "[%(asctime)s] #%(levelname)-8s %(filename)s:%(lineno)d - %(name)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=COMMAND_NAME,
        description="Import translations from the language directory into the database.",
    )
    parser.add_argument(
        "--ignore-locales",
        default=None,
        help="Locales that should be ignored during the importing process, ex: --ignore-locales=fr,de",
    )
    parser.add_argument(
        "--ignore-groups",
        default=None,
        help="Groups that should not be imported, ex: --ignore-groups=routes,admin/non-editable-stuff",
    )
    parser.add_argument(
        "--overwrite-existing-translations",
        action="store_true",
        help="Overwrite locales already stored for existing keys (asks for confirmation).",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Answer yes to the overwrite confirmation.",
    )
    parser.add_argument("--lang-path", help="Directory holding <locale>/<group> files.")
    parser.add_argument("--database-url", help="SQLAlchemy database URL.")
    parser.add_argument("--settings-file", help="TOML settings file read with dynaconf.")
    parser.add_argument(
        "--create-table",
        action="store_true",
        help="Create the translations table when it does not exist.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def confirm(question: str, ask: Callable[[str], str] = input) -> bool:
    try:
        answer = ask(f"{question} (yes/no) [no]: ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def run(
    argv: Sequence[str] | None = None,
    *,
    ask: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> ImportResult:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    settings = load_settings(
        args.settings_file,
        lang_path=args.lang_path,
        database_url=args.database_url,
    )

    overwrite = False
    if args.overwrite_existing_translations:
        overwrite = args.yes or confirm(OVERWRITE_QUESTION, ask=ask)
        if not overwrite:
            logger.info("Overwrite not confirmed, existing translations are kept")

    ignore_locales = (
        parse_string_list(args.ignore_locales)
        if args.ignore_locales is not None
        else settings.ignore_locales
    )
    ignore_groups = (
        parse_string_list(args.ignore_groups)
        if args.ignore_groups is not None
        else settings.ignore_groups
    )
    options = ImportOptions(
        ignore_locales=frozenset(ignore_locales),
        ignore_groups=frozenset(ignore_groups),
        overwrite_existing=overwrite,
    )

    engine = create_db_engine(settings.database_url)
    try:
        table = TranslationsTable(engine, settings)
        if args.create_table:
            table.ensure_table()
        importer = Importer(table, LangDirectory(settings.lang_path), echo=echo)
        logger.debug("Importing from %s into %s", settings.lang_path, settings.table)
        return importer.run(options)
    finally:
        engine.dispose()


def main() -> None:
    run()


if __name__ == "__main__":
    main()
