from translations_import.tables.base import BaseTableActionEnum


class TranslationsTableAction(BaseTableActionEnum):
    GET = "get"
    EXISTS = "exists"
    CREATE = "create"
    UPDATE_TRANSLATIONS = "update_translations"
    LIST_ALL = "list_all"
    ENSURE_TABLE = "ensure_table"
