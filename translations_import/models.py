from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class TranslationRow(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int | None = Field(None, description="Primary key of the translation row")
    group: str = Field(..., description="Translation group (namespace)")
    key: str = Field(..., description="Dotted key inside the group")
    translations: Dict[str, str | None] = Field(
        default_factory=dict, description="Translated text per locale code"
    )

    def has_locale(self, locale: str) -> bool:
        return locale in self.translations


@dataclass(frozen=True, slots=True)
class FlattenedTranslation:
    group: str
    key: str
    locale: str
    value: Any


@dataclass(frozen=True, slots=True)
class ImportOptions:
    ignore_locales: frozenset[str] = frozenset()
    ignore_groups: frozenset[str] = frozenset()
    overwrite_existing: bool = False

    def group_can_be_imported(self, group: str) -> bool:
        return group not in self.ignore_groups

    def locale_can_be_imported(self, locale: str) -> bool:
        return locale not in self.ignore_locales


class ReconcileOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    SKIPPED_EMPTY = "skipped_empty"
    SKIPPED_EXISTING = "skipped_existing"
    SKIPPED_MISSING_LOCALE = "skipped_missing_locale"


@dataclass(slots=True)
class ImportResult:
    created: int = 0
    updated: int = 0
    skipped: int = 0
    missing_locale: int = 0

    def record(self, outcome: ReconcileOutcome) -> None:
        if outcome is ReconcileOutcome.CREATED:
            self.created += 1
        elif outcome is ReconcileOutcome.UPDATED:
            self.updated += 1
        elif outcome is ReconcileOutcome.SKIPPED_MISSING_LOCALE:
            self.missing_locale += 1
        else:
            self.skipped += 1

    def summary(self) -> str:
        return (
            f"A total of {self.created} translations have been created "
            f"and {self.updated} translations have been updated"
        )
