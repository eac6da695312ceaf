from __future__ import annotations

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class BaseTableActionEnum(str, Enum):
    pass


class BaseTable:
    __tablename__: str = ""

    def _log(self, action: BaseTableActionEnum, **kwargs: Any) -> None:
        details = ", ".join(f"{name}={value!r}" for name, value in kwargs.items())
        logger.debug("[%s] %s %s", self.__tablename__, action.value, details)
