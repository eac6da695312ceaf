from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine


def create_db_engine(database_url: str) -> Engine:
    return create_engine(database_url)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Connection]:
    """Run the enclosed statements in one transaction, committed on exit."""
    connection = engine.connect()
    try:
        yield connection
        connection.commit()
    except Exception:
        connection.rollback()
        raise
    finally:
        connection.close()
