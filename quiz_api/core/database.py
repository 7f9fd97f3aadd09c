import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings
from .errors import StorageError

logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, Any]]


@dataclass(frozen=True)
class ExecResult:
    rowcount: int
    lastrowid: Optional[int]


def _driver_message(exc: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its text is what callers see
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Store:
    """
    Blocking query/execute access to the relational store.

    Each call checks out a pooled connection, runs one statement in its own
    transaction and gives the connection back, so a single Store can be
    shared by every request thread.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def query(self, sql: str, params: Params = None) -> list[RowMapping]:
        try:
            with self.engine.connect() as conn:
                return list(conn.execute(text(sql), dict(params or {})).mappings())
        except SQLAlchemyError as e:
            msg = _driver_message(e)
            logger.warning("query failed: %s", msg)
            raise StorageError(msg) from e

    def query_one(self, sql: str, params: Params = None) -> Optional[RowMapping]:
        rows = self.query(sql, params)
        return rows[0] if rows else None

    def execute(self, sql: str, params: Params = None) -> ExecResult:
        try:
            with self.engine.begin() as conn:
                res = conn.execute(text(sql), dict(params or {}))
                return ExecResult(rowcount=res.rowcount, lastrowid=res.lastrowid)
        except SQLAlchemyError as e:
            msg = _driver_message(e)
            logger.warning("execute failed: %s", msg)
            raise StorageError(msg) from e

    def close(self) -> None:
        self.engine.dispose()


def create_store(settings: Settings) -> Store:
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # requests run on a thread pool; the pool hands connections across threads
        connect_args["check_same_thread"] = False
    engine = create_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        connect_args=connect_args,
    )
    logger.info("store ready at %s", engine.url.render_as_string(hide_password=True))
    return Store(engine)
