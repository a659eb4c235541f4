"""Database engine, session factory and schema management.

SQLite and PostgreSQL are supported. SQLite connections run with foreign
keys enforced. A connection carrying the ``BEGIN_IMMEDIATE`` execution option
opens its transaction with ``BEGIN IMMEDIATE`` so that concurrent writers
queue on the database lock from their first statement; every other
transaction uses a plain deferred ``BEGIN`` and reads never wait on writers.
"""

from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from shared.config import get_settings


# Execution option: take the SQLite write lock when the transaction begins
BEGIN_IMMEDIATE = "storefront_begin_immediate"


class Base(DeclarativeBase):
    pass


def create_engine_for(database_uri: str, timeout: float = 5.0) -> Engine:
    """Create an engine for ``database_uri``.

    ``timeout`` bounds how long a SQLite connection waits on a locked
    database before giving up.
    """
    if database_uri.startswith("sqlite"):
        engine = create_engine(
            database_uri,
            connect_args={"timeout": timeout, "check_same_thread": False},
        )
        _configure_sqlite(engine)
        return engine

    return create_engine(database_uri, pool_pre_ping=True)


def _configure_sqlite(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # noqa: ARG001
        # pysqlite must not issue its own BEGIN; the "begin" hook does it
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        immediate = conn.get_execution_options().get(BEGIN_IMMEDIATE, False)
        conn.exec_driver_sql("BEGIN IMMEDIATE" if immediate else "BEGIN")


@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    return create_engine_for(settings.database_uri, timeout=settings.commit_timeout)


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    return make_session_factory(get_engine())


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def _load_models() -> None:
    """Import model modules so their tables are registered on ``Base.metadata``."""
    import catalogue.product.product  # noqa: F401
    import ordering.order.order  # noqa: F401


def setup_db(engine: Engine) -> None:
    """Setup database schema"""
    _load_models()
    Base.metadata.create_all(engine)


def drop_db(engine: Engine) -> None:
    """Drop database schema"""
    _load_models()
    Base.metadata.drop_all(engine)
