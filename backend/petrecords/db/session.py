"""Module: session."""

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url

from petrecords.core.config import Settings, settings
from petrecords.db.gateway import Gateway


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES clauses unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def build_engine(url, **engine_kwargs) -> Engine:
    """
    Create an engine for ``url`` with the given pool arguments.

    SQLite connections get foreign key enforcement switched on so pets can
    only reference existing owners and pet types, matching server databases.
    """
    engine = create_engine(url, **engine_kwargs)
    if make_url(url).get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def engine_from_settings(cfg: Settings) -> Engine:
    url = cfg.sqlalchemy_url()
    if make_url(url).get_backend_name() == "sqlite":
        return build_engine(url)
    return build_engine(
        url,
        pool_size=cfg.db_pool_size,
        max_overflow=cfg.db_max_overflow,
        pool_timeout=cfg.db_pool_timeout,
        pool_pre_ping=True,
    )


# Process-scoped pool shared by every request; sized once at startup.
engine = engine_from_settings(settings)
gateway = Gateway(engine)
