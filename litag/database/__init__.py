import uuid

import sqlalchemy
import sqlalchemy.engine
import sqlalchemy.event
import sqlalchemy.pool

from .agents import Agent
from .authors import Author
from .base import Base
from .books import Book, book_authors


def create_engine(url, **kwargs):
    url = sqlalchemy.engine.make_url(url)

    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # Each session needs its own connection for transactions to be isolated,
        # so in-memory databases become a named shared-cache database that lives
        # as long as the pool holds a connection to it.
        url = sqlalchemy.engine.make_url(
            "sqlite:///file:litag-{}?mode=memory&cache=shared&uri=true".format(uuid.uuid4().hex),
        )
        kwargs.setdefault("poolclass", sqlalchemy.pool.QueuePool)
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = sqlalchemy.create_engine(url, **kwargs)

    if engine.url.get_backend_name() == "sqlite":
        # SQLite only enforces foreign keys (and so ON DELETE) when asked to.
        @sqlalchemy.event.listens_for(engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def setup(engine):
    Base.metadata.create_all(engine)


__all__ = [
    "Agent",
    "Author",
    "Base",
    "Book",
    "book_authors",
    "create_engine",
    "setup",
]
