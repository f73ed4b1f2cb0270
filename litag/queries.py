import contextlib
import logging

import sqlalchemy
import sqlalchemy.exc
import sqlalchemy.orm

from . import database
from .errors import ConnectivityError, ConstraintViolation, DatabaseError, NotFound, TransactionError


_logger = logging.getLogger(__name__)


@contextlib.contextmanager
def translate_errors(default=DatabaseError):
    try:
        yield
    except sqlalchemy.exc.IntegrityError as error:
        raise ConstraintViolation(str(error.orig)) from error
    except (sqlalchemy.exc.OperationalError, sqlalchemy.exc.InterfaceError) as error:
        raise ConnectivityError(str(error.orig)) from error
    except sqlalchemy.exc.SQLAlchemyError as error:
        raise default(str(error)) from error


class Database(object):
    def __init__(self, engine):
        self._engine = engine

    def begin_transaction(self, isolation_level=None):
        session = _create_session(self._engine)
        try:
            with translate_errors(default=TransactionError):
                session.begin()
                if isolation_level is None:
                    session.connection()
                else:
                    session.connection(execution_options={"isolation_level": isolation_level})
        except DatabaseError:
            session.close()
            raise

        return Transaction(session)

    def queries(self):
        return Queries(self._session_scope)

    @contextlib.contextmanager
    def _session_scope(self):
        with _create_session(self._engine) as session, session.begin():
            yield session


def _create_session(engine):
    return sqlalchemy.orm.Session(engine, expire_on_commit=False)


class Transaction(object):
    def __init__(self, session):
        self.session = session
        self._finished = False

    def commit(self):
        with translate_errors(default=TransactionError):
            self.session.commit()
        self._finish()

    def rollback(self):
        if self._finished:
            return

        try:
            with translate_errors(default=TransactionError):
                self.session.rollback()
        finally:
            self._finish()

    def _finish(self):
        self._finished = True
        self.session.close()


class Queries(object):
    def __init__(self, session_scope):
        self._session_scope = session_scope

    def with_transaction(self, transaction):
        return TransactionQueries(transaction.session)

    @contextlib.contextmanager
    def _session(self):
        with translate_errors(), self._session_scope() as session:
            yield session

    def create_agent(self, *, name, email):
        with self._session() as session:
            return _insert(session, database.Agent(name=name, email=email))

    def get_agent(self, id):
        with self._session() as session:
            return _get(session, database.Agent, id)

    def list_agents(self):
        with self._session() as session:
            return _list(session, sqlalchemy.select(database.Agent).order_by(database.Agent.id))

    def update_agent(self, id, *, name, email):
        with self._session() as session:
            return _update(session, database.Agent, id, name=name, email=email)

    def delete_agent(self, id):
        with self._session() as session:
            return _delete(session, database.Agent, id)

    def create_author(self, *, name, website, agent_id):
        with self._session() as session:
            return _insert(session, database.Author(name=name, website=website, agent_id=agent_id))

    def get_author(self, id):
        with self._session() as session:
            return _get(session, database.Author, id)

    def list_authors(self):
        with self._session() as session:
            return _list(session, sqlalchemy.select(database.Author).order_by(database.Author.id))

    def update_author(self, id, *, name, website, agent_id):
        with self._session() as session:
            return _update(session, database.Author, id, name=name, website=website, agent_id=agent_id)

    def delete_author(self, id):
        with self._session() as session:
            return _delete(session, database.Author, id)

    def list_authors_by_agent_id(self, agent_id):
        with self._session() as session:
            return _list(
                session,
                sqlalchemy.select(database.Author)
                    .where(database.Author.agent_id == agent_id)
                    .order_by(database.Author.id),
            )

    def list_authors_by_book_id(self, book_id):
        with self._session() as session:
            return _list(
                session,
                sqlalchemy.select(database.Author)
                    .join(database.book_authors, database.book_authors.c.author_id == database.Author.id)
                    .where(database.book_authors.c.book_id == book_id)
                    .order_by(database.Author.id),
            )

    def get_book(self, id):
        with self._session() as session:
            return _get(session, database.Book, id)

    def list_books(self):
        with self._session() as session:
            return _list(session, sqlalchemy.select(database.Book).order_by(database.Book.id))

    def delete_book(self, id):
        # Link rows go with the book through ON DELETE CASCADE.
        with self._session() as session:
            return _delete(session, database.Book, id)

    def list_books_by_author_id(self, author_id):
        with self._session() as session:
            return _list(
                session,
                sqlalchemy.select(database.Book)
                    .join(database.book_authors, database.book_authors.c.book_id == database.Book.id)
                    .where(database.book_authors.c.author_id == author_id)
                    .order_by(database.Book.id),
            )


class TransactionQueries(object):
    """
    Book writes that are only meaningful as part of a larger transaction.

    Nothing here commits: the owner of the transaction decides whether
    the statements are kept.
    """

    def __init__(self, session):
        self._session = session

    def create_book(self, *, title, description, cover):
        with translate_errors():
            return _insert(self._session, database.Book(title=title, description=description, cover=cover))

    def update_book(self, id, *, title, description, cover):
        with translate_errors():
            return _update(self._session, database.Book, id, title=title, description=description, cover=cover)

    def set_book_author(self, *, book_id, author_id):
        with translate_errors():
            self._session.execute(
                sqlalchemy.insert(database.book_authors).values(book_id=book_id, author_id=author_id),
            )

    def unset_book_authors(self, book_id):
        with translate_errors():
            self._session.execute(
                sqlalchemy.delete(database.book_authors).where(database.book_authors.c.book_id == book_id),
            )


def _insert(session, row):
    session.add(row)
    session.flush()
    return row


def _get(session, model, id):
    row = session.get(model, id)
    if row is None:
        raise NotFound("{} {} not found".format(model.__tablename__[:-1], id))
    return row


def _list(session, statement):
    return list(session.scalars(statement))


def _update(session, model, id, **values):
    row = _get(session, model, id)
    for key, value in values.items():
        setattr(row, key, value)
    session.flush()
    return row


def _delete(session, model, id):
    row = _get(session, model, id)
    session.delete(row)
    session.flush()
    _logger.debug("deleted %r", row)
    return row
