import contextlib
import logging

from .errors import (
    AssociationClearFailed,
    AssociationWriteFailed,
    CommitFailed,
    DatabaseError,
    EntityWriteFailed,
    TransactionStartFailed,
)
from .queries import Database


_logger = logging.getLogger(__name__)


def create_repo(engine):
    db = Database(engine)
    return Repo(db=db, queries=db.queries())


class Repo(object):
    """
    Access to agents, authors and books.

    ``db`` starts transactions and ``queries`` runs statements, either
    on their own or, through ``queries.with_transaction()``, as part of
    a transaction. Reads and single-row writes go straight to
    ``queries``; writes that span a book and its authors go through
    ``create_book`` and ``update_book`` so that they are applied
    atomically.
    """

    def __init__(self, *, db, queries):
        self.db = db
        self.queries = queries

    def create_book(self, *, title, description, cover, author_ids):
        with self._transaction() as queries:
            with _step(EntityWriteFailed):
                book = queries.create_book(title=title, description=description, cover=cover)

            _set_book_authors(queries, book.id, author_ids)

        return book

    def update_book(self, id, *, title, description, cover, author_ids):
        # Replaces the whole author set rather than diffing it.
        with self._transaction() as queries:
            with _step(EntityWriteFailed):
                book = queries.update_book(id, title=title, description=description, cover=cover)

            with _step(AssociationClearFailed):
                queries.unset_book_authors(book.id)

            _set_book_authors(queries, book.id, author_ids)

        return book

    @contextlib.contextmanager
    def _transaction(self):
        with _step(TransactionStartFailed):
            transaction = self.db.begin_transaction()

        try:
            yield self.queries.with_transaction(transaction)

            with _step(CommitFailed):
                transaction.commit()
        except BaseException as error:
            _logger.warning("rolling back book write: %s", error)
            try:
                transaction.rollback()
            except DatabaseError:
                _logger.exception("rollback failed")
            raise


def _set_book_authors(queries, book_id, author_ids):
    for author_id in author_ids:
        with _step(AssociationWriteFailed):
            queries.set_book_author(book_id=book_id, author_id=author_id)


@contextlib.contextmanager
def _step(error_type):
    try:
        yield
    except DatabaseError as error:
        raise error_type(error) from error
