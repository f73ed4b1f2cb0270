class LitagError(Exception):
    pass


class DatabaseError(LitagError):
    pass


class NotFound(DatabaseError):
    pass


class ConstraintViolation(DatabaseError):
    pass


class TransactionError(DatabaseError):
    pass


class ConnectivityError(DatabaseError):
    pass


class BookWriteError(LitagError):
    """
    Raised when writing a book and its authors fails.

    The datastore error is kept unchanged as ``error`` (and as the
    exception's ``__cause__``) so that callers can still tell a
    constraint violation from a lost connection.
    """

    step = None

    def __init__(self, error):
        super().__init__("{} failed: {}".format(self.step, error))
        self.error = error


class TransactionStartFailed(BookWriteError):
    step = "begin transaction"


class EntityWriteFailed(BookWriteError):
    step = "write book"


class AssociationClearFailed(BookWriteError):
    step = "unset book authors"


class AssociationWriteFailed(BookWriteError):
    step = "set book author"


class CommitFailed(BookWriteError):
    step = "commit"


class InvalidId(LitagError):
    pass
