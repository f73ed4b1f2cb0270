from .errors import (
    AssociationClearFailed,
    AssociationWriteFailed,
    BookWriteError,
    CommitFailed,
    ConnectivityError,
    ConstraintViolation,
    DatabaseError,
    EntityWriteFailed,
    InvalidId,
    LitagError,
    NotFound,
    TransactionError,
    TransactionStartFailed,
)
from .queries import Database, Queries, Transaction, TransactionQueries
from .repo import create_repo, Repo


__all__ = [
    "create_repo",
    "Database",
    "Queries",
    "Repo",
    "Transaction",
    "TransactionQueries",

    "AssociationClearFailed",
    "AssociationWriteFailed",
    "BookWriteError",
    "CommitFailed",
    "ConnectivityError",
    "ConstraintViolation",
    "DatabaseError",
    "EntityWriteFailed",
    "InvalidId",
    "LitagError",
    "NotFound",
    "TransactionError",
    "TransactionStartFailed",
]
