import sqlalchemy

from .base import Base


class Book(Base):
    __tablename__ = "books"

    id = sqlalchemy.Column(sqlalchemy.Integer, primary_key=True)
    title = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)
    description = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)
    cover = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)

    def __repr__(self):
        return "Book(id={!r}, title={!r}, description={!r}, cover={!r})".format(
            self.id, self.title, self.description, self.cover,
        )


book_authors = sqlalchemy.Table(
    "book_authors",
    Base.metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column(
        "book_id",
        sqlalchemy.Integer,
        sqlalchemy.ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
    ),
    sqlalchemy.Column(
        "author_id",
        sqlalchemy.Integer,
        sqlalchemy.ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
    ),
    sqlalchemy.UniqueConstraint("book_id", "author_id"),
)
