import sqlalchemy

from .base import Base


class Author(Base):
    __tablename__ = "authors"

    id = sqlalchemy.Column(sqlalchemy.Integer, primary_key=True)
    name = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)
    # NULL and "" are different values: an absent website is not an empty one.
    website = sqlalchemy.Column(sqlalchemy.Unicode, nullable=True)
    agent_id = sqlalchemy.Column(
        sqlalchemy.Integer,
        sqlalchemy.ForeignKey("agents.id", ondelete="RESTRICT"),
        nullable=False,
    )

    def __repr__(self):
        return "Author(id={!r}, name={!r}, website={!r}, agent_id={!r})".format(
            self.id, self.name, self.website, self.agent_id,
        )
