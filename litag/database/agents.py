import sqlalchemy

from .base import Base


class Agent(Base):
    __tablename__ = "agents"

    id = sqlalchemy.Column(sqlalchemy.Integer, primary_key=True)
    name = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)
    email = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)

    def __repr__(self):
        return "Agent(id={!r}, name={!r}, email={!r})".format(self.id, self.name, self.email)
