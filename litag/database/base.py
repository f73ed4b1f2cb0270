import sqlalchemy.orm


Base = sqlalchemy.orm.declarative_base()
