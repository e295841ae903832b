from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class MadlibTemplate(Base):
    __tablename__ = "madlib"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)  # always lowercase
    format = Column(String, nullable=False)

class MadlibField(Base):
    __tablename__ = "madlib_fields"

    id = Column(Integer, primary_key=True, autoincrement=True)
    field = Column(String, index=True, nullable=False)
    value = Column(String, nullable=False)
