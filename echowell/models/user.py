"""User model definitions."""

from sqlalchemy import Column, Integer, String
from echowell.database import Base


class User(Base):
    """Represents a registered user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # salt:hash
    age = Column(Integer)
    college_name = Column(String)
    grades = Column(String)
