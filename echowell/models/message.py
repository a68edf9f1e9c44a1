"""Message model definitions."""

from sqlalchemy import Column, DateTime, Integer, Text
from echowell.database import Base


class Message(Base):
    """Represents an anonymous message posted to the board."""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True)
    text = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
