from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from echowell.core.errors import StorageError
from echowell.models.message import Message

RECENT_MESSAGES_LIMIT = 100


class MessageStore:
    """Reads and writes anonymous board messages."""

    def __init__(self, db: Session):
        self.db = db

    def list_recent(self, limit: int = RECENT_MESSAGES_LIMIT) -> list[Message]:
        try:
            return (
                self.db.query(Message)
                .order_by(Message.timestamp.desc(), Message.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as exc:
            raise StorageError("Could not list messages") from exc

    def insert(self, text: str) -> Message:
        message = Message(text=text, timestamp=datetime.now(timezone.utc))
        try:
            self.db.add(message)
            self.db.commit()
            self.db.refresh(message)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError("Could not store message") from exc
        return message
