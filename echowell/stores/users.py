import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from echowell.core.errors import DuplicateEmailError, StorageError
from echowell.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Reads and writes user records keyed by email."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as exc:
            raise StorageError("Could not look up user") from exc

    def insert(self, user: User) -> User:
        """Store a new user.

        The unique index on ``users.email`` is what guarantees one user per
        email; a losing concurrent insert surfaces as DuplicateEmailError.
        """
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as exc:
            self.db.rollback()
            logger.info('Rejected duplicate registration')
            raise DuplicateEmailError(user.email) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError("Could not store user") from exc

        return user
