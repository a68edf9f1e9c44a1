from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.orm import Session

from echowell.core.validation import Utf8Str
from echowell.database import get_db
from echowell.stores.messages import RECENT_MESSAGES_LIMIT, MessageStore

router = APIRouter(tags=['shares'])

MESSAGE_REQUIRED = 'Message is required'


class CreateShareRequest(BaseModel):
    message: Utf8Str | None = None


class ShareResponse(BaseModel):
    text: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator('timestamp')
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


@router.get('/shares', response_model=list[ShareResponse])
def list_shares(db: Session = Depends(get_db)):
    return MessageStore(db).list_recent(RECENT_MESSAGES_LIMIT)


@router.post(
    '/shares',
    response_model=ShareResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {'description': MESSAGE_REQUIRED}},
)
def create_share(data: CreateShareRequest, db: Session = Depends(get_db)):
    if not data.message:
        return PlainTextResponse(MESSAGE_REQUIRED, status_code=status.HTTP_400_BAD_REQUEST)

    return MessageStore(db).insert(data.message)
