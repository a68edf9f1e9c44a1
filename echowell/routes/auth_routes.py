import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from echowell.auth.passwords import hash_password, verify_password
from echowell.core.errors import DuplicateEmailError
from echowell.core.validation import Utf8Str
from echowell.database import get_db
from echowell.models.user import User
from echowell.stores.users import UserStore

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = 'Name, email, and password are required.'
DUPLICATE_EMAIL_MESSAGE = 'User with this email already exists.'
REGISTERED_MESSAGE = 'User registered successfully.'
INVALID_LOGIN_MESSAGE = 'Invalid email or password.'


class RegisterRequest(BaseModel):
    name: Utf8Str | None = None
    email: Utf8Str | None = None
    password: Utf8Str | None = None
    age: int | None = Field(default=None, ge=0, le=150)
    collegeName: Utf8Str | None = None
    grades: Utf8Str | int | float | None = None


class LoginRequest(BaseModel):
    email: Utf8Str | None = None
    password: Utf8Str | None = None


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


def build_login_token(user: User) -> str:
    # Placeholder only: not signed and not verified anywhere.
    return f'mock-token-for-user-{user.id}'


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'message': message})


@router.post(
    '/register',
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {'model': MessageResponse}},
)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    if not data.name or not data.email or not data.password:
        return _message(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)

    users = UserStore(db)
    if users.find_by_email(data.email) is not None:
        return _message(status.HTTP_400_BAD_REQUEST, DUPLICATE_EMAIL_MESSAGE)

    user = User(
        name=data.name,
        email=data.email,
        password=hash_password(data.password),
        age=data.age,
        college_name=data.collegeName,
        grades=None if data.grades is None else str(data.grades),
    )
    try:
        users.insert(user)
    except DuplicateEmailError:
        return _message(status.HTTP_400_BAD_REQUEST, DUPLICATE_EMAIL_MESSAGE)

    logger.info('Registered user id=%s', user.id)
    return _message(status.HTTP_201_CREATED, REGISTERED_MESSAGE)


@router.post(
    '/login',
    response_model=TokenResponse,
    responses={401: {'model': MessageResponse}},
)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = UserStore(db).find_by_email(data.email) if data.email else None

    if user is None or data.password is None or not verify_password(data.password, user.password):
        logger.info('Rejected login attempt')
        return _message(status.HTTP_401_UNAUTHORIZED, INVALID_LOGIN_MESSAGE)

    return JSONResponse(status_code=status.HTTP_200_OK, content={'token': build_login_token(user)})
