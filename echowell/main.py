import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from echowell.core import config
from echowell.core.errors import StorageError
from echowell.database import Database
from echowell.routes import auth_routes, page_routes, share_routes

logger = logging.getLogger(__name__)


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> Response:
    # Login and shares keep the same error shape whether or not the body parsed.
    if request.url.path == '/login':
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={'message': auth_routes.INVALID_LOGIN_MESSAGE},
        )
    if request.url.path == '/api/shares':
        return PlainTextResponse(share_routes.MESSAGE_REQUIRED, status_code=status.HTTP_400_BAD_REQUEST)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'message': 'Invalid request body.'},
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error('Storage failure on %s %s', request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': 'Internal server error.'},
    )


def create_app(database: Database, public_dir: Path | str = config.PUBLIC_DIR) -> FastAPI:
    """Build the application around an already constructed database."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            database.create_schema()
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
            raise
        logger.info('Connected to database')
        yield
        database.dispose()

    app = FastAPI(title='Echowell', lifespan=lifespan)
    app.state.database = database
    app.state.public_dir = Path(public_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    app.include_router(page_routes.router)
    app.include_router(auth_routes.router)
    app.include_router(share_routes.router, prefix='/api')

    if app.state.public_dir.is_dir():
        app.mount('/static', StaticFiles(directory=app.state.public_dir), name='static')

    return app
