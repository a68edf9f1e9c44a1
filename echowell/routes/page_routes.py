from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter(tags=['pages'])


def page_response(request: Request, filename: str) -> FileResponse:
    path = Path(request.app.state.public_dir) / filename
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Page not found.')
    return FileResponse(path, media_type='text/html')


@router.get('/', include_in_schema=False)
def index_page(request: Request):
    return page_response(request, 'index.html')


@router.get('/login', include_in_schema=False)
def login_page(request: Request):
    return page_response(request, 'login.html')


@router.get('/register', include_in_schema=False)
def register_page(request: Request):
    return page_response(request, 'register.html')


@router.get('/dashboard', include_in_schema=False)
def dashboard_page(request: Request):
    return page_response(request, 'dashboard.html')


@router.get('/admin', include_in_schema=False)
def admin_page(request: Request):
    return page_response(request, 'admin.html')
