import pytest
from fastapi.testclient import TestClient

from echowell.core.errors import StorageError
from echowell.database import Database
from echowell.main import create_app
from echowell.stores.messages import MessageStore


@pytest.fixture
def public_dir(tmp_path):
    directory = tmp_path / 'public'
    directory.mkdir()
    for name in ('index', 'login', 'register', 'dashboard', 'admin'):
        (directory / f'{name}.html').write_text(f'<h1>{name}</h1>')
    (directory / 'app.css').write_text('body {}')
    return directory


@pytest.fixture
def client(tmp_path, public_dir):
    database = Database(f'sqlite:///{tmp_path / "app.db"}')
    app = create_app(database, public_dir=public_dir)
    with TestClient(app) as test_client:
        yield test_client


def test_register_and_login_scenario(client) -> None:
    response = client.post('/register', json={'name': 'A', 'email': 'a@x.com', 'password': 'pw'})
    assert response.status_code == 201
    assert response.json() == {'message': 'User registered successfully.'}

    response = client.post('/register', json={'name': 'A', 'email': 'a@x.com', 'password': 'pw'})
    assert response.status_code == 400
    assert response.json() == {'message': 'User with this email already exists.'}

    response = client.post('/login', json={'email': 'a@x.com', 'password': 'pw'})
    assert response.status_code == 200
    assert response.json()['token'].startswith('mock-token-for-user-')

    wrong_password = client.post('/login', json={'email': 'a@x.com', 'password': 'wrong'})
    unknown_user = client.post('/login', json={'email': 'b@x.com', 'password': 'pw'})
    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {'message': 'Invalid email or password.'}


def test_register_with_missing_fields_returns_400(client) -> None:
    response = client.post('/register', json={'email': 'a@x.com'})

    assert response.status_code == 400
    assert response.json() == {'message': 'Name, email, and password are required.'}


@pytest.mark.parametrize(
    'kwargs',
    [
        {'json': {'name': 'A', 'email': 'a@x.com', 'password': 'pw', 'age': 'old'}},
        {'json': ['not', 'an', 'object']},
        {'content': b'not json', 'headers': {'Content-Type': 'application/json'}},
        {},
    ],
)
def test_malformed_register_body_returns_400(client, kwargs: dict) -> None:
    response = client.post('/register', **kwargs)

    assert response.status_code == 400
    assert response.json() == {'message': 'Invalid request body.'}


def test_post_share_and_list(client) -> None:
    first = client.post('/api/shares', json={'message': 'first'})
    second = client.post('/api/shares', json={'message': 'second'})

    assert first.status_code == 201
    assert first.json()['text'] == 'first'
    assert 'timestamp' in first.json()
    assert set(second.json()) == {'text', 'timestamp'}

    response = client.get('/api/shares')
    assert response.status_code == 200
    assert [share['text'] for share in response.json()] == ['second', 'first']


def test_post_share_without_message_returns_plain_text_400(client) -> None:
    response = client.post('/api/shares', json={})

    assert response.status_code == 400
    assert response.text == 'Message is required'
    assert response.headers['content-type'].startswith('text/plain')
    assert client.get('/api/shares').json() == []


def test_storage_failure_returns_500(client, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_list_recent(self, limit=100):
        raise StorageError('Could not list messages')

    monkeypatch.setattr(MessageStore, 'list_recent', broken_list_recent)

    response = client.get('/api/shares')

    assert response.status_code == 500
    assert response.json() == {'message': 'Internal server error.'}


@pytest.mark.parametrize(
    ('path', 'page'),
    [('/', 'index'), ('/login', 'login'), ('/register', 'register'), ('/dashboard', 'dashboard'), ('/admin', 'admin')],
)
def test_pages_are_served_from_public_dir(client, path: str, page: str) -> None:
    response = client.get(path)

    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/html')
    assert response.text == f'<h1>{page}</h1>'


def test_static_files_are_served(client) -> None:
    response = client.get('/static/app.css')

    assert response.status_code == 200
    assert response.text == 'body {}'


def test_missing_page_returns_404(client, public_dir) -> None:
    (public_dir / 'admin.html').unlink()

    response = client.get('/admin')

    assert response.status_code == 404


def test_startup_fails_when_database_is_unreachable(tmp_path) -> None:
    database = Database(f'sqlite:///{tmp_path / "missing" / "app.db"}')
    app = create_app(database, public_dir=tmp_path)

    with pytest.raises(Exception):
        with TestClient(app):
            pass


def _raw_json(body: bytes) -> dict:
    return {'content': body, 'headers': {'Content-Type': 'application/json'}}


@pytest.mark.parametrize(
    'kwargs',
    [
        {},
        {'json': {'email': 5, 'password': 'x'}},
        _raw_json(b'{"email": "\\ud800", "password": "pw"}'),
    ],
)
def test_login_with_unusable_body_returns_401(client, kwargs: dict) -> None:
    response = client.post('/login', **kwargs)

    assert response.status_code == 401
    assert response.json() == {'message': 'Invalid email or password.'}


@pytest.mark.parametrize(
    'kwargs',
    [
        {},
        {'json': {'message': 123}},
        _raw_json(b'{"message": "\\ud800"}'),
    ],
)
def test_post_share_with_unusable_body_returns_plain_text_400(client, kwargs: dict) -> None:
    response = client.post('/api/shares', **kwargs)

    assert response.status_code == 400
    assert response.text == 'Message is required'
    assert response.headers['content-type'].startswith('text/plain')
    assert client.get('/api/shares').json() == []


def test_register_with_lone_surrogate_returns_400(client) -> None:
    response = client.post('/register', **_raw_json(b'{"name": "A", "email": "a@x.com", "password": "\\ud800"}'))

    assert response.status_code == 400
    assert response.json() == {'message': 'Invalid request body.'}
