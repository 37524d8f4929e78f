import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from booklog.database import create_db_engine, get_db, init_db
from booklog.main import app


@pytest.fixture
def engine(tmp_path, request):
    # Each test gets its own SQLite file
    db_file = tmp_path / f"test_{request.node.name}.db"
    engine = create_db_engine(f"sqlite:///{db_file}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class FakeResponse:
    """requests.Response look-alike built from an httpx response"""

    def __init__(self, response):
        self.status_code = response.status_code
        self.reason = response.reason_phrase
        self.ok = response.status_code < 400
        self._response = response

    def json(self):
        return self._response.json()


class TestClientSession:
    """requests.Session stand-in that sends every request to the app in-process"""

    def __init__(self, test_client):
        self.test_client = test_client
        self.headers = {}
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url))
        return FakeResponse(self.test_client.request(method, url, json=json, headers=self.headers))


@pytest.fixture
def api_session(client):
    return TestClientSession(client)
