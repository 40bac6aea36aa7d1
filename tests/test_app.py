import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)
from app import create_app, dispose_engine
from app.extensions import db
from app.utils.errors import ConfigurationError


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "CORS_ORIGINS": ["http://localhost:5173"],
    })
    yield app
    dispose_engine(app)


@pytest.fixture()
def client(app):
    return app.test_client()


def test_missing_database_uri_is_fatal():
    with pytest.raises(ConfigurationError) as exc:
        create_app({"SQLALCHEMY_DATABASE_URI": None})
    assert "SQLALCHEMY_DATABASE_URI" in str(exc.value)


def test_home(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.get_json()


def test_health_reports_database(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "online", "database": "healthy"}


def test_cors_allows_configured_origin(client):
    r = client.get("/", headers={"Origin": "http://localhost:5173"})
    assert r.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"

    r = client.get("/", headers={"Origin": "http://evil.example"})
    assert "Access-Control-Allow-Origin" not in r.headers


def test_engine_is_usable_after_dispose(app):
    dispose_engine(app)
    with app.app_context():
        assert db.session.execute(db.text("SELECT 1")).scalar() == 1
