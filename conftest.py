import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from init_db import init_db
from models.user import User


@pytest.fixture
def app(tmp_path):
    database = str(tmp_path / "registry.db")
    init_db(database, samples=True)
    app = create_app({
        "TESTING": True,
        "DATABASE": database,
        "WTF_CSRF_ENABLED": False,
        "SECRET_KEY": "test",
    })
    with app.app_context():
        User.create("clerk", "Registry Clerk", generate_password_hash("clerk-pass"))
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    client.post("/login", data={"username": "admin", "password": "admin"})
    return client


@pytest.fixture
def clerk_client(client):
    client.post("/login", data={"username": "clerk", "password": "clerk-pass"})
    return client
