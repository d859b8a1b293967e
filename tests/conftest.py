"""
Общие фикстуры тестов backend «Kycel».

Приложение на SQLite в памяти, чистая база для каждого теста,
тестовый клиент Flask и помощник для вызова JSON API.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest

from app import create_app
from extensions import db
from utils.client_info import ClientInfo
from utils.session_context import SessionContext


@pytest.fixture(scope="session")
def app():
    """Приложение для тестов на SQLite в памяти."""
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SEED_PRODUCTS_ON_STARTUP": False,
        "ALLOW_ANONYMOUS_ORDER_LISTING": False,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(autouse=True)
def db_session(app):
    """Очищает все таблицы, сохраняя схему."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        db.session.rollback()


@pytest.fixture
def client(app):
    """Тестовый клиент Flask."""
    return app.test_client()


@pytest.fixture
def session_ctx():
    """Контекст сессии поверх обычного словаря."""
    return SessionContext({})


@pytest.fixture
def client_info():
    return ClientInfo(ip_address="203.0.113.7", user_agent="pytest-agent")


def call_api(client, action=None, data=None):
    """Отправляет конверт действия и возвращает разобранный JSON-ответ."""
    envelope = {}
    if action is not None:
        envelope["action"] = action
    if data is not None:
        envelope["data"] = data
    response = client.post("/api", json=envelope)
    assert response.status_code == 200
    return response.get_json()
