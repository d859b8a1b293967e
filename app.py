"""
Название: «Kycel»
Дата и номер версии: 2026-10-19 v1.0
Язык: Python (Flask)
Краткое описание: backend интернет-магазина игровой периферии – регистрация и вход,
оформление заказов и каталог товаров через единую JSON-точку входа
"""

import os

from flask import Flask

from cli import register_commands
from config import Config
from extensions import db, cors, server_session
import models  # noqa: F401 - регистрирует модели для db.create_all()
from routes.api import register_routes as register_api_routes
from services import catalog


def init_database(app: Flask) -> None:
    """Создаёт отсутствующие таблицы и при необходимости наполняет каталог."""
    with app.app_context():
        # Создаем отсутствующие таблицы (без изменения существующих колонок)
        db.create_all()
        if app.config["SEED_PRODUCTS_ON_STARTUP"]:
            catalog.ensure_seeded()


def create_app(config_overrides: dict | None = None) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Инициализация расширений
    db.init_app(app)
    app.config.setdefault("SESSION_SQLALCHEMY", db)
    server_session.init_app(app)

    if app.config["CORS_ENABLED"]:
        cors.init_app(
            app,
            resources={r"/api": {"origins": app.config["CORS_ORIGINS"]}},
            supports_credentials=True,
        )

    # Гарантируем наличие instance-директории для файла SQLite
    os.makedirs(app.instance_path, exist_ok=True)

    register_api_routes(app)
    register_commands(app)

    # Схема создаётся один раз при старте, а не на каждом запросе
    init_database(app)

    @app.after_request
    def apply_security_headers(response):
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return response

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    return app


# `flask --app app run` находит фабрику create_app сама
if __name__ == "__main__":
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    create_app().run(debug=not is_production)
