"""
Модуль: `services/errors.py`.
Назначение: Типы ошибок бизнес-операций и защита от сбоев хранилища.

Каждая ошибка несёт сообщение, безопасное для показа клиенту.
Текст ошибок драйвера БД клиенту не передаётся, только в журнал.
"""

from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db


class ShopError(Exception):
    """Базовая ошибка операции магазина."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ShopError):
    """Отсутствует или некорректно обязательное поле запроса."""

    default_message = "Invalid request data"


class ConflictError(ShopError):
    """Нарушение уникальности при регистрации."""

    default_message = "Record already exists"


class AuthError(ShopError):
    """Неверные учётные данные или отсутствие сессии."""

    default_message = "Invalid username or password"


class StorageError(ShopError):
    """Хранилище недоступно или запрос завершился ошибкой."""

    default_message = "Internal server error"


@contextmanager
def storage_guard(operation: str):
    """Откатывает транзакцию при ошибке SQLAlchemy и поднимает StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Ошибка хранилища при выполнении операции %s", operation)
        raise StorageError() from exc
