"""
Модуль: `utils/session_context.py`.
Назначение: Явный контекст сессии вызывающего клиента.

Сервисы не обращаются к `flask.session` напрямую: маршрут оборачивает
хранилище сессии в SessionContext и передаёт его в операцию.
"""

import time
from collections.abc import Callable, MutableMapping


class SessionContext:
    """Обёртка над хранилищем сессии (Flask `session` или обычный dict)."""

    def __init__(self, store: MutableMapping, regenerate: Callable[[], None] | None = None):
        self._store = store
        # Выдаёт новый идентификатор серверной сессии при смене пользователя
        self._regenerate = regenerate

    @property
    def is_authenticated(self) -> bool:
        return self._store.get("user_id") is not None

    @property
    def user_id(self) -> int | None:
        return self._store.get("user_id")

    def identity(self) -> dict | None:
        """Минимальные данные пользователя, сохранённые в сессии."""
        if not self.is_authenticated:
            return None
        return {
            "id": self._store.get("user_id"),
            "username": self._store.get("username"),
            "email": self._store.get("email"),
        }

    def establish(self, user) -> None:
        """Начинает новую сессию для пользователя, отбрасывая прежнее состояние."""
        if self._regenerate is not None:
            self._regenerate()
        self._store.clear()
        self._store["user_id"] = user.id
        self._store["username"] = user.username
        self._store["email"] = user.email
        self._store["login_time"] = int(time.time())

    def clear(self) -> None:
        self._store.clear()
