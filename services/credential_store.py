"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: services/credential_store.py – учётные записи и сессии пользователей.

Назначение модуля:
- Регистрация пользователей с проверкой уникальности имени и email.
- Вход по имени пользователя, email или телефону с записью каждой попытки в журнал.
- Выход из системы и проверка текущей сессии.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from extensions import db
from models.login_history import LoginHistory
from models.user import User
from services.errors import AuthError, ConflictError, ValidationError, storage_guard
from utils.client_info import ClientInfo
from utils.session_context import SessionContext

MISSING_CREDENTIALS = "Username and password are required"
USERNAME_TAKEN = "Username already exists"
EMAIL_TAKEN = "Email already exists"
INVALID_CREDENTIALS = "Invalid username or password"

# Порядок важен: первое совпавшее поле определяет пользователя
_IDENTIFIER_COLUMNS = (User.username, User.email, User.phone)

_dummy_hash: str | None = None


def _hash_password(password: str) -> str:
    return generate_password_hash(password, method="scrypt")


def _dummy_password_hash() -> str:
    """Хеш для проверки пароля неизвестного пользователя за то же время."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = _hash_password("kycel-unknown-user")
    return _dummy_hash


def _username_taken(username: str) -> bool:
    return User.query.filter_by(username=username).first() is not None


def _email_taken(email: str) -> bool:
    return User.query.filter_by(email=email).first() is not None


def _find_by_identifier(identifier: str) -> User | None:
    for column in _IDENTIFIER_COLUMNS:
        user = User.query.filter(column == identifier).order_by(User.id).first()
        if user is not None:
            return user
    return None


def _record_attempt(user_id: int | None, username: str, client: ClientInfo, success: bool) -> None:
    db.session.add(
        LoginHistory(
            user_id=user_id,
            username=username,
            ip_address=client.ip_address,
            user_agent=client.user_agent,
            success=success,
        )
    )


def register(
    session_ctx: SessionContext,
    client: ClientInfo,
    username: str | None,
    password: str | None,
    email: str | None = None,
    phone: str | None = None,
) -> dict:
    """Создаёт пользователя и сразу открывает для него сессию.

    Предварительные проверки дают понятное сообщение, но гарантию
    уникальности обеспечивают ограничения UNIQUE в таблице `users`.
    """
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError(MISSING_CREDENTIALS)

    email = email or None
    phone = phone or None

    with storage_guard("register"):
        if _username_taken(username):
            raise ConflictError(USERNAME_TAKEN)
        if email and _email_taken(email):
            raise ConflictError(EMAIL_TAKEN)

        user = User(
            username=username,
            email=email,
            phone=phone,
            password_hash=_hash_password(password),
        )
        db.session.add(user)
        try:
            db.session.flush()
            _record_attempt(user.id, username, client, success=True)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            # Параллельная регистрация успела раньше: выясняем, какое поле занято
            raise ConflictError(USERNAME_TAKEN if _username_taken(username) else EMAIL_TAKEN)

    session_ctx.establish(user)
    current_app.logger.info("Зарегистрирован пользователь %s (id=%s)", user.username, user.id)
    return {"user_id": user.id, "username": user.username}


def login(
    session_ctx: SessionContext,
    client: ClientInfo,
    identifier: str | None,
    password: str | None,
) -> dict:
    """Проверяет учётные данные; identifier – имя пользователя, email или телефон."""
    identifier = (identifier or "").strip()
    if not identifier or not password:
        raise ValidationError(MISSING_CREDENTIALS)

    with storage_guard("login"):
        user = _find_by_identifier(identifier)
        if user is None:
            check_password_hash(_dummy_password_hash(), password)
            verified = False
        else:
            verified = check_password_hash(user.password_hash, password)

        if not verified:
            _record_attempt(user.id if user else None, identifier, client, success=False)
            db.session.commit()
            current_app.logger.warning(
                "Неудачная попытка входа для %s с адреса %s",
                identifier,
                client.ip_address,
            )
            raise AuthError(INVALID_CREDENTIALS)

        _record_attempt(user.id, user.username, client, success=True)
        db.session.commit()

    session_ctx.establish(user)
    current_app.logger.info("Пользователь %s вошёл в систему", user.username)
    return user.to_dict()


def logout(session_ctx: SessionContext) -> None:
    session_ctx.clear()


def check_session(session_ctx: SessionContext) -> dict:
    """Читает только сессию, без обращения к БД."""
    identity = session_ctx.identity()
    if identity is None:
        return {"logged_in": False}
    return {"logged_in": True, "user": identity}
