"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: config.py – конфигурация приложения.

Назначение модуля:
- Определение базовых параметров приложения Flask (секретный ключ, строка подключения к БД).
- Настройка cookie сессии и CORS для единой JSON-точки входа.
- Параметры бизнес-логики: цена единицы товара в заказе, доступ к списку заказов, наполнение каталога.
"""

import os
import warnings
from decimal import Decimal, InvalidOperation


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Преобразует переменную окружения в bool."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_list(name: str, default: list[str] | None = None) -> list[str]:
    """Преобразует переменную окружения вида 'a,b,c' в список."""
    value = os.environ.get(name)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(",") if item.strip()]


def _get_env_decimal(name: str, default: str) -> Decimal:
    """Преобразует переменную окружения в Decimal с точностью до копеек."""
    value = os.environ.get(name)
    try:
        amount = Decimal((value or default).strip())
    except InvalidOperation:
        amount = Decimal(default)
    return amount.quantize(Decimal("0.01"))


def _is_production() -> bool:
    """Определяет production-режим по FLASK_ENV."""
    return os.environ.get("FLASK_ENV", "").strip().lower() == "production"


class Config:
    """Базовая конфигурация приложения."""

    _PRODUCTION = _is_production()

    SECRET_KEY = os.environ.get("SECRET_KEY")
    if not SECRET_KEY:
        if _PRODUCTION:
            raise RuntimeError(
                "SECRET_KEY environment variable is required in production. "
                "Set a strong random value before starting the app."
            )
        SECRET_KEY = "dev-insecure-secret-key"
        warnings.warn(
            "SECRET_KEY is not set. Using insecure development fallback key.",
            RuntimeWarning,
            stacklevel=1,
        )

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///kycel.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_COOKIE_SECURE = _get_env_bool("SESSION_COOKIE_SECURE", default=_PRODUCTION)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")

    # Серверные сессии: в cookie только идентификатор, запись удаляется при выходе
    SESSION_TYPE = "sqlalchemy"
    SESSION_SQLALCHEMY_TABLE = "sessions"
    SESSION_PERMANENT = _get_env_bool("SESSION_PERMANENT", default=True)

    CORS_ENABLED = _get_env_bool("CORS_ENABLED", default=True)
    CORS_ORIGINS = _get_env_list(
        "CORS_ORIGINS",
        default=[
            "http://127.0.0.1:5000",
            "http://localhost:5000",
            "http://localhost:5173",
        ],
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    # Единая цена за штуку: название товара в заказе на цену не влияет
    ORDER_UNIT_PRICE = _get_env_decimal("ORDER_UNIT_PRICE", "2500.00")
    ALLOW_ANONYMOUS_ORDER_LISTING = _get_env_bool("ALLOW_ANONYMOUS_ORDER_LISTING", default=False)
    SEED_PRODUCTS_ON_STARTUP = _get_env_bool("SEED_PRODUCTS_ON_STARTUP", default=True)
