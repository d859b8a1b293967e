"""
Модуль: `routes/schemas.py`.
Назначение: Схемы входных данных для действий JSON API.

Каждая схема проверяет наличие обязательных полей и их типы до вызова
бизнес-операции. Ошибки поднимаются как ValidationError.
"""

from dataclasses import dataclass
from typing import Any

from services.credential_store import MISSING_CREDENTIALS
from services.errors import ValidationError
from services.order_ledger import INVALID_QUANTITY, MISSING_ORDER_INFO

INVALID_DATA = "Invalid request data"


def payload_data(raw: Any) -> dict:
    """Поле `data` конверта: необязательно, но если есть, то объект."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError(INVALID_DATA)
    return raw


def _text(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string")
    return value


def _quantity(data: dict, key: str) -> int | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(INVALID_QUANTITY)
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        quantity = int(value.strip())
    else:
        raise ValidationError(INVALID_QUANTITY)

    if quantity == 0:
        return None
    if quantity < 0:
        raise ValidationError(INVALID_QUANTITY)
    return quantity


@dataclass(frozen=True)
class RegisterInput:
    username: str
    password: str
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_payload(cls, data: dict) -> "RegisterInput":
        username = _text(data, "username")
        password = _text(data, "password")
        if not username or not username.strip() or not password:
            raise ValidationError(MISSING_CREDENTIALS)
        return cls(
            username=username,
            password=password,
            email=_text(data, "email") or None,
            phone=_text(data, "phone") or None,
        )


@dataclass(frozen=True)
class LoginInput:
    identifier: str
    password: str

    @classmethod
    def from_payload(cls, data: dict) -> "LoginInput":
        # Поле называется username, но принимает также email или телефон
        identifier = _text(data, "username")
        password = _text(data, "password")
        if not identifier or not identifier.strip() or not password:
            raise ValidationError(MISSING_CREDENTIALS)
        return cls(identifier=identifier, password=password)


@dataclass(frozen=True)
class CheckoutInput:
    product: str
    address: str
    quantity: int

    @classmethod
    def from_payload(cls, data: dict) -> "CheckoutInput":
        product = _text(data, "product")
        address = _text(data, "address")
        quantity = _quantity(data, "quantity")
        if not product or not address or quantity is None:
            raise ValidationError(MISSING_ORDER_INFO)
        return cls(product=product, address=address, quantity=quantity)


@dataclass(frozen=True)
class ProductsInput:
    category: str | None = None

    @classmethod
    def from_payload(cls, data: dict) -> "ProductsInput":
        return cls(category=_text(data, "category") or None)
