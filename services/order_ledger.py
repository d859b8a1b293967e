"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: services/order_ledger.py – оформление и просмотр заказов.

Назначение модуля:
- Создание заказа с расчётом стоимости на сервере (цена за штуку × количество).
- Привязка заказа к пользователю из сессии; анонимное оформление допускается.
- Выдача заказов пользователя или всех заказов, от новых к старым.
"""

from decimal import Decimal

from flask import current_app

from extensions import db
from models.order import Order
from services.errors import ValidationError, storage_guard
from utils.session_context import SessionContext

MISSING_ORDER_INFO = "Missing order information"
INVALID_QUANTITY = "Quantity must be a positive integer"
ORDER_STATUS_PENDING = "pending"

_CENTS = Decimal("0.01")
# Предел колонки Numeric(10,2)
MAX_ORDER_TOTAL = Decimal("99999999.99")


def calculate_total(unit_price: Decimal, quantity: int) -> Decimal:
    return (Decimal(unit_price) * quantity).quantize(_CENTS)


def create_order(
    session_ctx: SessionContext,
    product: str | None,
    address: str | None,
    quantity: int | None,
    unit_price: Decimal,
) -> dict:
    """Сохраняет заказ со статусом `pending`.

    Клиент цену не передаёт: все товары стоят `unit_price` за штуку
    независимо от названия товара.
    """
    if not product or not address or not quantity:
        raise ValidationError(MISSING_ORDER_INFO)
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError(INVALID_QUANTITY)

    if Decimal(unit_price) * quantity > MAX_ORDER_TOTAL:
        raise ValidationError(INVALID_QUANTITY)

    total_price = calculate_total(unit_price, quantity)

    with storage_guard("create_order"):
        order = Order(
            user_id=session_ctx.user_id,
            product_name=product,
            delivery_address=address,
            quantity=quantity,
            total_price=total_price,
            status=ORDER_STATUS_PENDING,
        )
        db.session.add(order)
        db.session.commit()
        order_id = order.id

    current_app.logger.info(
        "Оформлен заказ %s (пользователь=%s, сумма=%s)",
        order_id,
        session_ctx.user_id,
        total_price,
    )
    return {"order_id": order_id, "total_price": float(total_price)}


def get_orders(user_id: int | None = None) -> list[dict]:
    """Заказы пользователя или, при `user_id=None`, все заказы системы."""
    with storage_guard("get_orders"):
        query = Order.query
        if user_id is not None:
            query = query.filter_by(user_id=user_id)
        orders = query.order_by(Order.created_at.desc(), Order.id.desc()).all()
        return [order.to_dict() for order in orders]
