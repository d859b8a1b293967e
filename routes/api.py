"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: routes/api.py – единая JSON-точка входа API.

Назначение модуля:
- Разбор конверта запроса `{"action": ..., "data": {...}}`.
- Проверка данных схемой действия и вызов ровно одной бизнес-операции.
- Сериализация результата: каждый ответ содержит булево поле `success`,
  а при ошибке ещё и `message`.
"""

from functools import partial

from flask import current_app, jsonify, request, session

from extensions import db
from routes.schemas import CheckoutInput, LoginInput, ProductsInput, RegisterInput, payload_data
from services import catalog, credential_store, order_ledger
from services.errors import AuthError, ShopError, StorageError
from utils.client_info import get_client_info
from utils.session_context import SessionContext

NO_ACTION = "Invalid request - no action specified"
LOGIN_REQUIRED = "Login required"


def _api_error(message: str):
    # Ошибки передаются в теле ответа, HTTP-статус всегда 200
    return jsonify({"success": False, "message": message})


def _register(data: dict, session_ctx: SessionContext) -> dict:
    payload = RegisterInput.from_payload(data)
    result = credential_store.register(
        session_ctx,
        get_client_info(),
        payload.username,
        payload.password,
        email=payload.email,
        phone=payload.phone,
    )
    return {"message": "Registration successful", **result}


def _login(data: dict, session_ctx: SessionContext) -> dict:
    payload = LoginInput.from_payload(data)
    user = credential_store.login(
        session_ctx,
        get_client_info(),
        payload.identifier,
        payload.password,
    )
    return {"message": "Login successful", "user": user}


def _logout(data: dict, session_ctx: SessionContext) -> dict:
    credential_store.logout(session_ctx)
    return {"message": "Logged out successfully"}


def _check_session(data: dict, session_ctx: SessionContext) -> dict:
    return credential_store.check_session(session_ctx)


def _checkout(data: dict, session_ctx: SessionContext) -> dict:
    payload = CheckoutInput.from_payload(data)
    result = order_ledger.create_order(
        session_ctx,
        payload.product,
        payload.address,
        payload.quantity,
        unit_price=current_app.config["ORDER_UNIT_PRICE"],
    )
    return {"message": "Order placed successfully", **result}


def _get_orders(data: dict, session_ctx: SessionContext) -> dict:
    if not session_ctx.is_authenticated and not current_app.config["ALLOW_ANONYMOUS_ORDER_LISTING"]:
        raise AuthError(LOGIN_REQUIRED)
    return {"orders": order_ledger.get_orders(session_ctx.user_id)}


def _get_products(data: dict, session_ctx: SessionContext) -> dict:
    payload = ProductsInput.from_payload(data)
    return {"products": catalog.get_products(payload.category)}


ACTION_HANDLERS = {
    "register": _register,
    "login": _login,
    "logout": _logout,
    "check_session": _check_session,
    "checkout": _checkout,
    "get_orders": _get_orders,
    "get_products": _get_products,
}


def register_routes(app):
    @app.route("/api", methods=["POST"])
    def api():
        """Диспетчер действий JSON API."""
        envelope = request.get_json(force=True, silent=True)
        action = envelope.get("action") if isinstance(envelope, dict) else None
        if not action:
            return _api_error(NO_ACTION)

        # Нестроковое действие (число, список) считается неизвестным
        handler = ACTION_HANDLERS.get(action) if isinstance(action, str) else None
        if handler is None:
            return _api_error(f"Unknown action: {action}")

        session_ctx = SessionContext(
            session,
            regenerate=partial(current_app.session_interface.regenerate, session),
        )
        try:
            data = payload_data(envelope.get("data"))
            result = handler(data, session_ctx)
        except ShopError as exc:
            return _api_error(exc.message)
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Критическая ошибка обработки действия %s", action)
            return _api_error(StorageError.default_message)

        return jsonify({"success": True, **result})
