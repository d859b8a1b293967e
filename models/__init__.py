"""
Модуль: `models/__init__.py`.
Назначение: Импорт моделей для корректной регистрации в SQLAlchemy metadata.
"""

from .user import User
from .login_history import LoginHistory
from .order import Order
from .product import Product

__all__ = ["User", "LoginHistory", "Order", "Product"]
