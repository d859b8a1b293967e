"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: services/catalog.py – каталог товаров.

Назначение модуля:
- Однократное наполнение пустого каталога стартовым набором товаров.
- Выдача товаров в наличии с необязательным фильтром по категории.
"""

from decimal import Decimal

from flask import current_app
from sqlalchemy.exc import IntegrityError

from extensions import db
from models.product import Product
from services.errors import storage_guard

DEFAULT_PRODUCTS = (
    {
        "name": "Razer Gaming Mouse",
        "description": "Wireless gaming mouse with RGB lighting",
        "price": Decimal("2500.00"),
        "category": "Mouse",
        "stock": 50,
    },
    {
        "name": "Mechanical Keyboard",
        "description": "RGB backlit mechanical keyboard",
        "price": Decimal("3500.00"),
        "category": "Keyboard",
        "stock": 30,
    },
    {
        "name": "Gaming Monitor",
        "description": "144Hz refresh rate, 1ms response time",
        "price": Decimal("15000.00"),
        "category": "Monitor",
        "stock": 20,
    },
    {
        "name": "Gaming Headset",
        "description": "7.1 surround sound with noise cancellation",
        "price": Decimal("2800.00"),
        "category": "Headphone",
        "stock": 40,
    },
)


def _catalog_is_empty() -> bool:
    return db.session.query(Product.id).first() is None


def ensure_seeded() -> int:
    """Наполняет пустой каталог и возвращает число добавленных товаров.

    Все товары добавляются одной транзакцией. Если параллельный процесс
    успел наполнить каталог, уникальный индекс по `products.name` отклонит
    вставку, и транзакция откатится целиком.
    """
    with storage_guard("ensure_seeded"):
        if not _catalog_is_empty():
            return 0

        db.session.add_all([Product(**item) for item in DEFAULT_PRODUCTS])
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            current_app.logger.info("Каталог уже наполнен параллельным запросом")
            return 0

    current_app.logger.info("Каталог наполнен стартовыми товарами: %s", len(DEFAULT_PRODUCTS))
    return len(DEFAULT_PRODUCTS)


def get_products(category: str | None = None) -> list[dict]:
    """Товары в наличии; при заданной категории только точное совпадение."""
    ensure_seeded()
    with storage_guard("get_products"):
        query = Product.query.filter(Product.stock > 0)
        if category:
            query = query.filter(Product.category == category)
        return [product.to_dict() for product in query.order_by(Product.id).all()]
