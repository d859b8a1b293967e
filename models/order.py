"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: models/order.py – модель заказа.

Назначение модуля:
- Описание ORM-модели Order для хранения оформленных заказов.
- Название товара хранится свободным текстом и не ссылается на каталог.
- Сериализация заказа в словарь для JSON-ответа.
"""

from extensions import db


class Order(db.Model):
    """Класс `Order` описывает сущность текущего модуля."""
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    # NULL для анонимного оформления заказа
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    product_name = db.Column(db.String(255), nullable=False)
    delivery_address = db.Column(db.Text, nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    total_price = db.Column(db.Numeric(10, 2))
    status = db.Column(db.String(50), nullable=False, default="pending", server_default="pending")
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    user = db.relationship("User", back_populates="orders")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "product_name": self.product_name,
            "delivery_address": self.delivery_address,
            "quantity": self.quantity,
            "total_price": float(self.total_price) if self.total_price is not None else None,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
