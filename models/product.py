"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: models/product.py – модель товара каталога.
"""

from extensions import db


class Product(db.Model):
    """Класс `Product` описывает сущность текущего модуля."""
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    # Уникальность имени защищает стартовое наполнение каталога от дублей
    name = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    category = db.Column(db.String(100), index=True)
    stock = db.Column(db.Integer, nullable=False, default=0)
    image_url = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "category": self.category,
            "stock": self.stock,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
