"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: models/user.py – модель пользователя системы.

Назначение модуля:
- Описание ORM-модели User для работы с таблицей пользователей в базе данных.
- Хранение учётных записей (логин, контакты, хеш пароля) и связей с историей входов и заказами.
"""

from extensions import db


class User(db.Model):
    """Класс `User` описывает сущность текущего модуля."""
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=True)
    phone = db.Column(db.String(20), nullable=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(
        db.DateTime,
        server_default=db.func.now(),
        onupdate=db.func.now(),
        nullable=False,
    )

    login_history = db.relationship(
        "LoginHistory",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy=True,
    )
    orders = db.relationship("Order", back_populates="user", passive_deletes=True, lazy=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "phone": self.phone,
        }
