"""
Программа: «Kycel» – backend интернет-магазина игровой периферии.
Модуль: models/login_history.py – журнал попыток входа и регистрации.
"""

from extensions import db


class LoginHistory(db.Model):
    """Запись журнала входов. Только добавление, без изменения и удаления."""
    __tablename__ = "login_history"

    id = db.Column(db.Integer, primary_key=True)
    # NULL, если логин не совпал ни с одним пользователем
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    username = db.Column(db.String(100), nullable=True)
    login_time = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    ip_address = db.Column(db.String(45), nullable=True)
    user_agent = db.Column(db.Text, nullable=True)
    success = db.Column(db.Boolean, nullable=False, default=True)

    user = db.relationship("User", back_populates="login_history")
