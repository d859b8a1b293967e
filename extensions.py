"""
Модуль: `extensions.py`.
Назначение: Инициализация и экспорт экземпляров Flask-расширений.
"""

import sqlite3

from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_session import Session
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Все расширения создаём здесь и инициализируем в фабрике приложения
db = SQLAlchemy()
cors = CORS()
server_session = Session()


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite по умолчанию не проверяет внешние ключи (ON DELETE CASCADE / SET NULL)
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
