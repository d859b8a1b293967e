"""
Модуль: `cli.py`.
Назначение: Команды Flask CLI для подготовки базы данных.

Использование:
- flask --app app init-db
  Идемпотентно создаёт таблицы и наполняет пустой каталог.
- flask --app app init-db --no-seed
  Только таблицы, без стартовых товаров.
"""

import click
from flask.cli import with_appcontext

from extensions import db
from services import catalog


@click.command("init-db")
@click.option("--seed/--no-seed", default=True, help="Наполнить пустой каталог стартовыми товарами")
@with_appcontext
def init_db(seed):
    """Создать таблицы и наполнить каталог."""
    db.create_all()
    click.echo("PASS Таблицы созданы")

    if not seed:
        return
    inserted = catalog.ensure_seeded()
    if inserted:
        click.echo(f"PASS Добавлено товаров: {inserted}")
    else:
        click.echo("PASS Каталог уже наполнен")


def register_commands(app):
    """Регистрирует CLI-команды приложения."""
    app.cli.add_command(init_db)
