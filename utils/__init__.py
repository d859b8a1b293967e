"""
Модуль: `utils/__init__.py`.
Назначение: Вспомогательные функции уровня запроса.
"""
