"""
Модуль: `routes/__init__.py`.
Назначение: Маршруты HTTP-API приложения.
"""
