"""
Модуль: `services/__init__.py`.
Назначение: Слой бизнес-операций магазина (учётные записи, заказы, каталог).
"""
