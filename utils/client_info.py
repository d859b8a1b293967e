"""
Модуль: `utils/client_info.py`.
Назначение: Сведения о клиенте текущего запроса для журнала входов.
"""

from dataclasses import dataclass

from flask import request


@dataclass(frozen=True)
class ClientInfo:
    ip_address: str = "unknown"
    user_agent: str = "unknown"


def get_client_identifier() -> str:
    """Возвращает IP клиента с учетом X-Forwarded-For."""
    forwarded_for = request.headers.get("X-Forwarded-For", "")
    if forwarded_for:
        first_ip = forwarded_for.split(",", 1)[0].strip()
        if first_ip:
            return first_ip
    return request.remote_addr or "unknown"


def get_client_info() -> ClientInfo:
    """Собирает IP и User-Agent клиента текущего запроса."""
    return ClientInfo(
        ip_address=get_client_identifier()[:45],
        user_agent=request.headers.get("User-Agent") or "unknown",
    )
