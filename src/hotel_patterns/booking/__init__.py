"""
Модуль контекста бронирования (Booking Context).

Отвечает за сессию бронирования: выбор даты, выбор номера и подтверждение.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
