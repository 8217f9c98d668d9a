"""
Модуль контекста проживания (Accommodation Context).

Отвечает за номера отеля:
- Создание номеров через фабрики отелей (люкс и бюджетный)
- Жизненный цикл номера: бронирование, выезд, уборка, ремонт
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
