"""
Модуль интеграции с внешней системой бронирования (Reservations).

Адаптер приводит внешнего поставщика резервирований к единому интерфейсу
IHotelManagementSystem, обработчики событий передают в него изменения.
"""

from . import event_handlers, infrastructure, interfaces

__all__ = [
    "event_handlers",
    "infrastructure",
    "interfaces",
]
