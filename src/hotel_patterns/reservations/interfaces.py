"""
Интерфейсы (порты) для интеграции с системой управления отелями.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol


class IHotelManagementSystem(Protocol):
    """Единый интерфейс системы управления отелями."""

    def book_room(self, room_number: str, check_in: date, check_out: date) -> None: ...
    def cancel_booking(self, room_number: str) -> None: ...
