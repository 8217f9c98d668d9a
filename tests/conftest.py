"""
Общие фикстуры для тестов.
"""

from typing import Any, Dict, List, Tuple

import pytest

from hotel_patterns.accommodation.application import (
    RegisterRoomRequest,
    RoomApplicationService,
)
from hotel_patterns.accommodation.domain import RoomKind
from hotel_patterns.accommodation.infrastructure import AccommodationUnitOfWork
from hotel_patterns.booking.application import BookingApplicationService
from hotel_patterns.booking.infrastructure import BookingUnitOfWork
from hotel_patterns.shared_kernel import InMemoryEventBus


class RecordingLogger:
    """Логгер, запоминающий сообщения вместо вывода в консоль."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def event_bus(logger):
    return InMemoryEventBus(logger)


@pytest.fixture
def accommodation_uow(event_bus, logger):
    return AccommodationUnitOfWork(event_bus=event_bus, logger=logger)


@pytest.fixture
def room_service(accommodation_uow):
    """Сервис номеров с зарегистрированными номерами 101 и 102."""
    service = RoomApplicationService(accommodation_uow)
    service.register_room(RegisterRoomRequest(number="101", kind=RoomKind.LUXURY))
    service.register_room(RegisterRoomRequest(number="102", kind=RoomKind.BUDGET))
    return service


@pytest.fixture
def booking_uow(event_bus, logger):
    return BookingUnitOfWork(event_bus=event_bus, logger=logger)


@pytest.fixture
def booking_service(booking_uow):
    return BookingApplicationService(booking_uow)
