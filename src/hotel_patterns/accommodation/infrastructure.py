"""
Инфраструктурный слой контекста проживания.

Содержит реализации репозиториев в памяти и единицу работы.
"""

from typing import Dict, List, Optional

from ..shared_kernel import ConsoleLogger, IEventBus, ILogger, InMemoryEventBus
from . import interfaces as ports
from .domain import Room


class InMemoryRoomRepository(ports.IRoomRepository):
    """Реализация репозитория номеров в памяти."""

    def __init__(self) -> None:
        self._rooms: Dict[str, Room] = {}

    def add(self, room: Room) -> None:
        if room.number in self._rooms:
            raise ValueError(f"Room with number {room.number} already exists")
        self._rooms[room.number] = room

    def get_by_number(self, room_number: str) -> Room:
        if room_number not in self._rooms:
            raise KeyError(f"Room with number {room_number} not found")
        return self._rooms[room_number]

    def find_by_number(self, room_number: str) -> Optional[Room]:
        return self._rooms.get(room_number)

    def update(self, room: Room) -> None:
        if room.number not in self._rooms:
            raise KeyError(f"Room with number {room.number} not found")
        self._rooms[room.number] = room

    def list_all(self) -> List[Room]:
        return list(self._rooms.values())


class AccommodationUnitOfWork(ports.IAccommodationUnitOfWork):
    """Единица работы для контекста проживания."""

    def __init__(
        self,
        rooms_repo: Optional[ports.IRoomRepository] = None,
        event_bus: Optional[IEventBus] = None,
        logger: Optional[ILogger] = None,
    ):
        self._logger = logger or ConsoleLogger()
        self._rooms = rooms_repo or InMemoryRoomRepository()
        self._event_bus = event_bus or InMemoryEventBus(self._logger)
        self._committed = False

    @property
    def rooms(self) -> ports.IRoomRepository:
        return self._rooms

    @property
    def event_bus(self) -> IEventBus:
        return self._event_bus

    @property
    def logger(self) -> ILogger:
        return self._logger

    @property
    def committed(self) -> bool:
        return self._committed

    def commit(self) -> None:
        """Фиксирует все изменения."""
        self._committed = True
        self._logger.debug("AccommodationUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        self._committed = False
        self._logger.warning("AccommodationUnitOfWork rolled back")

    def __enter__(self):
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False  # Пробрасываем исключение дальше, если оно было
