"""
Инфраструктурный слой контекста бронирования.

Содержит хранилище сессий в памяти и единицу работы.
"""

from typing import Dict, Optional

from ..shared_kernel import ConsoleLogger, EntityId, IEventBus, ILogger, InMemoryEventBus
from . import interfaces as ports
from .domain import BookingSession


class InMemoryBookingSessionRepository(ports.IBookingSessionRepository):
    """Реализация репозитория сессий бронирования в памяти."""

    def __init__(self) -> None:
        self._sessions: Dict[EntityId, BookingSession] = {}

    def add(self, session: BookingSession) -> None:
        if session.id in self._sessions:
            raise ValueError(f"Booking session with id {session.id} already exists")
        self._sessions[session.id] = session

    def get_by_id(self, session_id: EntityId) -> BookingSession:
        if session_id not in self._sessions:
            raise KeyError(f"Booking session with id {session_id} not found")
        return self._sessions[session_id]

    def update(self, session: BookingSession) -> None:
        if session.id not in self._sessions:
            raise KeyError(f"Booking session with id {session.id} not found")
        self._sessions[session.id] = session


class BookingUnitOfWork(ports.IBookingUnitOfWork):
    """Единица работы для контекста бронирования."""

    def __init__(
        self,
        sessions_repo: Optional[ports.IBookingSessionRepository] = None,
        event_bus: Optional[IEventBus] = None,
        logger: Optional[ILogger] = None,
    ):
        self._logger = logger or ConsoleLogger()
        self._sessions = sessions_repo or InMemoryBookingSessionRepository()
        self._event_bus = event_bus or InMemoryEventBus(self._logger)
        self._committed = False

    @property
    def sessions(self) -> ports.IBookingSessionRepository:
        return self._sessions

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
        self._logger.debug("BookingUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        self._committed = False
        self._logger.warning("BookingUnitOfWork rolled back")

    def __enter__(self):
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False  # Пробрасываем исключение дальше, если оно было
