"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..shared_kernel import EntityId, IEventBus, ILogger
from .domain import BookingSession


class IBookingSessionRepository(Protocol):
    """Интерфейс репозитория для сессий бронирования."""

    def add(self, session: BookingSession) -> None: ...
    def get_by_id(self, session_id: EntityId) -> BookingSession: ...
    def update(self, session: BookingSession) -> None: ...


class IBookingUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста Booking."""

    @property
    def sessions(self) -> IBookingSessionRepository: ...
    @property
    def event_bus(self) -> IEventBus: ...
    @property
    def logger(self) -> ILogger: ...

    def __enter__(self) -> IBookingUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
