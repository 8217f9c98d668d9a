"""
Интерфейсы (порты) для контекста проживания.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..shared_kernel import IEventBus, ILogger
from .domain import Room


class IRoomRepository(Protocol):
    """Интерфейс репозитория для номеров."""

    def add(self, room: Room) -> None: ...
    def get_by_number(self, room_number: str) -> Room: ...
    def find_by_number(self, room_number: str) -> Optional[Room]: ...
    def update(self, room: Room) -> None: ...
    def list_all(self) -> List[Room]: ...


class IAccommodationUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста проживания."""

    @property
    def rooms(self) -> IRoomRepository: ...
    @property
    def event_bus(self) -> IEventBus: ...
    @property
    def logger(self) -> ILogger: ...

    def __enter__(self) -> IAccommodationUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
