"""
Сборка приложения: настройки, единицы работы, сервисы и подписки на события.
"""

from dataclasses import dataclass
from functools import partial
from typing import List, Optional

from pydantic import BaseModel, Field

from .accommodation.application import RegisterRoomRequest, RoomApplicationService
from .accommodation.domain import RoomKind, RoomStateChanged
from .accommodation.infrastructure import AccommodationUnitOfWork
from .booking.application import BookingApplicationService
from .booking.domain import BookingSessionConfirmed
from .booking.infrastructure import BookingUnitOfWork
from .reservations.event_handlers import (
    on_booking_session_confirmed,
    on_room_state_changed,
)
from .reservations.infrastructure import HotelManagementSystemAdapter
from .shared_kernel import ConsoleLogger, ILogger, InMemoryEventBus, RoomNumber


class RoomSpec(BaseModel):
    """Описание номера, регистрируемого при запуске."""

    number: RoomNumber
    kind: RoomKind


def _default_rooms() -> List[RoomSpec]:
    return [
        RoomSpec(number="101", kind=RoomKind.LUXURY),
        RoomSpec(number="102", kind=RoomKind.BUDGET),
    ]


class HotelSettings(BaseModel):
    """Настройки демонстрационного приложения."""

    rooms: List[RoomSpec] = Field(default_factory=_default_rooms)
    default_nights: int = Field(3, gt=0)  # Срок внешнего резервирования
    verbose: bool = False


@dataclass
class HotelApp:
    """Собранное приложение; живет от запуска процесса до его завершения."""

    settings: HotelSettings
    logger: ILogger
    event_bus: InMemoryEventBus
    rooms: RoomApplicationService
    bookings: BookingApplicationService
    hotel_system: HotelManagementSystemAdapter


def bootstrap_app(
    settings: Optional[HotelSettings] = None, logger: Optional[ILogger] = None
) -> HotelApp:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or HotelSettings()
    logger = logger or ConsoleLogger(verbose=settings.verbose)

    # 1. Общая шина событий для всех контекстов
    event_bus = InMemoryEventBus(logger)

    # 2. Единицы работы и сервисы
    rooms = RoomApplicationService(
        AccommodationUnitOfWork(event_bus=event_bus, logger=logger)
    )
    bookings = BookingApplicationService(
        BookingUnitOfWork(event_bus=event_bus, logger=logger)
    )
    hotel_system = HotelManagementSystemAdapter(logger=logger)

    # 3. Подписываем обработчики на события
    event_bus.subscribe(
        BookingSessionConfirmed,
        partial(
            on_booking_session_confirmed,
            system=hotel_system,
            nights=settings.default_nights,
        ),
    )
    event_bus.subscribe(
        RoomStateChanged, partial(on_room_state_changed, system=hotel_system)
    )

    # 4. Регистрируем номера из настроек
    for entry in settings.rooms:
        rooms.register_room(RegisterRoomRequest(number=entry.number, kind=entry.kind))

    return HotelApp(
        settings=settings,
        logger=logger,
        event_bus=event_bus,
        rooms=rooms,
        bookings=bookings,
        hotel_system=hotel_system,
    )
