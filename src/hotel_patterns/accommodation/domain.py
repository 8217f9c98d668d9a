"""
Доменная модель контекста проживания.

Содержит жизненный цикл номера (конечный автомат состояний номера)
и фабрики отелей, создающие номера нужной категории.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, Field, PrivateAttr

from ..shared_kernel import (
    BusinessRuleValidationException,
    DomainEvent,
    EntityId,
    Outcome,
    RoomNumber,
    generate_id,
)


class RoomState(str, Enum):
    """Состояния номера."""

    AVAILABLE = "available"  # Свободен, ни бронирования, ни обслуживания
    BOOKED = "booked"  # Забронирован
    CLEANING = "cleaning"  # В процессе уборки
    REPAIR = "repair"  # На ремонте


class RoomCommand(str, Enum):
    """Команды жизненного цикла номера."""

    BOOK = "book"
    CHECK_OUT = "check_out"
    CANCEL_BOOKING = "cancel_booking"
    START_CLEANING = "start_cleaning"
    START_REPAIR = "start_repair"
    ADVANCE = "advance"  # Завершает активное обслуживание (уборку или ремонт)


class RoomKind(str, Enum):
    """Категории номеров."""

    LUXURY = "luxury"
    BUDGET = "budget"


# Таблица переходов: (состояние, команда) -> новое состояние или причина отказа.
_A, _B, _C, _R = (
    RoomState.AVAILABLE,
    RoomState.BOOKED,
    RoomState.CLEANING,
    RoomState.REPAIR,
)

_ROOM_TRANSITIONS: Dict[Tuple[RoomState, RoomCommand], Union[RoomState, str]] = {
    (_A, RoomCommand.BOOK): _B,
    (_B, RoomCommand.BOOK): "already booked",
    (_C, RoomCommand.BOOK): "room is being cleaned",
    (_R, RoomCommand.BOOK): "room is under repair",
    (_A, RoomCommand.CHECK_OUT): "not booked",
    (_B, RoomCommand.CHECK_OUT): _A,
    (_C, RoomCommand.CHECK_OUT): "not booked",
    (_R, RoomCommand.CHECK_OUT): "not booked",
    (_A, RoomCommand.START_CLEANING): _C,
    (_B, RoomCommand.START_CLEANING): "room is booked",
    (_C, RoomCommand.START_CLEANING): "already cleaning",
    (_R, RoomCommand.START_CLEANING): "room is under repair",
    (_A, RoomCommand.START_REPAIR): _R,
    (_B, RoomCommand.START_REPAIR): "room is booked",
    (_C, RoomCommand.START_REPAIR): "room is being cleaned",
    (_R, RoomCommand.START_REPAIR): "already under repair",
    (_A, RoomCommand.ADVANCE): "nothing to process",
    (_B, RoomCommand.ADVANCE): "nothing to process",
    (_C, RoomCommand.ADVANCE): _A,
    (_R, RoomCommand.ADVANCE): _A,
}

# Отмена бронирования ведет себя так же, как выезд
for _state in RoomState:
    _ROOM_TRANSITIONS[(_state, RoomCommand.CANCEL_BOOKING)] = _ROOM_TRANSITIONS[
        (_state, RoomCommand.CHECK_OUT)
    ]
del _state


def transition_room(
    state: RoomState, command: RoomCommand, room_number: str
) -> Tuple[RoomState, Outcome]:
    """Чистая функция переходов жизненного цикла номера.

    Определена для каждой пары (состояние, команда): команда либо переводит
    номер в новое состояние, либо отклоняется без изменения состояния.
    Номер комнаты используется только в сообщениях.
    """
    state, command = RoomState(state), RoomCommand(command)
    target = _ROOM_TRANSITIONS[(state, command)]
    if isinstance(target, RoomState):
        return target, Outcome.ok(
            target.value,
            f"room {room_number}: {state.value} -> {target.value}",
        )
    return state, Outcome.rejected(
        state.value, target, subject=f"room {room_number}", command=command.value
    )


class RoomStateChanged(DomainEvent):
    """Событие изменения состояния номера."""

    room_id: EntityId
    room_number: str
    previous_state: RoomState
    new_state: RoomState
    command: RoomCommand


class Room(BaseModel):
    """Номер в отеле со своим жизненным циклом."""

    id: EntityId = Field(default_factory=generate_id)
    number: RoomNumber = Field(frozen=True)  # Например, "101", "202A"
    kind: RoomKind
    state: RoomState = RoomState.AVAILABLE
    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Возвращает список доменных событий."""
        return self._domain_events

    def pull_domain_events(self) -> List[DomainEvent]:
        """Возвращает накопленные события и очищает список."""
        events, self._domain_events = self._domain_events, []
        return events

    def describe(self) -> str:
        return f"{self.kind.value.capitalize()} Room"

    @property
    def is_idle(self) -> bool:
        """Номер не забронирован и не на обслуживании."""
        return self.state == RoomState.AVAILABLE

    def handle(self, command: RoomCommand) -> Outcome:
        """Применяет команду к номеру."""
        previous = self.state
        self.state, outcome = transition_room(previous, command, self.number)
        if outcome.applied:
            self._domain_events.append(
                RoomStateChanged(
                    room_id=self.id,
                    room_number=self.number,
                    previous_state=previous,
                    new_state=self.state,
                    command=command,
                )
            )
        return outcome

    def book(self) -> Outcome:
        return self.handle(RoomCommand.BOOK)

    def check_out(self) -> Outcome:
        return self.handle(RoomCommand.CHECK_OUT)

    def cancel_booking(self) -> Outcome:
        return self.handle(RoomCommand.CANCEL_BOOKING)

    def start_cleaning(self) -> Outcome:
        return self.handle(RoomCommand.START_CLEANING)

    def start_repair(self) -> Outcome:
        return self.handle(RoomCommand.START_REPAIR)

    def advance(self) -> Outcome:
        """Завершает активное обслуживание и возвращает номер в оборот."""
        return self.handle(RoomCommand.ADVANCE)

    # Завершение уборки и ремонта - одна и та же команда
    finish_cleaning = advance
    finish_repair = advance


# Фабричный метод


class Hotel(ABC):
    """Абстрактный отель, создающий номера своей категории."""

    @abstractmethod
    def create_room(self, number: str) -> Room:
        """Создает новый номер."""


class LuxuryHotel(Hotel):
    """Отель класса люкс."""

    def create_room(self, number: str) -> Room:
        return Room(number=number, kind=RoomKind.LUXURY)


class BudgetHotel(Hotel):
    """Бюджетный отель."""

    def create_room(self, number: str) -> Room:
        return Room(number=number, kind=RoomKind.BUDGET)


_HOTELS: Dict[RoomKind, Hotel] = {
    RoomKind.LUXURY: LuxuryHotel(),
    RoomKind.BUDGET: BudgetHotel(),
}


def hotel_for(kind: Union[RoomKind, str]) -> Hotel:
    """Возвращает фабрику номеров для указанной категории."""
    try:
        return _HOTELS[RoomKind(kind)]
    except ValueError as e:
        raise BusinessRuleValidationException(f"Unknown room kind: {kind}") from e


def create_room(kind: Union[RoomKind, str], number: str) -> Room:
    """Создает номер указанной категории."""
    return hotel_for(kind).create_room(number)
