"""
Доменная модель контекста бронирования.

Сессия бронирования - линейный однократный сценарий:
выбор даты -> выбор номера -> подтверждение. Возврат назад невозможен.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from ..shared_kernel import (
    DomainEvent,
    EntityId,
    Outcome,
    RoomNumber,
    generate_id,
    now,
)


class BookingStep(str, Enum):
    """Шаги сценария бронирования."""

    SELECTING_DATE = "selecting_date"
    SELECTING_ROOM = "selecting_room"
    CONFIRMED = "confirmed"  # Конечный шаг


class BookingCommandKind(str, Enum):
    """Виды команд сценария бронирования."""

    SELECT_DATE = "select_date"
    SELECT_ROOM = "select_room"
    CONFIRM_BOOKING = "confirm_booking"


class BookingCommand(BaseModel):
    """Команда сессии бронирования вместе с ее аргументом."""

    model_config = ConfigDict(frozen=True)

    kind: BookingCommandKind
    selected_date: Optional[date] = None
    room_number: Optional[RoomNumber] = None

    @model_validator(mode="after")
    def payload_matches_kind(self) -> "BookingCommand":
        if self.kind == BookingCommandKind.SELECT_DATE and self.selected_date is None:
            raise ValueError("select_date requires a date")
        if self.kind == BookingCommandKind.SELECT_ROOM and self.room_number is None:
            raise ValueError("select_room requires a room number")
        return self

    @classmethod
    def select_date(cls, selected: date) -> "BookingCommand":
        return cls(kind=BookingCommandKind.SELECT_DATE, selected_date=selected)

    @classmethod
    def select_room(cls, room_number: str) -> "BookingCommand":
        return cls(kind=BookingCommandKind.SELECT_ROOM, room_number=room_number)

    @classmethod
    def confirm(cls) -> "BookingCommand":
        return cls(kind=BookingCommandKind.CONFIRM_BOOKING)


class BookingSessionConfirmed(DomainEvent):
    """Событие подтверждения сессии бронирования."""

    session_id: EntityId
    selected_date: date
    room_number: str


class BookingSession(BaseModel):
    """Одна попытка оформить бронирование."""

    id: EntityId = Field(default_factory=generate_id)
    step: BookingStep = BookingStep.SELECTING_DATE
    selected_date: Optional[date] = None
    room_number: Optional[RoomNumber] = None
    confirmed_at: Optional[datetime] = None
    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @model_validator(mode="after")
    def fields_match_step(self) -> "BookingSession":
        if self.step != BookingStep.SELECTING_DATE and self.selected_date is None:
            raise ValueError(f"Step {self.step.value} requires a selected date")
        if self.step == BookingStep.CONFIRMED and self.room_number is None:
            raise ValueError("Confirmed session requires a selected room")
        return self

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Возвращает список доменных событий."""
        return self._domain_events

    def pull_domain_events(self) -> List[DomainEvent]:
        """Возвращает накопленные события и очищает список."""
        events, self._domain_events = self._domain_events, []
        return events

    @property
    def is_confirmed(self) -> bool:
        return self.step == BookingStep.CONFIRMED

    def handle(self, command: BookingCommand) -> Outcome:
        """Применяет команду к сессии."""
        updated, outcome = transition_booking(self, command)
        if outcome.applied:
            self.step = updated.step
            self.selected_date = updated.selected_date
            self.room_number = updated.room_number
            if updated.confirmed_at is not None and self.confirmed_at is None:
                self.confirmed_at = updated.confirmed_at
                self._domain_events.append(
                    BookingSessionConfirmed(
                        session_id=self.id,
                        selected_date=self.selected_date,
                        room_number=self.room_number,
                    )
                )
        return outcome

    def select_date(self, selected: date) -> Outcome:
        return self.handle(BookingCommand.select_date(selected))

    def select_room(self, room_number: str) -> Outcome:
        return self.handle(BookingCommand.select_room(room_number))

    def confirm_booking(self) -> Outcome:
        return self.handle(BookingCommand.confirm())


def transition_booking(
    session: BookingSession, command: BookingCommand
) -> Tuple[BookingSession, Outcome]:
    """Чистая функция переходов сценария бронирования.

    Возвращает обновленную копию сессии и результат команды; исходная
    сессия не изменяется. Каждый шаг допускает ровно одну команду,
    продвигающую сценарий вперед, остальные отклоняются с причиной,
    в которой повторяются уже выбранные данные.
    """
    step = session.step
    kind = command.kind
    subject = f"booking session {session.id}"

    def reject(reason: str) -> Tuple[BookingSession, Outcome]:
        return session, Outcome.rejected(
            step.value, reason, subject=subject, command=kind.value
        )

    if step == BookingStep.SELECTING_DATE:
        if kind == BookingCommandKind.SELECT_DATE:
            updated = _copy(
                session,
                step=BookingStep.SELECTING_ROOM,
                selected_date=command.selected_date,
            )
            return updated, Outcome.ok(
                updated.step.value,
                f"selected date: {command.selected_date.isoformat()}",
            )
        return reject("select date first")

    if step == BookingStep.SELECTING_ROOM:
        if kind == BookingCommandKind.SELECT_ROOM:
            updated = _copy(
                session, step=BookingStep.CONFIRMED, room_number=command.room_number
            )
            return updated, Outcome.ok(
                updated.step.value, f"selected room: {command.room_number}"
            )
        if kind == BookingCommandKind.SELECT_DATE:
            return reject(_already_selected_date(session))
        return reject("select room first")

    # BookingStep.CONFIRMED
    if kind == BookingCommandKind.SELECT_DATE:
        return reject(_already_selected_date(session))
    if kind == BookingCommandKind.SELECT_ROOM:
        return reject(f"room already selected: {session.room_number}")
    if session.confirmed_at is not None:
        return session, Outcome.ok(step.value, "booking already confirmed")
    updated = _copy(session, confirmed_at=now())
    return updated, Outcome.ok(step.value, "booking confirmed")


def _already_selected_date(session: BookingSession) -> str:
    return f"date already selected: {session.selected_date.isoformat()}"


def _copy(session: BookingSession, **update) -> BookingSession:
    """Копия сессии с собственным списком событий."""
    updated = session.model_copy(update=update)
    # model_copy копирует приватные атрибуты поверхностно
    updated._domain_events = []
    return updated
