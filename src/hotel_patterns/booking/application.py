"""
Прикладной слой контекста бронирования.

Координирует сессии бронирования: находит сессию, применяет к ней
команду и публикует доменные события после фиксации.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from ..shared_kernel import EntityId, Outcome
from . import interfaces as ports
from .domain import BookingCommand, BookingSession, BookingStep


class BookingSessionDTO(BaseModel):
    """DTO для представления сессии бронирования."""

    id: EntityId
    step: BookingStep
    selected_date: Optional[date]
    room_number: Optional[str]
    confirmed_at: Optional[datetime]

    @classmethod
    def from_domain(cls, session: BookingSession) -> "BookingSessionDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=session.id,
            step=session.step,
            selected_date=session.selected_date,
            room_number=session.room_number,
            confirmed_at=session.confirmed_at,
        )


class BookingApplicationService:
    """Сервис приложения для работы с сессиями бронирования."""

    def __init__(self, uow: ports.IBookingUnitOfWork):
        self._uow = uow

    def start_session(self) -> BookingSessionDTO:
        """Открывает новую сессию бронирования."""
        with self._uow as uow:
            session = BookingSession()
            uow.sessions.add(session)
            uow.logger.info("Booking session started", session_id=session.id)
        return BookingSessionDTO.from_domain(session)

    def get_session(self, session_id: EntityId) -> BookingSessionDTO:
        return BookingSessionDTO.from_domain(self._uow.sessions.get_by_id(session_id))

    def select_date(self, session_id: EntityId, selected: date) -> Outcome:
        return self._execute(session_id, BookingCommand.select_date(selected))

    def select_room(self, session_id: EntityId, room_number: str) -> Outcome:
        return self._execute(session_id, BookingCommand.select_room(room_number))

    def confirm_booking(self, session_id: EntityId) -> Outcome:
        return self._execute(session_id, BookingCommand.confirm())

    def _execute(self, session_id: EntityId, command: BookingCommand) -> Outcome:
        with self._uow as uow:
            session = uow.sessions.get_by_id(session_id)
            outcome = session.handle(command)
            if outcome.applied:
                uow.sessions.update(session)
                uow.logger.info(outcome.message, session_id=session.id)
            else:
                uow.logger.warning(
                    f"Booking session: {command.kind.value} rejected",
                    session_id=session.id,
                    reason=outcome.reason,
                )
            events = session.pull_domain_events()

        for event in events:
            self._uow.event_bus.publish(event)
        return outcome
