"""
Прикладной слой контекста проживания.

Сервис приложения принимает команды по номеру комнаты, применяет их
к жизненному циклу номера и публикует доменные события.
"""

from typing import List

from pydantic import BaseModel

from ..shared_kernel import BusinessRuleValidationException, EntityId, Outcome, RoomNumber
from . import interfaces as ports
from .domain import Room, RoomCommand, RoomKind, RoomState, create_room

# DTO (Data Transfer Objects)


class RegisterRoomRequest(BaseModel):
    """Запрос на регистрацию номера."""

    number: RoomNumber
    kind: RoomKind


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    id: EntityId
    number: str
    kind: RoomKind
    state: RoomState
    description: str

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=room.id,
            number=room.number,
            kind=room.kind,
            state=room.state,
            description=room.describe(),
        )


class RoomApplicationService:
    """Сервис приложения для управления жизненным циклом номеров."""

    def __init__(self, uow: ports.IAccommodationUnitOfWork):
        self._uow = uow

    def register_room(self, request: RegisterRoomRequest) -> RoomDTO:
        """Создает номер через фабрику отеля и регистрирует его."""
        with self._uow as uow:
            if uow.rooms.find_by_number(request.number) is not None:
                raise BusinessRuleValidationException(
                    f"Room {request.number} is already registered"
                )
            room = create_room(request.kind, request.number)
            uow.rooms.add(room)
            uow.logger.info(
                f"Registered {room.describe()} {room.number}", room_id=room.id
            )
        return RoomDTO.from_domain(room)

    def get_room(self, room_number: str) -> RoomDTO:
        """Возвращает информацию о номере."""
        return RoomDTO.from_domain(self._uow.rooms.get_by_number(room_number))

    def list_rooms(self) -> List[RoomDTO]:
        return [RoomDTO.from_domain(room) for room in self._uow.rooms.list_all()]

    def book_room(self, room_number: str) -> Outcome:
        return self._execute(room_number, RoomCommand.BOOK)

    def check_out(self, room_number: str) -> Outcome:
        return self._execute(room_number, RoomCommand.CHECK_OUT)

    def cancel_booking(self, room_number: str) -> Outcome:
        return self._execute(room_number, RoomCommand.CANCEL_BOOKING)

    def start_cleaning(self, room_number: str) -> Outcome:
        return self._execute(room_number, RoomCommand.START_CLEANING)

    def start_repair(self, room_number: str) -> Outcome:
        return self._execute(room_number, RoomCommand.START_REPAIR)

    def advance(self, room_number: str) -> Outcome:
        """Завершает уборку или ремонт номера."""
        return self._execute(room_number, RoomCommand.ADVANCE)

    def _execute(self, room_number: str, command: RoomCommand) -> Outcome:
        with self._uow as uow:
            room = uow.rooms.get_by_number(room_number)
            outcome = room.handle(command)
            if outcome.applied:
                uow.rooms.update(room)
                uow.logger.info(outcome.message, command=command.value)
            else:
                uow.logger.warning(
                    f"Room {room_number}: {command.value} rejected",
                    reason=outcome.reason,
                    state=outcome.state,
                )
            events = room.pull_domain_events()

        # События публикуются только после фиксации изменений
        for event in events:
            self._uow.event_bus.publish(event)
        return outcome
