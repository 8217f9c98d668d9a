from ..accommodation.domain import RoomCommand, RoomState, RoomStateChanged
from ..booking.domain import BookingSessionConfirmed
from ..shared_kernel import DateRange
from .interfaces import IHotelManagementSystem

_RELEASING_COMMANDS = (RoomCommand.CHECK_OUT, RoomCommand.CANCEL_BOOKING)


def on_booking_session_confirmed(
    event: BookingSessionConfirmed,
    system: "IHotelManagementSystem",
    nights: int,
) -> None:
    """Передает подтвержденную сессию во внешнюю систему."""
    period = DateRange.starting(event.selected_date, nights)
    system.book_room(event.room_number, period.check_in, period.check_out)


def on_room_state_changed(
    event: RoomStateChanged, system: "IHotelManagementSystem"
) -> None:
    """Отменяет внешнее резервирование, когда номер освобождается."""
    if (
        event.previous_state == RoomState.BOOKED
        and event.command in _RELEASING_COMMANDS
    ):
        system.cancel_booking(event.room_number)
