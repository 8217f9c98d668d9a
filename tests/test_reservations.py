"""
Тесты для адаптера системы управления отелями и обработчиков событий.
"""

from datetime import date
from uuid import uuid4

import pytest
from pydantic import ValidationError

from hotel_patterns.accommodation.domain import (
    RoomCommand,
    RoomState,
    RoomStateChanged,
)
from hotel_patterns.booking.domain import BookingSessionConfirmed
from hotel_patterns.reservations.event_handlers import (
    on_booking_session_confirmed,
    on_room_state_changed,
)
from hotel_patterns.reservations.infrastructure import (
    ExternalReservationProvider,
    HotelManagementSystemAdapter,
)


@pytest.fixture
def adapter(logger):
    return HotelManagementSystemAdapter(ExternalReservationProvider(), logger)


class TestHotelManagementSystemAdapter:
    """Тесты адаптера."""

    def test_book_room_translates_call(self, adapter):
        """Бронирование переводится в вызов внешнего поставщика."""
        # Действие
        adapter.book_room("101", date(2026, 10, 19), date(2026, 10, 22))

        # Проверка
        assert adapter.provider.journal == [
            {
                "action": "reserve",
                "code": "R-00001",
                "room": "101",
                "arrival": "2026-10-19",
                "departure": "2026-10-22",
            }
        ]
        assert adapter.confirmation_code("101") == "R-00001"

    def test_cancel_booking_voids_reservation(self, adapter):
        """Отмена аннулирует резервирование у поставщика."""
        # Подготовка
        adapter.book_room("101", date(2026, 10, 19), date(2026, 10, 22))

        # Действие
        adapter.cancel_booking("101")

        # Проверка
        assert adapter.provider.journal[-1] == {"action": "void", "code": "R-00001"}
        assert adapter.confirmation_code("101") is None

    def test_cancel_without_reservation_only_warns(self, adapter, logger):
        """Отмена без резервирования только пишет предупреждение."""
        # Действие
        adapter.cancel_booking("404")

        # Проверка
        assert adapter.provider.journal == []
        assert logger.messages("warning")

    def test_inverted_dates_are_rejected(self, adapter):
        """Дата выезда раньше даты заезда отклоняется до вызова поставщика."""
        with pytest.raises(ValidationError):
            adapter.book_room("101", date(2026, 10, 22), date(2026, 10, 19))

        assert adapter.provider.journal == []


class TestEventHandlers:
    """Тесты обработчиков событий."""

    def test_confirmed_session_is_forwarded(self, adapter):
        """Подтвержденная сессия бронирует номер на заданное число ночей."""
        # Подготовка
        event = BookingSessionConfirmed(
            session_id=uuid4(), selected_date=date(2026, 11, 1), room_number="101"
        )

        # Действие
        on_booking_session_confirmed(event, system=adapter, nights=2)

        # Проверка
        reservation = adapter.provider.journal[0]
        assert reservation["arrival"] == "2026-11-01"
        assert reservation["departure"] == "2026-11-03"

    @pytest.mark.parametrize(
        "command", [RoomCommand.CHECK_OUT, RoomCommand.CANCEL_BOOKING]
    )
    def test_released_room_cancels_reservation(self, adapter, command):
        """Освобождение номера аннулирует его резервирование."""
        # Подготовка
        adapter.book_room("101", date(2026, 11, 1), date(2026, 11, 3))
        event = RoomStateChanged(
            room_id=uuid4(),
            room_number="101",
            previous_state=RoomState.BOOKED,
            new_state=RoomState.AVAILABLE,
            command=command,
        )

        # Действие
        on_room_state_changed(event, system=adapter)

        # Проверка
        assert adapter.provider.journal[-1]["action"] == "void"

    def test_maintenance_changes_are_ignored(self, adapter):
        """Окончание уборки не затрагивает резервирование."""
        # Подготовка
        adapter.book_room("101", date(2026, 11, 1), date(2026, 11, 3))
        event = RoomStateChanged(
            room_id=uuid4(),
            room_number="101",
            previous_state=RoomState.CLEANING,
            new_state=RoomState.AVAILABLE,
            command=RoomCommand.ADVANCE,
        )

        # Действие
        on_room_state_changed(event, system=adapter)

        # Проверка
        assert adapter.confirmation_code("101") == "R-00001"
