"""
Демонстрационный сценарий: фабрики отелей, адаптер системы управления
и конечные автоматы номера и сессии бронирования.
"""

import sys
from datetime import date, timedelta
from typing import Optional

from .accommodation.domain import BudgetHotel, LuxuryHotel
from .bootstrap import HotelApp, bootstrap_app
from .shared_kernel import today


def run_demo(app: HotelApp, start: Optional[date] = None) -> None:
    """Прогоняет фиксированную последовательность команд."""
    start = start or today()
    log = app.logger

    # Фабричный метод
    for hotel, number in ((LuxuryHotel(), "101"), (BudgetHotel(), "102")):
        room = hotel.create_room(number)
        log.info(f"{room.describe()} {room.number}")

    # Адаптер
    app.hotel_system.book_room("101", start, start + timedelta(days=3))
    app.hotel_system.cancel_booking("101")

    # Жизненный цикл номера 101: бронирование и выезд
    app.rooms.book_room("101")
    app.rooms.book_room("101")
    app.rooms.check_out("101")

    # Жизненный цикл номера 102: уборка и ремонт
    app.rooms.start_cleaning("102")
    app.rooms.book_room("102")
    app.rooms.advance("102")
    app.rooms.start_repair("102")
    app.rooms.book_room("102")
    app.rooms.advance("102")

    # Сессия бронирования
    session = app.bookings.start_session()
    app.bookings.select_date(session.id, start)
    app.bookings.select_room(session.id, "101")
    app.bookings.confirm_booking(session.id)

    for room in app.rooms.list_rooms():
        log.info(f"{room.description} {room.number}: {room.state.value}")


def main() -> int:
    run_demo(bootstrap_app())
    return 0


if __name__ == "__main__":
    sys.exit(main())
