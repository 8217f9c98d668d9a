"""
Инфраструктурный слой интеграции с внешней системой бронирования.

Внешний поставщик принимает словарь с датами в формате ISO и возвращает
код подтверждения; адаптер приводит его к интерфейсу IHotelManagementSystem.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter

from ..shared_kernel import ConsoleLogger, DateRange, ILogger, RoomNumber
from . import interfaces as ports

_room_number = TypeAdapter(RoomNumber)


class ExternalReservationProvider:
    """Заглушка внешней системы бронирования со своим форматом вызовов."""

    def __init__(self) -> None:
        self.journal: List[Dict[str, Any]] = []
        self._sequence = 0

    def make_reservation(self, payload: Dict[str, str]) -> str:
        """Создает резервирование и возвращает код подтверждения."""
        self._sequence += 1
        code = f"R-{self._sequence:05d}"
        self.journal.append({"action": "reserve", "code": code, **payload})
        return code

    def void_reservation(self, confirmation_code: str) -> None:
        """Аннулирует резервирование по коду подтверждения."""
        self.journal.append({"action": "void", "code": confirmation_code})


class HotelManagementSystemAdapter(ports.IHotelManagementSystem):
    """Адаптер для интеграции с внешней системой управления отелями."""

    def __init__(
        self,
        provider: Optional[ExternalReservationProvider] = None,
        logger: Optional[ILogger] = None,
    ):
        self._provider = provider or ExternalReservationProvider()
        self._logger = logger or ConsoleLogger()
        self._codes: Dict[str, str] = {}

    @property
    def provider(self) -> ExternalReservationProvider:
        return self._provider

    def confirmation_code(self, room_number: str) -> Optional[str]:
        return self._codes.get(room_number)

    def book_room(self, room_number: str, check_in: date, check_out: date) -> None:
        room_number = _room_number.validate_python(room_number)
        period = DateRange(check_in=check_in, check_out=check_out)
        code = self._provider.make_reservation(
            {
                "room": room_number,
                "arrival": period.check_in.isoformat(),
                "departure": period.check_out.isoformat(),
            }
        )
        self._codes[room_number] = code
        self._logger.info(
            f"Booking Room {room_number} from {period.check_in} to {period.check_out}",
            confirmation_code=code,
            nights=period.nights,
        )

    def cancel_booking(self, room_number: str) -> None:
        code = self._codes.pop(room_number, None)
        if code is None:
            self._logger.warning(
                f"No external reservation for Room {room_number}, nothing to cancel"
            )
            return
        self._provider.void_reservation(code)
        self._logger.info(
            f"Canceling booking for Room {room_number}", confirmation_code=code
        )
