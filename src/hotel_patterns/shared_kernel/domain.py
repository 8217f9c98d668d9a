"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Annotated, Optional
from uuid import UUID, uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время (UTC)."""
    return datetime.now(timezone.utc)


def today() -> date:
    """Возвращает текущую дату."""
    return date.today()


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


def _validate_room_number(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Room number must not be empty")
    return value


# Общие типы идентификаторов
EntityId = UUID
RoomNumber = Annotated[str, AfterValidator(_validate_room_number)]


class DateRange(BaseModel):
    """Диапазон дат проживания."""

    model_config = ConfigDict(frozen=True)

    check_in: date
    check_out: date

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "DateRange":
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be later than check-in date")
        return self

    @property
    def nights(self) -> int:
        """Количество ночей в диапазоне."""
        return (self.check_out - self.check_in).days

    @classmethod
    def starting(cls, check_in: date, nights: int) -> "DateRange":
        """Строит диапазон из даты заезда и количества ночей."""
        return cls(check_in=check_in, check_out=check_in + timedelta(days=nights))


class InvalidTransition(BaseModel):
    """Отклоненная команда: единственный вид ошибки конечных автоматов."""

    model_config = ConfigDict(frozen=True)

    reason: str
    subject: str
    command: str


class Outcome(BaseModel):
    """Результат выполнения команды над конечным автоматом.

    Либо команда применена (``applied``), либо отклонена с причиной.
    Состояние после команды хранится строковым значением перечисления.
    """

    model_config = ConfigDict(frozen=True)

    applied: bool
    state: str
    message: str
    error: Optional[InvalidTransition] = None

    @property
    def reason(self) -> Optional[str]:
        """Причина отказа или None, если команда применена."""
        return self.error.reason if self.error is not None else None

    @classmethod
    def ok(cls, state: str, message: str) -> "Outcome":
        return cls(applied=True, state=state, message=message)

    @classmethod
    def rejected(
        cls, state: str, reason: str, subject: str, command: str
    ) -> "Outcome":
        return cls(
            applied=False,
            state=state,
            message=reason,
            error=InvalidTransition(reason=reason, subject=subject, command=command),
        )

    def raise_if_rejected(self) -> "Outcome":
        """Превращает отказ в исключение для вызывающих, которым оно нужно."""
        if self.error is not None:
            raise TransitionRejectedException(self.error)
        return self


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=now)

    @property
    def event_type(self) -> str:
        return type(self).__name__


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class TransitionRejectedException(DomainException):
    """Отклоненный переход, превращенный в исключение."""

    def __init__(self, error: InvalidTransition):
        super().__init__(f"{error.subject}: {error.command} rejected: {error.reason}")
        self.error = error
