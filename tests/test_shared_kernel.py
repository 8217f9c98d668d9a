"""
Тесты для общего ядра: значения, логгер и шина событий.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from hotel_patterns.shared_kernel import (
    ConsoleLogger,
    DateRange,
    DomainEvent,
    InMemoryEventBus,
    Outcome,
)


class Ping(DomainEvent):
    payload: str


class TestDateRange:
    """Тесты для объекта-значения DateRange."""

    def test_nights(self):
        """Количество ночей равно разнице дат."""
        # Подготовка
        period = DateRange(check_in=date(2026, 1, 1), check_out=date(2026, 1, 4))

        # Проверка
        assert period.nights == 3

    def test_check_out_must_follow_check_in(self):
        """Дата выезда должна быть позже даты заезда."""
        with pytest.raises(ValidationError):
            DateRange(check_in=date(2026, 1, 4), check_out=date(2026, 1, 4))

    def test_starting(self):
        """Период строится от даты заезда и числа ночей."""
        # Действие
        period = DateRange.starting(date(2026, 1, 30), 3)

        # Проверка
        assert period.check_out == date(2026, 2, 2)


class TestOutcome:
    """Тесты для результата команды."""

    def test_applied_outcome_has_no_reason(self):
        """Примененный результат не содержит причины отказа."""
        # Действие
        outcome = Outcome.ok("booked", "room 101: available -> booked")

        # Проверка
        assert outcome.applied
        assert outcome.reason is None

    def test_rejected_outcome_carries_invalid_transition(self):
        """Отказ содержит описание недопустимого перехода."""
        # Действие
        outcome = Outcome.rejected("booked", "already booked", "room 101", "book")

        # Проверка
        assert not outcome.applied
        assert outcome.reason == "already booked"
        assert outcome.message == "already booked"


class TestConsoleLogger:
    """Тесты для консольного логгера."""

    def test_levels_go_to_expected_streams(self, capsys):
        """Информация пишется в stdout, предупреждения в stderr."""
        # Подготовка
        logger = ConsoleLogger()

        # Действие
        logger.info("hello", room="101")
        logger.warning("careful")
        logger.debug("hidden")

        # Проверка
        captured = capsys.readouterr()
        assert "[INFO] hello" in captured.out
        assert '"room": "101"' in captured.out
        assert "[WARNING] careful" in captured.err
        assert "hidden" not in captured.out

    def test_verbose_enables_debug(self, capsys):
        """Подробный режим включает отладочные сообщения."""
        # Действие
        ConsoleLogger(verbose=True).debug("shown")

        # Проверка
        assert "[DEBUG] shown" in capsys.readouterr().out


class TestInMemoryEventBus:
    """Тесты для шины событий в памяти."""

    def test_publish_to_subscribers(self, event_bus):
        """События доставляются подписчикам по порядку."""
        # Подготовка
        received = []
        event_bus.subscribe(Ping, received.append)

        # Действие
        event_bus.publish_all([Ping(payload="a"), Ping(payload="b")])

        # Проверка
        assert [e.payload for e in received] == ["a", "b"]

    def test_handler_errors_are_logged(self, logger):
        """Ошибка обработчика записывается в лог и не прерывает публикацию."""
        # Подготовка
        bus = InMemoryEventBus(logger)

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(Ping, broken)

        # Действие
        bus.publish(Ping(payload="x"))

        # Проверка
        assert logger.messages("error") == ["Error in event handler for Ping"]
