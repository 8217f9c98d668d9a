"""
Общая инфраструктура: логгер и шина событий в памяти.
"""

import json
import sys
from typing import Callable, Dict, List, Optional, Type

from . import interfaces as ports
from .domain import DomainEvent


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, verbose: bool = False):
        self._verbose = verbose

    def _emit(self, level: str, message: str, stream, **kwargs) -> None:
        print(f"[{level}] {message}", file=stream, flush=True)
        if kwargs:
            print(
                "  Context:",
                json.dumps(kwargs, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs) -> None:
        if self._verbose:
            self._emit("DEBUG", message, sys.stdout, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._emit("INFO", message, sys.stdout, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._emit("WARNING", message, sys.stderr, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._emit("ERROR", message, sys.stderr, **kwargs)


class InMemoryEventBus(ports.IEventBus):
    """Реализация шины событий в памяти."""

    def __init__(self, logger: Optional[ports.ILogger] = None):
        self._subscribers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._logger = logger or ConsoleLogger()

    def publish(self, event: DomainEvent) -> None:
        """Публикует событие."""
        event_type = type(event)
        if event_type not in self._subscribers:
            self._logger.debug(f"No subscribers for event type {event.event_type}")
            return

        self._logger.debug(
            f"Publishing event: {event.event_type}", event=event.model_dump()
        )

        for handler in self._subscribers[event_type]:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    f"Error in event handler for {event.event_type}",
                    error=str(e),
                    event=event.model_dump(),
                )

    def publish_all(self, events: List[DomainEvent]) -> None:
        """Публикует события в порядке их возникновения."""
        for event in events:
            self.publish(event)

    def subscribe(self, event_type: Type[DomainEvent], handler: Callable) -> None:
        """Подписывает обработчик на события указанного типа."""
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed handler to {event_type.__name__} events")
