"""
Общее ядро (Shared Kernel) для демонстрационной системы отеля.

Содержит общие типы данных и утилиты, используемые в различных ограниченных контекстах.
"""

from .domain import (
    BusinessRuleValidationException,
    DateRange,
    DomainEvent,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidTransition,
    # Основные классы
    Outcome,
    RoomNumber,
    TransitionRejectedException,
    generate_id,
    # Утилиты
    now,
    today,
)
from .infrastructure import ConsoleLogger, InMemoryEventBus
from .interfaces import IEventBus, ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "RoomNumber",
    "generate_id",
    # Основные классы
    "DateRange",
    "DomainEvent",
    "InvalidTransition",
    "Outcome",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "TransitionRejectedException",
    # Порты и инфраструктура
    "ILogger",
    "IEventBus",
    "ConsoleLogger",
    "InMemoryEventBus",
    # Утилиты
    "now",
    "today",
]
