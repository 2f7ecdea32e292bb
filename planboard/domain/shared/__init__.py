"""Shared domain building blocks."""

from .base import DomainEvent, Entity, ValueObject
from .exceptions import (
    DomainError,
    DragStateError,
    EditPermissionError,
    ErrorType,
    InvalidDateError,
    InvalidStageCodeError,
    NotFoundError,
    StageNotFoundError,
    UnitNotFoundError,
    UnschedulableStageError,
    ValidationError,
    WorkerNotFoundError,
)

__all__ = [
    "DomainError",
    "DomainEvent",
    "DragStateError",
    "EditPermissionError",
    "Entity",
    "ErrorType",
    "InvalidDateError",
    "InvalidStageCodeError",
    "NotFoundError",
    "StageNotFoundError",
    "UnitNotFoundError",
    "UnschedulableStageError",
    "ValidationError",
    "ValueObject",
    "WorkerNotFoundError",
]
