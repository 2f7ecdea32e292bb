"""
Domain Exceptions

Custom exceptions for planning-board errors, discriminated by ``ErrorType``.
Recoverable outcomes (clamped drags, skipped commits, missing skills) are
returned as values by the services and never raised.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    STATE = "state"
    BUSINESS_RULE = "business_rule"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        full_message = f"Validation failed for field '{field_name}': {message}"
        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
            "error_code": self.error_code,
        }
        super().__init__(full_message, ErrorType.VALIDATION, details)


class InvalidDateError(ValidationError):
    """Raised when a value cannot be read as a calendar date."""

    def __init__(self, value: object, field_name: str = "date") -> None:
        super().__init__(
            field_name,
            repr(value),
            f"{value!r} is not a valid date",
            "INVALID_DATE",
        )
        self.raw_value = value


class InvalidStageCodeError(ValidationError):
    """Raised when a stage code does not belong to a unit category's vocabulary."""

    def __init__(self, stage_code: str, category: str) -> None:
        super().__init__(
            "stage",
            stage_code,
            f"stage code '{stage_code}' is not valid for category '{category}'",
            "INVALID_STAGE_CODE",
        )
        self.stage_code = stage_code
        self.category = category


# Lookup failures
class NotFoundError(DomainError):
    """Base class for lookups by id that found nothing."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.NOT_FOUND, details)


class UnitNotFoundError(NotFoundError):
    """Raised when a unit is not present in the registry."""

    def __init__(self, unit_id: str) -> None:
        super().__init__(
            f"Unit not found: {unit_id}", {"unit_id": unit_id, "entity_type": "unit"}
        )
        self.unit_id = unit_id


class StageNotFoundError(NotFoundError):
    """Raised when a unit has no stage with the given id."""

    def __init__(self, unit_id: str, stage_id: str) -> None:
        super().__init__(
            f"Stage {stage_id} not found on unit {unit_id}",
            {"unit_id": unit_id, "stage_id": stage_id, "entity_type": "stage"},
        )
        self.unit_id = unit_id
        self.stage_id = stage_id


class WorkerNotFoundError(NotFoundError):
    """Raised when a worker id does not resolve against the roster."""

    def __init__(self, worker_id: str) -> None:
        super().__init__(
            f"Worker not found: {worker_id}",
            {"worker_id": worker_id, "entity_type": "worker"},
        )
        self.worker_id = worker_id


# Interaction errors
class EditPermissionError(DomainError):
    """Raised when a planner without edit permission tries to reschedule."""

    def __init__(self, action: str) -> None:
        super().__init__(
            f"Edit permission required to {action}",
            ErrorType.PERMISSION,
            {"action": action},
        )
        self.action = action


class DragStateError(DomainError):
    """Raised when a drag transition is requested from the wrong state."""

    def __init__(self, message: str, state: str) -> None:
        super().__init__(message, ErrorType.STATE, {"state": state})
        self.state = state


class UnschedulableStageError(DomainError):
    """Raised when a stage has no usable start date and cannot be dragged."""

    def __init__(self, unit_id: str, stage_id: str) -> None:
        super().__init__(
            f"Stage {stage_id} on unit {unit_id} has no schedulable interval",
            ErrorType.BUSINESS_RULE,
            {"unit_id": unit_id, "stage_id": stage_id},
        )
        self.unit_id = unit_id
        self.stage_id = stage_id
