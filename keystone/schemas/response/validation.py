"""
This module defines the containers used to report validation outcomes within the
Keystone application.

- `ValidationResult`: collects field level error messages while an entity is
  being validated. Once handed back to a caller it is frozen.
- `ValidationResponse`: the serialisable form of a result, suitable as the body
  of an API response.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field

from keystone.core.exceptions import ValidationResultFrozen


class ValidationResponse(BaseModel):
    """
    Schema for a validation response.
    """

    valid: bool
    """True if no errors were recorded."""
    errors: dict[str, list[str]] = Field(default_factory=dict)
    """Error messages keyed by field name. Only fields with errors appear."""


class ValidationResult:
    """
    Ordered mapping of field name to the error messages recorded for it.

    A field is present only if at least one error was recorded for it, so an
    empty result means the entity is valid.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}
        self._frozen = False

    def add_error(self, field: str, message: str) -> None:
        if self._frozen:
            raise ValidationResultFrozen(f"Cannot add error to frozen result (field: {field})")
        self._errors.setdefault(field, []).append(message)

    def freeze(self) -> "ValidationResult":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def errors(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of the recorded errors"""
        return MappingProxyType({field: tuple(messages) for field, messages in self._errors.items()})

    def get_errors(self, field: str) -> tuple[str, ...]:
        return tuple(self._errors.get(field, ()))

    def first_error(self, field: str) -> str | None:
        messages = self._errors.get(field)
        return messages[0] if messages else None

    def fails(self) -> bool:
        return bool(self._errors)

    def success(self) -> bool:
        return not self._errors

    def to_response(self) -> ValidationResponse:
        return ValidationResponse(
            valid=self.success(),
            errors={field: list(messages) for field, messages in self._errors.items()},
        )

    def __len__(self) -> int:
        return len(self._errors)

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self._errors!r}, frozen={self._frozen})"
