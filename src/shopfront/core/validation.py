"""Required-field policies for request payloads.

Each payload type declares, in order, the fields it requires and what counts
as "present" for each of them. Checks run in declaration order and stop at
the first missing field, so a client only ever sees one message per call.
They run on the raw JSON body, before any type coercion, so `"price": ""`
is reported as missing rather than as a malformed number.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.shopfront.core.exceptions import MissingFieldError, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class FieldRule:
    """Presence policy for one payload field."""

    name: str
    label: str | None = None
    allow_empty_string: bool = False
    allow_zero: bool = False

    def is_present(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return self.allow_empty_string or value != ""
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float, Decimal)):
            return self.allow_zero or value != 0
        return bool(value)


USER_CREATE_RULES: tuple[FieldRule, ...] = (
    FieldRule("email", label="e-mail"),
    FieldRule("password"),
)

USER_UPDATE_RULES: tuple[FieldRule, ...] = (FieldRule("email", label="e-mail"),)

PRODUCT_CREATE_RULES: tuple[FieldRule, ...] = (
    FieldRule("slug"),
    FieldRule("name"),
    FieldRule("price"),
    FieldRule("description"),
    FieldRule("image_alt"),
    FieldRule("image_url"),
)


def require_fields(payload: Mapping[str, Any], rules: Sequence[FieldRule]) -> None:
    """Raise `MissingFieldError` for the first rule `payload` does not satisfy."""
    for rule in rules:
        if not rule.is_present(payload.get(rule.name)):
            raise MissingFieldError(rule.name, rule.label)


def parse_payload(
    payload: Any,
    rules: Sequence[FieldRule],
    model: type[ModelT],
) -> ModelT:
    """Check presence on the raw body, then parse it into `model`.

    A missing body counts as an empty object; any other non-object body is
    rejected. Type errors on present fields become a `ValidationError` naming
    the first offending field.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Invalid request: body: Input should be a valid dictionary")
    require_fields(payload, rules)
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"Invalid request: {location}: {first['msg']}") from e
