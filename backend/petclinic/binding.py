"""
PetClinic Backend - Form Data Binding
=====================================

What:  Maps a submitted form payload onto a validated OwnerForm and collects
       field-level errors in a BindingResult.
How:   Pure functions. Disallowed fields are dropped BEFORE validation, so a
       client can never carry them into a bound value.
Who:   Called by the owner routes for POST /owners/new and
       POST /owners/{owner_id}/edit; OwnerService adds its own errors
       (e.g. "not found" on a search).

Mass-assignment protection:
    DISALLOWED_FIELDS = {"id"}. An owner's identity is assigned by the
    database on creation and taken from the URL on update.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from petclinic.schemas.owner import OwnerForm

DISALLOWED_FIELDS = frozenset({"id"})

# Pydantic error types → (code, message) shown next to the field
_EMPTY_ERROR_TYPES = {"missing", "string_too_short"}
NOT_EMPTY_MESSAGE = "must not be empty"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass
class BindingResult:
    """
    Outcome of binding a payload onto a form object.

    Attributes:
        object_name:  Template model key of the bound object ("owner")
        target:       Bound values; raw submitted strings when invalid,
                      validated/normalized values when valid
        errors:       Field errors in the order they were raised
    """

    object_name: str
    target: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        """Register an error on one field."""
        self.errors.append(FieldError(field=field_name, code=code, message=message))

    def has_field_errors(self, field_name: str) -> bool:
        return any(err.field == field_name for err in self.errors)

    def field_errors(self, field_name: str) -> List[str]:
        return [err.message for err in self.errors if err.field == field_name]


def filter_allowed(
    payload: Mapping[str, Any],
    allowed: Iterable[str],
    disallowed: Iterable[str] = DISALLOWED_FIELDS,
) -> Dict[str, Any]:
    """Keep only keys that are allowed and not explicitly disallowed."""
    allowed_set = set(allowed) - set(disallowed)
    return {key: value for key, value in payload.items() if key in allowed_set}


def _to_field_error(error: Mapping[str, Any]) -> Optional[FieldError]:
    loc = error.get("loc") or ()
    if not loc:
        return None
    field_name = str(loc[0])
    error_type = error.get("type", "")

    if error_type in _EMPTY_ERROR_TYPES:
        return FieldError(field=field_name, code="NotEmpty", message=NOT_EMPTY_MESSAGE)
    if error_type == "value_error":
        ctx_error = (error.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error.get("msg", "")
        return FieldError(field=field_name, code="Invalid", message=message)
    return FieldError(field=field_name, code=error_type or "Invalid", message=error.get("msg", ""))


def bind_owner(payload: Mapping[str, Any]) -> BindingResult:
    """
    Bind a submitted owner payload.

    Args:
        payload: Raw form data (Starlette FormData or any mapping)

    Returns:
        BindingResult with object_name "owner". On success `target` holds the
        OwnerForm values; on failure it holds the submitted strings so the
        form can be redisplayed as typed. Never contains an "id" key.
    """
    values = filter_allowed(payload, OwnerForm.model_fields.keys())
    result = BindingResult(object_name="owner", target=dict(values))

    try:
        form = OwnerForm(**values)
    except PydanticValidationError as exc:
        for error in exc.errors():
            field_error = _to_field_error(error)
            if field_error is not None:
                result.errors.append(field_error)
        return result

    result.target = form.model_dump()
    return result
