# core/catalog/integrity.py
"""Payload and reference checks shared by the catalog repositories.

Each check raises ValidationFailedError on the first problem it finds.
Repositories call them in a fixed order, so the first failing check decides
the reported reason.
"""
from typing import Any, Callable, Dict, Iterable, List, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from core.catalog.errors import ValidationFailedError
from core.catalog.models import CopyStatus

M = TypeVar('M', bound=BaseModel)


def is_blank(value: Any) -> bool:
    """True for values a client would consider "not provided".

    Missing, null, empty string, false, zero and NaN are blank. Containers are
    never blank, so an empty list reaches the array-shape checks.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        # NaN is the one number not equal to itself
        return value == 0 or value != value
    return False


def join_fields(fields: Sequence[str]) -> str:
    """'a' / 'a and b' / 'a, b, and c'"""
    if len(fields) == 1:
        return fields[0]
    if len(fields) == 2:
        return f"{fields[0]} and {fields[1]}"
    return f"{', '.join(fields[:-1])}, and {fields[-1]}"


def require_fields(payload: Dict[str, Any], fields: Sequence[str]) -> None:
    """Fail unless every named field is present and not blank"""
    if any(is_blank(payload.get(field)) for field in fields):
        verb = "is" if len(fields) == 1 else "are"
        raise ValidationFailedError(f"{join_fields(fields)} {verb} required")


def require_non_empty_list(payload: Dict[str, Any], field: str) -> List[Any]:
    value = payload.get(field)
    if not isinstance(value, list) or len(value) == 0:
        raise ValidationFailedError(f"{field} must be a non-empty array")
    return value


def missing_references(ids: Iterable[Any], exists: Callable[[Any], bool]) -> List[Any]:
    """Every id that does not resolve, in payload order.

    Does not stop at the first miss so the reason can list all offenders.
    """
    return [ref for ref in ids if not (isinstance(ref, str) and exists(ref))]


def require_references(ids: Iterable[Any], exists: Callable[[Any], bool], label: str) -> None:
    missing = missing_references(ids, exists)
    if missing:
        raise ValidationFailedError(
            f"Invalid {label} IDs: {', '.join(_as_text(ref) for ref in missing)}"
        )


def _as_text(value: Any) -> str:
    """Render an offending id the way a JSON client wrote it"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def require_status(value: Any) -> str:
    valid = CopyStatus.values()
    if value not in valid:
        raise ValidationFailedError(f"Invalid status. Must be one of: {', '.join(valid)}")
    return value


def build(model: Type[M], **fields: Any) -> M:
    """Construct a model, turning a type mismatch into ValidationFailedError"""
    try:
        return model(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        field = _wire_name(model, first['loc'])
        raise ValidationFailedError(f"{field}: {first['msg']}") from e


def _wire_name(model: Type[BaseModel], loc: tuple) -> str:
    if not loc:
        return model.__name__
    head = loc[0]
    info = model.model_fields.get(head) if isinstance(head, str) else None
    name = info.alias if info is not None and info.alias else str(head)
    rest = ''.join(f"[{part}]" for part in loc[1:])
    return f"{name}{rest}"
