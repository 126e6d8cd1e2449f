"""Profile completeness.

Completeness is derived only from the stored values of REQUIRED_FIELDS, so it
is always recomputed from the record instead of being trusted from a caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


REQUIRED_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "date_of_birth",
    "gender",
    "city",
    "state",
    "education",
    "occupation",
    "religion",
    "marital_status",
)


@dataclass(frozen=True)
class CompletionResult:
    is_complete: bool
    completion_percentage: int
    missing_fields: list[str] = field(default_factory=list)


def _value(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def record_to_dict(record: Any) -> dict[str, Any]:
    """Required-field view of a mapping or ORM row."""
    return {name: _value(record, name) for name in REQUIRED_FIELDS}


def compute_missing_fields(record: Any) -> list[str]:
    return [name for name in REQUIRED_FIELDS if _is_missing(_value(record, name))]


def compute_completion_percentage(record: Any) -> int:
    if record is None:
        return 0
    total = len(REQUIRED_FIELDS)
    completed = total - len(compute_missing_fields(record))
    # Half-up rounding.
    return int(completed * 100 / total + 0.5)


def compute_is_complete(candidate: Mapping[str, Any], existing: Any = None) -> bool:
    merged = record_to_dict(existing)
    merged.update({k: v for k, v in candidate.items() if k in merged})
    return not compute_missing_fields(merged)


def completion_status(record: Any) -> CompletionResult:
    if record is None:
        return CompletionResult(is_complete=False, completion_percentage=0, missing_fields=list(REQUIRED_FIELDS))
    missing = compute_missing_fields(record)
    return CompletionResult(
        is_complete=not missing,
        completion_percentage=compute_completion_percentage(record),
        missing_fields=missing,
    )
