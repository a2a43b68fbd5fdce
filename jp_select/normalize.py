"""Normalization of API payloads into option lists.

Portal endpoints answer list requests with a bare array, ``{"data": [...]}``,
``{"items": [...]}`` or a role-specific key such as ``users``. Loaders resolve
that here, once, and get back a tagged result instead of probing shapes inline.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeAlias, TypeVar

from jp_select.models import Option

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LIST_KEYS: tuple[str, ...] = ("data", "items", "users", "reviewers")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    reason: str

    @property
    def ok(self) -> bool:
        return False


RecordMapper: TypeAlias = Callable[[Mapping[str, Any]], Option | None]


def _describe(payload: Any) -> str:
    if isinstance(payload, Mapping):
        keys = ", ".join(sorted(str(key) for key in payload)) or "no keys"
        return f"object with {keys}"
    return type(payload).__name__


def normalize_response(
    payload: Any,
    keys: Sequence[str] = DEFAULT_LIST_KEYS,
) -> Ok[list[Any]] | Err:
    """Extract the record list from a decoded JSON payload."""
    if isinstance(payload, list):
        return Ok(payload)
    if isinstance(payload, Mapping):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return Ok(value)
    return Err(f"unexpected response shape: {_describe(payload)}")


def coerce_options(values: Any) -> Ok[list[Option]] | Err:
    """Turn a loader/static result into Options.

    Options pass through untouched; mappings need ``id`` and ``label`` and may
    carry ``secondary_text``. Entries without both are dropped.
    """
    if not isinstance(values, (list, tuple)):
        return Err(f"expected a list of options, got {_describe(values)}")

    options: list[Option] = []
    seen: set[str] = set()
    for value in values:
        option = coerce_option(value)
        if option is None:
            logger.debug("Dropping malformed option entry: %r", value)
            continue
        if option.id in seen:
            logger.debug("Dropping duplicate option id %s", option.id)
            continue
        seen.add(option.id)
        options.append(option)
    return Ok(options)


def coerce_option(value: Any) -> Option | None:
    """Return ``value`` as an Option, or None when it is not Option-shaped."""
    if isinstance(value, Option):
        return value
    if not isinstance(value, Mapping):
        return None
    option_id = value.get("id")
    label = value.get("label")
    if option_id in (None, "") or not label:
        return None
    secondary = value.get("secondary_text")
    return Option(
        id=str(option_id),
        label=str(label),
        secondary_text=str(secondary) if secondary else None,
        raw=value.get("raw", value),
    )


def user_to_option(record: Mapping[str, Any]) -> Option | None:
    """Map a portal user record (editor, reviewer) to an Option."""
    user_id = record.get("_id") or record.get("id")
    name = record.get("fullName") or (
        f"{record.get('firstName') or ''} {record.get('lastName') or ''}".strip()
    )
    if not user_id or not name:
        return None
    email = record.get("email")
    return Option(
        id=str(user_id),
        label=str(name),
        secondary_text=str(email) if email else None,
        raw=record,
    )


def field_mapper(value_field: str = "value", label_field: str = "label") -> RecordMapper:
    """Build a mapper for flat ``{value, label}`` style records."""

    def _map(record: Mapping[str, Any]) -> Option | None:
        value = record.get(value_field)
        label = record.get(label_field)
        if value in (None, "") or label in (None, ""):
            return None
        return Option(id=str(value), label=str(label), raw=record)

    return _map


def records_to_options(
    records: Iterable[Any],
    mapper: RecordMapper = user_to_option,
) -> list[Option]:
    """Map records with ``mapper``, skipping non-mappings and rejected records."""
    options: list[Option] = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        option = mapper(record)
        if option is not None:
            options.append(option)
    return options


def parse_json_list(text: str | None) -> list[Any]:
    """Decode a JSON list such as stored indexing entries or author tags.

    Malformed or non-list input yields an empty list.
    """
    if not text:
        return []
    try:
        value = json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.debug("Ignoring malformed JSON list: %s", exc)
        return []
    if not isinstance(value, list):
        logger.debug("Ignoring JSON value that is not a list: %s", type(value).__name__)
        return []
    return value
