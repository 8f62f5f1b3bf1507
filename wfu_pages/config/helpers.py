"""Utility helpers shared by the template context loader."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from .models import ContextConfigError, TemplateContext

LIST_FIELDS = frozenset({"objectives", "checklist", "module_titles"})
SCALAR_FIELDS = frozenset(
    field.name
    for field in dc.fields(TemplateContext)
    if field.name not in LIST_FIELDS
)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake_case(key: str) -> str:
    """Translate ``courseName`` style keys into ``course_name``."""
    return _CAMEL_BOUNDARY.sub("_", key.strip()).replace("-", "_").lower()


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(key: str, value: object | None) -> tuple[str, ...]:
    """Normalize list-like context values into a tuple of non-empty strings.

    Multi-line strings are split on newlines, mirroring how the forms collect
    one objective or checklist item per line.
    """
    match value:
        case None:
            return ()
        case str():
            items: list[object] = list(value.splitlines())
        case list() | tuple():
            items = list(value)
        case _:
            msg = f"Context field '{key}' must be a list or a string."
            raise ContextConfigError(msg)
    normalized: list[str] = []
    for item in items:
        text = _optional_str(item)
        if text:
            normalized.append(text)
    return tuple(normalized)


def build_template_context(payload: typ.Mapping[str, typ.Any]) -> TemplateContext:
    """Build a :class:`TemplateContext` from a loosely typed mapping.

    Parameters
    ----------
    payload : Mapping[str, Any]
        Context values keyed by snake_case or camelCase field names.

    Returns
    -------
    TemplateContext
        Immutable context with strings stripped and list fields normalized.

    Raises
    ------
    ContextConfigError
        If a key does not name a context field or a list field holds a value
        that cannot be read as a list.
    """
    values: dict[str, typ.Any] = {}
    for raw_key, value in payload.items():
        key = _snake_case(str(raw_key))
        if key in LIST_FIELDS:
            values[key] = _string_list(key, value)
        elif key in SCALAR_FIELDS:
            values[key] = _optional_str(value)
        else:
            msg = f"Unknown template context field '{raw_key}'."
            raise ContextConfigError(msg)
    return TemplateContext(**values)
