"""Naming helpers used to derive default component names."""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def unsuffix(value: str, suffix: str) -> str:
    """Strip *suffix* from the end of *value* if present.

    >>> unsuffix("TodoItemComponent", "Component")
    'TodoItem'
    """
    if suffix and value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def resource_name(value: str, suffix: str = "") -> str:
    """Convert a (possibly dotted) class path into a snake_case name.

    Only the last dotted segment is used, and *suffix* is removed before
    conversion.

    >>> resource_name("app.live.TodoItemComponent", "Component")
    'todo_item'
    >>> resource_name("HTTPRowView")
    'http_row_view'
    """
    last = unsuffix(value.rsplit(".", 1)[-1], suffix)
    last = _ACRONYM_BOUNDARY.sub(r"\1_\2", last)
    last = _WORD_BOUNDARY.sub(r"\1_\2", last)
    return last.lower()
