"""Configuration for listiller.

:class:`ListillerConfig` is a dataclass that captures every tuneable knob
shared by the server-side engine and the client-side reconciler.  Both
sides must agree on the separator and attribute names, so a single
instance is normally passed to :class:`Listiller` and used to build the
client handle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_VERSION: int = 1
"""Version a list starts at when none has been threaded yet."""

SORT_SEPARATOR: str = ":"
"""Separator between the anchor component id and the version."""


@dataclass
class ListillerConfig:
    """Complete configuration for listiller.

    Every parameter has a sensible default.

    Parameters
    ----------
    initial_version:
        Version assumed for a list whose caller has not threaded one yet.
    separator:
        Character separating the anchor id from the base-36 version in a
        serialized sort instruction.  Component ids must never contain it.
    sort_attr:
        Element attribute carrying the serialized sort instruction.
    delete_attr:
        Element attribute marking a tombstone rendered for deletion.
    reserved_key:
        Assigns key holding the ``updated`` tag.  Caller-constructed
        assigns must not use it for anything else.
    metrics:
        A :class:`~listiller.observability.MetricsHook` backend.  ``None``
        uses :class:`~listiller.observability.NoopMetricsHook`.
    debug_dump_diff:
        Write the edit script and the assembled items to *stderr* on each
        cycle.
    """

    # ── Versioning ──────────────────────────────────────────────────────
    initial_version: int = DEFAULT_VERSION

    separator: str = SORT_SEPARATOR

    # ── DOM contract ────────────────────────────────────────────────────
    sort_attr: str = "data-sort"

    delete_attr: str = "data-delete"

    reserved_key: str = "updated"

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.initial_version < 0:
            raise ValueError(f"initial_version must be >= 0, got {self.initial_version}")
        if len(self.separator) != 1:
            raise ValueError(f"separator must be a single character, got {self.separator!r}")
        # Base-36 digits would make the version suffix ambiguous.
        if self.separator.isalnum():
            raise ValueError(f"separator must not be alphanumeric, got {self.separator!r}")
        if not self.sort_attr:
            raise ValueError("sort_attr must not be empty")
        if not self.delete_attr:
            raise ValueError("delete_attr must not be empty")
        if self.sort_attr == self.delete_attr:
            raise ValueError(
                f"sort_attr and delete_attr must differ, both are {self.sort_attr!r}"
            )
        if not self.reserved_key:
            raise ValueError("reserved_key must not be empty")
