"""Public data models for listiller.

This module contains every enum, result type and supporting dataclass
referenced by the public API surface.  All types are plain dataclasses
with no behaviour beyond what is needed for structural equality and
hashing (where frozen).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EditOp(str, Enum):
    """Run tags of an edit script produced by the sequence differ."""

    EQUAL = "eq"
    """Keys present, in the same relative order, in both sequences."""

    INSERT = "ins"
    """Keys present only in the new sequence at this position."""

    DELETE = "del"
    """Keys present only in the old sequence at this position."""


class ItemDiffType(str, Enum):
    """Per-item operations emitted by the move reconciler."""

    INSERT = "insert"
    """Item is new or moved; rendered from the new state."""

    DELETE = "delete"
    """Item left the list; rendered from the old state as a tombstone."""

    UPDATE = "update"
    """Item stayed in place but its assigns changed."""


class ListUpdate(str, Enum):
    """How the rendered container is patched in one cycle."""

    FULL = "full"
    """The old sequence was empty -- the whole container is replaced."""

    PARTIAL = "partial"
    """Incremental mode -- items are patched in place or appended."""


class ReconcilerState(str, Enum):
    """Lifecycle states of a client-side container reconciler."""

    IDLE = "idle"
    COLLECTING = "collecting"
    FINALIZING = "finalizing"


NOOP = "noop"
"""``updated`` tag: patch the element without repositioning it."""

DELETE = "delete"
"""``updated`` tag: render the tombstone variant for later removal."""


# ---------------------------------------------------------------------------
# Diff engine types
# ---------------------------------------------------------------------------

@dataclass
class EditRun:
    """One run of an edit script.

    Attributes
    ----------
    op:
        Whether the keys are kept, inserted or deleted.
    keys:
        The keys of the run, in sequence order.
    """

    op: EditOp
    keys: list[Hashable] = field(default_factory=list)


@dataclass
class ItemDiff:
    """A single per-item operation prior to wire assembly.

    Attributes
    ----------
    op_type:
        The kind of operation (insert, delete, update).
    key:
        The item key the operation refers to.
    assigns:
        Assigns built from the new state (``INSERT``, ``UPDATE``) or the
        old state (``DELETE``).
    anchor:
        Component id of the key following this one in the new sequence
        (``INSERT`` only); ``None`` when the item ends the list.
    moved:
        ``True`` when an ``INSERT`` key was also present in the old
        sequence, i.e. the element already exists and must be moved.
    """

    op_type: ItemDiffType
    key: Hashable
    assigns: dict[str, Any] = field(default_factory=dict)
    anchor: str | None = None
    moved: bool = False


@dataclass(frozen=True)
class SortInstruction:
    """Reposition an element immediately before its anchor.

    Attributes
    ----------
    anchor_id:
        Component id of the destination element, or ``None`` to move the
        element to the end of its container.
    version:
        List version of the cycle that issued the instruction.  Two
        instructions pointing at the same anchor from different cycles
        are therefore never equal.
    """

    anchor_id: str | None
    version: int


@dataclass
class ListMeta:
    """List-level metadata travelling with each payload.

    Attributes
    ----------
    name:
        The listilled component name the wire keys are derived from.
    update:
        Full replacement or partial patching.
    version:
        List version after this cycle.
    """

    name: str
    update: ListUpdate
    version: int


@dataclass
class ListillResult:
    """Result of :meth:`Listiller.apply`.

    Attributes
    ----------
    items:
        Assigns of every patched item, each carrying the reserved
        ``updated`` tag.
    meta:
        Update mode and version for the container.
    state:
        The new state as returned by ``prepare_list`` (including any
        last-moment updates it applied).
    """

    items: list[dict[str, Any]]
    meta: ListMeta
    state: Any = None


# ---------------------------------------------------------------------------
# Client types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MoveInstruction:
    """A pending client-side move collected during a patch cycle.

    Attributes
    ----------
    source_id:
        DOM id of the element to move.
    destination_id:
        DOM id of the element to place it before; ``None`` appends it to
        the end of its parent.
    version:
        Version decoded from the sort attribute.
    """

    source_id: str
    destination_id: str | None
    version: int
