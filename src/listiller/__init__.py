"""listiller: keyed list reconciliation for server-rendered UIs.

Diffs two snapshots of application state into the minimal per-item
patches (insert, delete, update, with move detection) for a rendered
ordered collection, and reconciles those patches against a live element
tree on the client.

Public re-exports
-----------------

* **Engine:** :class:`Listiller`, :func:`listill`
* **Source interface:** :class:`Listilled`
* **Client:** :class:`ListillReconciler`, :class:`ContainerHook`,
  :class:`MemoryElement`
* **Configuration:** :class:`ListillerConfig`
* **Errors:** Every :class:`ListillerError` subclass and :class:`ErrorCode`
* **Models:** Result dataclasses, enums, and supporting types

Usage::

    from listiller import Listiller, Listilled

    class TodoItemComponent(Listilled):
        def prepare_list(self, state):
            return [todo.id for todo in state["todos"]], state

        def component_id(self, key, state):
            return f"todo-{key}"

        def construct_assigns(self, state, key):
            todo = state["todos_by_id"][key]
            return {"id": f"todo-{key}", "title": todo.title}

    result = Listiller().apply(TodoItemComponent(), old_state, new_state, version)
"""

from __future__ import annotations

# ── Client ─────────────────────────────────────────────────────────────
from listiller.client import (
    BEFORE_REMOVED_EVENT,
    ContainerHook,
    Element,
    ListillReconciler,
    MemoryElement,
)

# ── Configuration ───────────────────────────────────────────────────────
from listiller.config import DEFAULT_VERSION, SORT_SEPARATOR, ListillerConfig

# ── Engine ──────────────────────────────────────────────────────────────
from listiller.engine import Listiller, listill

# ── Errors ──────────────────────────────────────────────────────────────
from listiller.errors import (
    ErrorCode,
    ListillerError,
    ListillerSortDataError,
    ListillerStateError,
    ListillerUsageError,
)

# ── Helpers ─────────────────────────────────────────────────────────────
from listiller.helpers import (
    assign_list,
    container_update_mode,
    decode_sort_data,
    encode_sort_data,
    item_attributes,
)
from listiller.listilled import Listilled, get_version

# ── Models ──────────────────────────────────────────────────────────────
from listiller.models import (
    DELETE,
    NOOP,
    EditOp,
    EditRun,
    ItemDiff,
    ItemDiffType,
    ListillResult,
    ListMeta,
    ListUpdate,
    MoveInstruction,
    ReconcilerState,
    SortInstruction,
)

__all__ = [
    # Engine
    "Listiller",
    "listill",
    "Listilled",
    "get_version",
    # Client
    "ListillReconciler",
    "ContainerHook",
    "Element",
    "MemoryElement",
    "BEFORE_REMOVED_EVENT",
    # Configuration
    "ListillerConfig",
    "DEFAULT_VERSION",
    "SORT_SEPARATOR",
    # Errors
    "ListillerError",
    "ErrorCode",
    "ListillerUsageError",
    "ListillerSortDataError",
    "ListillerStateError",
    # Helpers
    "assign_list",
    "container_update_mode",
    "decode_sort_data",
    "encode_sort_data",
    "item_attributes",
    # Models: enums and tags
    "EditOp",
    "ItemDiffType",
    "ListUpdate",
    "ReconcilerState",
    "NOOP",
    "DELETE",
    # Models: data
    "EditRun",
    "ItemDiff",
    "ListMeta",
    "ListillResult",
    "MoveInstruction",
    "SortInstruction",
]
