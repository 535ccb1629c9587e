"""Move reconciler: turn an edit script into per-item diffs.

The script is walked from tail to head because every inserted key needs
the component id of the key that follows it in the new sequence (its
anchor), which is only known once the remainder of the script has been
processed.  Anchors therefore chain: in ``ins [X, Y], eq [Z]`` the key
``X`` anchors to ``Y`` and ``Y`` to ``Z``.  The client resolves such
chains by applying the last-prepared move first.

A key that appears both in an insert run and in a delete run of the same
script is a *move*: its delete is suppressed and the insert is flagged
``moved`` so the element is repositioned instead of re-created.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from listiller.config import SORT_SEPARATOR
from listiller.errors import ListillerUsageError
from listiller.listilled import Listilled
from listiller.models import EditOp, EditRun, ItemDiff, ItemDiffType
from listiller.observability import get_logger

log = get_logger("listiller.engine")


def reconcile_moves(
    script: list[EditRun],
    listilled: Listilled,
    old_state: Any,
    new_state: Any,
    separator: str = SORT_SEPARATOR,
) -> list[ItemDiff]:
    """Derive the item diffs for an edit script.

    Parameters
    ----------
    script:
        Edit script from :func:`~listiller.diff.sequence.myers_difference`.
    listilled:
        The list source building assigns and component ids.
    old_state:
        Prepared old state; deletes and the "before" side of updates are
        built from it.
    new_state:
        Prepared new state; inserts, updates and anchors are built from it.
    separator:
        Character that must not appear in any anchor component id.

    Returns
    -------
    list[ItemDiff]
        Diffs in script order: inserts and updates in new-sequence order,
        deletes in old-sequence order.  Equal keys whose assigns did not
        change produce no diff.

    Raises
    ------
    ListillerUsageError
        If an anchor component id contains *separator*.
    """
    inserted: set[Hashable] = set()
    deleted: set[Hashable] = set()
    for run in script:
        if run.op == EditOp.INSERT:
            inserted.update(run.keys)
        elif run.op == EditOp.DELETE:
            deleted.update(run.keys)

    # Built tail-first, reversed before returning.
    diffs: list[ItemDiff] = []
    next_key: Hashable | None = None
    has_next = False

    for run in reversed(script):
        if run.op == EditOp.EQUAL:
            for key in reversed(run.keys):
                new_assigns = listilled.construct_assigns(new_state, key)
                if new_assigns != listilled.construct_assigns(old_state, key):
                    diffs.append(ItemDiff(ItemDiffType.UPDATE, key, new_assigns))
            next_key, has_next = run.keys[0], True

        elif run.op == EditOp.INSERT:
            for key in reversed(run.keys):
                anchor = (
                    _anchor_id(listilled, next_key, new_state, separator)
                    if has_next
                    else None
                )
                diffs.append(
                    ItemDiff(
                        ItemDiffType.INSERT,
                        key,
                        listilled.construct_assigns(new_state, key),
                        anchor=anchor,
                        moved=key in deleted,
                    )
                )
                next_key, has_next = key, True

        else:
            for key in reversed(run.keys):
                if key in inserted:
                    continue
                diffs.append(
                    ItemDiff(
                        ItemDiffType.DELETE,
                        key,
                        listilled.construct_assigns(old_state, key),
                    )
                )

    diffs.reverse()
    return diffs


def _anchor_id(
    listilled: Listilled,
    key: Hashable,
    state: Any,
    separator: str,
) -> str:
    """Return the component id of *key*, rejecting ids containing *separator*."""
    component_id = listilled.component_id(key, state)
    if separator in component_id:
        log.error(
            "component id contains the sort separator",
            extra={
                "extra_fields": {
                    "op": "listill",
                    "list": listilled.component_name(),
                    "component_id": component_id,
                    "separator": separator,
                }
            },
        )
        raise ListillerUsageError(
            message=(
                f"Component id {component_id!r} contains the reserved "
                f"separator {separator!r}; fix {type(listilled).__name__}.component_id"
            ),
            context={
                "component_id": component_id,
                "key": key,
                "separator": separator,
            },
        )
    return component_id
