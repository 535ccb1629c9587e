"""Patch assembler: map item diffs to wire assigns.

Each item diff becomes the caller's assigns plus the reserved ``updated``
tag:

=========  ==============================  ==================================
Source     Condition                       ``updated``
=========  ==============================  ==================================
delete     --                              ``"delete"``
update     --                              ``"noop"``
insert     full update                     ``"noop"``
insert     partial, no anchor, new key     ``"noop"`` (appended at the tail)
insert     partial, no anchor, moved key   ``SortInstruction(None, version)``
insert     partial, anchor                 ``SortInstruction(anchor, version)``
=========  ==============================  ==================================

A moved key that ends the new sequence has no anchor, but the host
patches existing elements in place, so it gets an anchor-less sort
instruction that the client resolves as "move to the end of the
container".
"""

from __future__ import annotations

from typing import Any

from listiller.models import (
    DELETE,
    NOOP,
    ItemDiff,
    ItemDiffType,
    ListUpdate,
    SortInstruction,
)


def assemble_items(
    diffs: list[ItemDiff],
    update: ListUpdate,
    version: int,
    reserved_key: str = "updated",
) -> list[dict[str, Any]]:
    """Render item diffs into tagged assigns.

    Parameters
    ----------
    diffs:
        Output of :func:`~listiller.diff.moves.reconcile_moves`.
    update:
        Update mode of the cycle.
    version:
        Version of the cycle, stamped on every sort instruction.
    reserved_key:
        Key under which the tag is stored.  An existing value under that
        key in the caller's assigns is overwritten.

    Returns
    -------
    list[dict[str, Any]]
        New dicts, in the order of *diffs*.  The caller's assigns are not
        mutated.
    """
    return [
        {**diff.assigns, reserved_key: _updated(diff, update, version)}
        for diff in diffs
    ]


def _updated(diff: ItemDiff, update: ListUpdate, version: int) -> Any:
    if diff.op_type == ItemDiffType.DELETE:
        return DELETE
    if diff.op_type == ItemDiffType.UPDATE or update == ListUpdate.FULL:
        return NOOP
    if diff.anchor is None and not diff.moved:
        return NOOP
    return SortInstruction(diff.anchor, version)
