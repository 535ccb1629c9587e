"""Diff engine for keyed list reconciliation.

Exports
-------
myers_difference
    Computes a minimal equal/insert/delete edit script between two key
    sequences.
reconcile_moves
    Turns an edit script into per-item diffs, detecting moves and
    suppressing no-op updates.
assemble_items
    Renders item diffs into assigns tagged with the reserved ``updated``
    key.
"""

from .assembler import assemble_items
from .moves import reconcile_moves
from .sequence import myers_difference

__all__ = [
    "assemble_items",
    "myers_difference",
    "reconcile_moves",
]
