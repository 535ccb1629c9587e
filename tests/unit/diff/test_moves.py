"""Tests for diff/moves.py: item diffs and move detection."""

import pytest
from support import RowComponent, make_state

from listiller.diff.moves import reconcile_moves
from listiller.diff.sequence import myers_difference
from listiller.errors import ErrorCode, ListillerUsageError
from listiller.models import ItemDiff, ItemDiffType


class ColonRows(RowComponent):
    def component_id(self, key, state):
        return f"row:{key}"


def _diffs(old_keys, new_keys, old_values=None, new_values=None, listilled=None):
    listilled = listilled or RowComponent()
    old = make_state(old_keys, old_values)
    new = make_state(new_keys, new_values)
    script = myers_difference(old_keys, new_keys)
    return reconcile_moves(script, listilled, old, new)


def _summary(diffs):
    return [(d.op_type, d.key, d.anchor, d.moved) for d in diffs]


# =========================================================================
# Inserts and anchors
# =========================================================================

class TestInserts:
    def test_initial_list_chains_anchors(self):
        diffs = _diffs([], ["A", "B"])
        assert _summary(diffs) == [
            (ItemDiffType.INSERT, "A", "row-B", False),
            (ItemDiffType.INSERT, "B", None, False),
        ]

    def test_insert_block_anchors_to_next_key(self):
        diffs = _diffs(["C"], ["A", "B", "C"])
        assert _summary(diffs) == [
            (ItemDiffType.INSERT, "A", "row-B", False),
            (ItemDiffType.INSERT, "B", "row-C", False),
        ]

    def test_tail_insert_has_no_anchor(self):
        diffs = _diffs(["A"], ["A", "B"])
        assert _summary(diffs) == [(ItemDiffType.INSERT, "B", None, False)]

    def test_insert_carries_new_assigns(self):
        diffs = _diffs(["A"], ["A", "B"], new_values={"B": 7})
        assert diffs[0].assigns == {"id": "row-B", "key": "B", "value": 7}


# =========================================================================
# Deletes
# =========================================================================

class TestDeletes:
    def test_delete_middle(self):
        diffs = _diffs(["A", "B", "C"], ["A", "C"])
        assert diffs == [
            ItemDiff(ItemDiffType.DELETE, "B", {"id": "row-B", "key": "B", "value": 0}),
        ]

    def test_delete_uses_old_assigns(self):
        diffs = _diffs(["A", "B"], ["A"], old_values={"B": 3})
        assert diffs[0].assigns["value"] == 3

    def test_replacement_orders_inserts_then_deletes(self):
        diffs = _diffs(["A", "B"], ["C", "D"])
        assert _summary(diffs) == [
            (ItemDiffType.INSERT, "C", "row-D", False),
            (ItemDiffType.INSERT, "D", None, False),
            (ItemDiffType.DELETE, "A", None, False),
            (ItemDiffType.DELETE, "B", None, False),
        ]

    def test_clear_deletes_everything_in_old_order(self):
        diffs = _diffs(["A", "B", "C"], [])
        assert [d.key for d in diffs] == ["A", "B", "C"]
        assert all(d.op_type == ItemDiffType.DELETE for d in diffs)


# =========================================================================
# Updates
# =========================================================================

class TestUpdates:
    def test_unchanged_equal_keys_emit_nothing(self):
        assert _diffs(["A", "B"], ["A", "B"]) == []

    def test_changed_equal_key_emits_update(self):
        diffs = _diffs(["A"], ["A"], old_values={"A": 1}, new_values={"A": 2})
        assert diffs == [
            ItemDiff(ItemDiffType.UPDATE, "A", {"id": "row-A", "key": "A", "value": 2}),
        ]

    def test_updates_in_new_order(self):
        diffs = _diffs(
            ["A", "B", "C"],
            ["A", "B", "C"],
            old_values={"A": 1, "C": 1},
            new_values={"A": 2, "C": 2},
        )
        assert [d.key for d in diffs] == ["A", "C"]


# =========================================================================
# Moves
# =========================================================================

class TestMoves:
    def test_swap_is_a_single_moved_insert(self):
        diffs = _diffs(["A", "B"], ["B", "A"])
        assert _summary(diffs) == [(ItemDiffType.INSERT, "B", "row-A", True)]

    def test_move_to_tail_is_moved_without_anchor(self):
        diffs = _diffs([1, 4, 2, 3], [1, 2, 3, 4])
        assert _summary(diffs) == [(ItemDiffType.INSERT, 4, None, True)]

    def test_moved_key_never_deleted(self):
        diffs = _diffs(list("ABCDEF"), list("FEDCBA"))
        deleted = {d.key for d in diffs if d.op_type == ItemDiffType.DELETE}
        assert deleted == set()
        assert all(d.moved for d in diffs)

    def test_move_with_changed_assigns_carries_new_assigns(self):
        diffs = _diffs(["A", "B"], ["B", "A"], old_values={"B": 1}, new_values={"B": 2})
        assert len(diffs) == 1
        assert diffs[0].assigns["value"] == 2


# =========================================================================
# Errors
# =========================================================================

class TestSeparatorValidation:
    def test_anchor_with_separator_raises(self):
        with pytest.raises(ListillerUsageError) as exc_info:
            _diffs(["A", "B"], ["B", "A"], listilled=ColonRows())
        err = exc_info.value
        assert err.code == ErrorCode.USAGE_ERROR
        assert err.context == {"component_id": "row:A", "key": "A", "separator": ":"}
        assert "ColonRows.component_id" in err.message

    def test_custom_separator_is_checked(self):
        old = make_state(["A", "B"])
        new = make_state(["B", "A"])
        script = myers_difference(["A", "B"], ["B", "A"])
        with pytest.raises(ListillerUsageError):
            reconcile_moves(script, RowComponent(), old, new, separator="-")

    def test_tail_insert_needs_no_anchor_id(self):
        # Only anchors are validated; a lone tail insert has none.
        diffs = _diffs(["A"], ["A", "B"], listilled=ColonRows())
        assert diffs[0].anchor is None
