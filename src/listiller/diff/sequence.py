"""Shortest edit script between two key sequences.

Implements Myers' O((N+M)·D) greedy algorithm: it explores edit paths in
order of increasing edit distance *D* and stops at the first path that
reaches the end of both sequences, so the script it recovers has the
minimal total number of inserted plus deleted keys.

The forward walk runs over the *new* sequence on the x axis, which makes
it prefer consuming new keys when several minimal scripts exist.  Within
a changed region inserts are therefore emitted before deletes, e.g.
``[A, B] -> [B, A]`` yields ``ins [B], eq [A], del [B]``: ``B`` moves in
front of ``A`` instead of ``A`` moving to the tail.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from listiller.models import EditOp, EditRun


def myers_difference(
    old: Sequence[Hashable],
    new: Sequence[Hashable],
) -> list[EditRun]:
    """Compute a minimal edit script turning *old* into *new*.

    Keys are compared with ``==``.  The result is deterministic for
    identical inputs.

    Parameters
    ----------
    old:
        Keys of the previously rendered list, in order.
    new:
        Keys of the list to render, in order.

    Returns
    -------
    list[EditRun]
        Runs in script order.  Concatenating the ``EQUAL`` and ``INSERT``
        runs reproduces *new*; concatenating the ``EQUAL`` and ``DELETE``
        runs reproduces *old*.  Adjacent runs never share an op.
    """
    old = list(old)
    new = list(new)

    if not old and not new:
        return []
    if not old:
        return [EditRun(EditOp.INSERT, new)]
    if not new:
        return [EditRun(EditOp.DELETE, old)]

    trace = _shortest_edit(new, old)
    return _to_runs(_backtrack(trace, new, old))


def _shortest_edit(a: list[Hashable], b: list[Hashable]) -> list[dict[int, int]]:
    """Run the forward search and return the frontier before each depth.

    ``v[k]`` holds the furthest x reached on diagonal ``k = x - y``.  The
    snapshot taken at the start of depth ``d`` is exactly what the
    backtrack needs to find the predecessor of each step.
    """
    n = len(a)
    m = len(b)
    v: dict[int, int] = {1: 0}
    trace: list[dict[int, int]] = []

    for d in range(n + m + 1):
        trace.append(dict(v))
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                return trace

    return trace


def _backtrack(
    trace: list[dict[int, int]],
    a: list[Hashable],
    b: list[Hashable],
) -> list[tuple[EditOp, Hashable]]:
    """Walk the trace from the end back to the origin.

    ``a`` is the new sequence and ``b`` the old one, so a step along x is
    an insert of ``a[x]`` and a step along y a delete of ``b[y]``.
    """
    steps: list[tuple[EditOp, Hashable]] = []
    x, y = len(a), len(b)

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[k - 1] < v[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            steps.append((EditOp.EQUAL, a[x - 1]))
            x -= 1
            y -= 1

        if d > 0:
            if x == prev_x:
                steps.append((EditOp.DELETE, b[prev_y]))
            else:
                steps.append((EditOp.INSERT, a[prev_x]))

        x, y = prev_x, prev_y

    steps.reverse()
    return steps


def _to_runs(steps: list[tuple[EditOp, Hashable]]) -> list[EditRun]:
    """Group consecutive single-key steps sharing an op into runs."""
    runs: list[EditRun] = []
    for op, key in steps:
        if runs and runs[-1].op == op:
            runs[-1].keys.append(key)
        else:
            runs.append(EditRun(op, [key]))
    return runs
