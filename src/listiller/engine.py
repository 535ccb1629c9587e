"""The listiller engine: diff two state snapshots into list patches.

:class:`Listiller` runs one reconciliation cycle for a
:class:`~listiller.listilled.Listilled` source:

1. the change gate (``state_changed``) may skip the cycle outright;
2. keys are extracted from both snapshots (``prepare_list``);
3. :func:`~listiller.diff.myers_difference` computes the edit script;
4. :func:`~listiller.diff.reconcile_moves` derives per-item diffs;
5. :func:`~listiller.diff.assemble_items` tags them for the wire.

The only state that survives a cycle is the list version, which the
caller threads alongside its domain state.  A :class:`Listiller` holds no
per-list data and may be shared across lists; calls for one list must be
serialized by the caller.
"""

from __future__ import annotations

import json
import sys
import time
from collections import Counter
from typing import Any

from listiller.config import ListillerConfig
from listiller.diff import assemble_items, myers_difference, reconcile_moves
from listiller.listilled import Listilled, get_version
from listiller.models import EditRun, ListillResult, ListMeta, ListUpdate
from listiller.observability import get_logger, resolve_metrics

log = get_logger("listiller.engine")


class Listiller:
    """Computes list patches between two state snapshots.

    Parameters
    ----------
    config:
        Engine configuration.  Defaults to :class:`ListillerConfig()`.
    """

    def __init__(self, config: ListillerConfig | None = None) -> None:
        self._config = config if config is not None else ListillerConfig()
        self._metrics = resolve_metrics(self._config.metrics)

    @property
    def config(self) -> ListillerConfig:
        return self._config

    def apply(
        self,
        listilled: Listilled,
        old_state: Any,
        new_state: Any,
        version: int | None = None,
    ) -> ListillResult:
        """Run one reconciliation cycle.

        Parameters
        ----------
        listilled:
            The list source.
        old_state:
            The snapshot the client currently renders.
        new_state:
            The snapshot to render.
        version:
            The list version after the previous cycle.  When ``None`` it
            is read from *new_state* under ``<name>_list_version`` if the
            state is a mapping, else ``config.initial_version`` is used.

        Returns
        -------
        ListillResult
            Tagged item assigns, list metadata and the prepared new state.
            The version is incremented by one iff at least one item was
            emitted.

        Raises
        ------
        ListillerUsageError
            If the source produces a component id containing the sort
            separator.
        """
        name = listilled.component_name()
        if version is None:
            version = get_version(listilled, new_state, self._config.initial_version)

        started = time.perf_counter()

        if not listilled.state_changed(old_state, new_state):
            self._metrics.increment("listiller.cycles_total", tags={"result": "skipped"})
            log.debug(
                "listill cycle skipped, state unchanged",
                extra={"extra_fields": {"op": "listill", "list": name, "version": version}},
            )
            return ListillResult(
                items=[],
                meta=ListMeta(name=name, update=ListUpdate.PARTIAL, version=version),
                state=new_state,
            )

        old_keys, old_state = listilled.prepare_list(old_state)
        new_keys, new_state = listilled.prepare_list(new_state)
        update = ListUpdate.FULL if not old_keys else ListUpdate.PARTIAL

        script = myers_difference(old_keys, new_keys)
        diffs = reconcile_moves(
            script, listilled, old_state, new_state, self._config.separator,
        )
        if diffs:
            version += 1
        items = assemble_items(diffs, update, version, self._config.reserved_key)

        if self._config.debug_dump_diff:
            _dump_diff(name, script, items)

        op_counts: Counter[str] = Counter(diff.op_type.value for diff in diffs)
        self._emit_metrics(op_counts, len(new_keys), started)
        log.debug(
            "listill cycle complete",
            extra={
                "extra_fields": {
                    "op": "listill",
                    "list": name,
                    "update": update.value,
                    "version": version,
                    "old_size": len(old_keys),
                    "new_size": len(new_keys),
                    "insert": op_counts["insert"],
                    "delete": op_counts["delete"],
                    "update_ops": op_counts["update"],
                }
            },
        )

        return ListillResult(
            items=items,
            meta=ListMeta(name=name, update=update, version=version),
            state=new_state,
        )

    def _emit_metrics(
        self, op_counts: Counter[str], list_size: int, started: float,
    ) -> None:
        self._metrics.increment(
            "listiller.cycles_total",
            tags={"result": "patched" if op_counts else "unchanged"},
        )
        for op_type, count in op_counts.items():
            self._metrics.increment(
                "listiller.diff_ops_total", count, tags={"op_type": op_type},
            )
        self._metrics.gauge("listiller.list_size", list_size)
        self._metrics.timing(
            "listiller.cycle_duration_ms", (time.perf_counter() - started) * 1000,
        )


def listill(
    listilled: Listilled,
    old_state: Any,
    new_state: Any,
    version: int | None = None,
    config: ListillerConfig | None = None,
) -> ListillResult:
    """Run a single cycle with a throwaway :class:`Listiller`."""
    return Listiller(config).apply(listilled, old_state, new_state, version)


def _dump_diff(name: str, script: list[EditRun], items: list[dict[str, Any]]) -> None:
    """Write the edit script and assembled items to stderr."""
    dump = {
        "list": name,
        "script": [{"op": run.op.value, "keys": run.keys} for run in script],
        "items": items,
    }
    print(
        f"[listiller] Diff plan for {name}:",
        json.dumps(dump, indent=2, ensure_ascii=False, default=str),
        file=sys.stderr,
    )
