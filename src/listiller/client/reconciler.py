"""Client-side reconciler for listilled containers.

The host patches a container's elements one by one, top-down in patch
order, calling :meth:`ListillReconciler.prepare_for_sort` for each.  An
element's sort anchor may not exist yet at that point, so moves are only
collected.  Once the whole container has been patched, the host calls
:meth:`ListillReconciler.finalize`, which removes tombstones and then
applies the collected moves from the most recently prepared one back to
the first.  Draining in that order resolves chains of elements that
moved relative to one another within the same cycle: for ``X -> Y`` and
``Y -> Z``, ``Y`` is placed before ``Z`` first, then ``X`` before ``Y``.

Valid transitions::

    IDLE        -> COLLECTING | FINALIZING
    COLLECTING  -> FINALIZING
    FINALIZING  -> IDLE
"""

from __future__ import annotations

from collections.abc import Callable

from listiller.client.element import Element
from listiller.config import SORT_SEPARATOR, ListillerConfig
from listiller.errors import ListillerSortDataError, ListillerStateError
from listiller.helpers import decode_sort_data
from listiller.models import MoveInstruction, ReconcilerState
from listiller.observability import MetricsHook, get_logger, resolve_metrics

log = get_logger("listiller.client")

BEFORE_REMOVED_EVENT = "beforeRemoved"

DeleteSelector = str | Callable[[Element], bool]


def same_id(component_id: str) -> str:
    return component_id


class ListillReconciler:
    """Per-container move/delete state machine.

    Parameters
    ----------
    sort_attr:
        Element attribute holding the serialized sort instruction.
    delete_selector:
        Either the name of the delete-marker attribute, or a predicate
        returning ``True`` for elements to remove.
    notify_removal:
        Optional predicate; matching elements receive a
        ``"beforeRemoved"`` event before they are detached.
    separator:
        Separator used when the sort instruction was encoded.
    metrics:
        Metrics backend; ``None`` discards all data points.
    """

    VALID_TRANSITIONS: dict[ReconcilerState, set[ReconcilerState]] = {
        ReconcilerState.IDLE: {ReconcilerState.COLLECTING, ReconcilerState.FINALIZING},
        ReconcilerState.COLLECTING: {ReconcilerState.FINALIZING},
        ReconcilerState.FINALIZING: {ReconcilerState.IDLE},
    }

    def __init__(
        self,
        sort_attr: str,
        delete_selector: DeleteSelector,
        notify_removal: Callable[[Element], bool] | None = None,
        separator: str = SORT_SEPARATOR,
        metrics: MetricsHook | None = None,
    ) -> None:
        self.sort_attr = sort_attr
        self.notify_removal = notify_removal
        self.separator = separator
        self.state: ReconcilerState = ReconcilerState.IDLE
        self._is_deleted = _compile_selector(delete_selector)
        self._metrics = resolve_metrics(metrics)
        # Most recently prepared instruction last.
        self._pending: list[MoveInstruction] = []

    @classmethod
    def from_config(
        cls,
        config: ListillerConfig,
        notify_removal: Callable[[Element], bool] | None = None,
    ) -> ListillReconciler:
        """Build a reconciler matching the DOM contract of *config*."""
        return cls(
            sort_attr=config.sort_attr,
            delete_selector=config.delete_attr,
            notify_removal=notify_removal,
            separator=config.separator,
            metrics=config.metrics,
        )

    @property
    def pending(self) -> list[MoveInstruction]:
        """Collected instructions in drain order (most recent first)."""
        return list(reversed(self._pending))

    def prepare_for_sort(
        self,
        element: Element,
        get_id: Callable[[str], str] = same_id,
    ) -> MoveInstruction | None:
        """Collect the move instruction rendered on a just-patched element.

        Parameters
        ----------
        element:
            An element the host has just patched.
        get_id:
            Maps the anchor's component id to its element id.

        Returns
        -------
        MoveInstruction | None
            The collected instruction, or ``None`` if the element carries
            no sort attribute.

        Raises
        ------
        ListillerStateError
            If called while the container is being finalized.
        ListillerSortDataError
            If the sort attribute is malformed or the element has no id.
        """
        if self.state != ReconcilerState.COLLECTING:
            self._transition(ReconcilerState.COLLECTING)

        sort_data = element.get_attribute(self.sort_attr)
        if not sort_data:
            return None

        source_id = element.id
        if not source_id:
            raise ListillerSortDataError(
                message=f"Element carrying sort data {sort_data!r} has no id",
                context={"value": sort_data, "reason": "missing_id"},
            )

        sort = decode_sort_data(sort_data, self.separator)
        instruction = MoveInstruction(
            source_id=source_id,
            destination_id=get_id(sort.anchor_id) if sort.anchor_id is not None else None,
            version=sort.version,
        )
        self._pending.append(instruction)
        return instruction

    def finalize(self, root: Element) -> None:
        """Remove tombstones under *root*, then apply all collected moves.

        The instruction list is cleared and the reconciler returns to
        ``IDLE`` even if a host element raises mid-way.
        """
        self._transition(ReconcilerState.FINALIZING)
        try:
            self._delete_elements(root)
            self._sort_elements(root)
        finally:
            self._pending.clear()
            self.state = ReconcilerState.IDLE

    def discard(self) -> None:
        """Drop pending instructions without applying them (container destroyed)."""
        self._pending.clear()
        self.state = ReconcilerState.IDLE

    def _transition(self, new_state: ReconcilerState) -> None:
        allowed = self.VALID_TRANSITIONS.get(self.state, set())
        if new_state not in allowed:
            raise ListillerStateError(
                message=(
                    f"Invalid reconciler transition: {self.state.value} -> "
                    f"{new_state.value}"
                ),
                context={
                    "current_state": self.state.value,
                    "requested_state": new_state.value,
                },
            )
        self.state = new_state

    def _delete_elements(self, root: Element) -> None:
        doomed = [el for el in root.iter_descendants() if self._is_deleted(el)]
        for el in doomed:
            if self.notify_removal is not None and self.notify_removal(el):
                el.dispatch_event(BEFORE_REMOVED_EVENT)
            parent = el.parent
            if parent is not None:
                parent.remove_child(el)
        if doomed:
            self._metrics.increment("listiller.client.deletes_total", len(doomed))

    def _sort_elements(self, root: Element) -> None:
        for instruction in reversed(self._pending):
            src = root.get_element_by_id(instruction.source_id)
            if instruction.destination_id is None:
                dst = None
                target = src.parent if src is not None else None
            else:
                dst = root.get_element_by_id(instruction.destination_id)
                target = dst.parent if dst is not None else None

            if src is None or target is None or src is dst:
                self._metrics.increment(
                    "listiller.client.moves_total", tags={"outcome": "skipped"},
                )
                log.debug(
                    "move skipped, element missing",
                    extra={
                        "extra_fields": {
                            "op": "finalize",
                            "src": instruction.source_id,
                            "dst": instruction.destination_id,
                            "version": instruction.version,
                        }
                    },
                )
                continue

            target.insert_before(src, dst)
            self._metrics.increment(
                "listiller.client.moves_total", tags={"outcome": "moved"},
            )


def _compile_selector(selector: DeleteSelector) -> Callable[[Element], bool]:
    if callable(selector):
        return selector
    attr = selector

    def has_delete_marker(element: Element) -> bool:
        return element.has_attribute(attr)

    return has_delete_marker
