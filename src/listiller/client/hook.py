"""Host lifecycle adapter for a listilled container.

A UI host drives :class:`ContainerHook` from its own element lifecycle
callbacks: ``init`` when the container mounts, ``on_patch_observed`` for
every element it patches (in patch order), and ``on_destroy`` when the
container goes away.  The container template renders a sentinel element
after all items; the host always patches it last, so observing the
sentinel is the signal that the cycle is complete and the reconciler can
finalize.
"""

from __future__ import annotations

from collections.abc import Callable

from listiller.client.element import Element
from listiller.client.reconciler import ListillReconciler, same_id
from listiller.errors import ListillerStateError
from listiller.models import MoveInstruction


class ContainerHook:
    """Routes host patch notifications to a :class:`ListillReconciler`.

    Parameters
    ----------
    reconciler:
        The container's reconciler.
    sentinel_id:
        Element id of the sentinel rendered after the last item.
    get_id:
        Maps an anchor component id to its element id.
    """

    def __init__(
        self,
        reconciler: ListillReconciler,
        sentinel_id: str,
        get_id: Callable[[str], str] = same_id,
    ) -> None:
        self.reconciler = reconciler
        self.sentinel_id = sentinel_id
        self._get_id = get_id
        self._container: Element | None = None

    @property
    def container(self) -> Element | None:
        return self._container

    def init(self, container: Element) -> None:
        self._container = container

    def on_patch_observed(self, element: Element) -> MoveInstruction | None:
        """Handle one patched element; finalize when it is the sentinel."""
        if self._container is None:
            raise ListillerStateError(
                message="Container hook received a patch before init or after destroy",
                context={"sentinel_id": self.sentinel_id, "element_id": element.id},
            )
        if element.id == self.sentinel_id:
            self.reconciler.finalize(self._container)
            return None
        return self.reconciler.prepare_for_sort(element, self._get_id)

    def on_destroy(self) -> None:
        self.reconciler.discard()
        self._container = None
