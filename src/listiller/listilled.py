"""The listilled capability interface.

A :class:`Listilled` subclass owns the state-to-assigns transformation of
one kind of rendered list: it extracts the ordered item keys from a state
snapshot, names each item's element, and builds the assigns the item's
template is rendered from.  :class:`~listiller.engine.Listiller` diffs
those assigns between two snapshots so only the items that actually
changed are sent to the client.

Templates rendered from listilled assigns must interpret the reserved
``updated`` key:

* ``"noop"`` -- patch the element in place (also used for every item of
  a full replacement).
* ``"delete"`` -- render the tombstone variant carrying the delete marker.
* :class:`~listiller.models.SortInstruction` -- render the sort attribute
  so the client moves the element before its anchor.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from listiller.utils.naming import resource_name


class Listilled:
    """Base class for list sources driven by the listiller engine.

    Subclasses must implement :meth:`prepare_list`, :meth:`component_id`
    and :meth:`construct_assigns`.  :meth:`state_changed` and
    :meth:`component_name` are optional; the defaults here apply when a
    subclass does not override them.
    """

    def state_changed(self, old: Any, new: Any) -> bool:
        """Return whether any listill-relevant portion of the state changed.

        Override with a cheap comparison to skip building assigns for
        both snapshots when nothing relevant changed.  The default always
        recomputes.
        """
        return True

    def prepare_list(self, state: Any) -> tuple[list[Hashable], Any]:
        """Return the ordered item keys and the state with any last-moment updates."""
        raise NotImplementedError

    def component_id(self, key: Hashable, state: Any) -> str:
        """Return the element id for *key*.

        The id is used as a sort anchor and must not contain the sort
        separator (``":"`` by default).
        """
        raise NotImplementedError

    def construct_assigns(self, state: Any, key: Hashable) -> dict[str, Any]:
        """Build the template assigns of *key* from *state*."""
        raise NotImplementedError

    def component_name(self) -> str:
        """Return the name the wire keys are derived from.

        Defaults to the class name without a ``Component`` suffix, in
        snake case (``TodoItemComponent`` -> ``"todo_item"``).
        """
        return resource_name(type(self).__name__, "Component")


def list_items_key(name: str) -> str:
    """Return the assigns key holding the list items of *name*."""
    return f"{name}_list_items"


def list_update_key(name: str) -> str:
    """Return the assigns key holding the list update mode of *name*."""
    return f"{name}_list_update"


def version_key(name: str) -> str:
    """Return the assigns key holding the list version of *name*."""
    return f"{name}_list_version"


def get_version(listilled: Listilled, state: Any, default: int = 1) -> int:
    """Read the threaded list version of *listilled* from a mapping state.

    Returns *default* when *state* is not a mapping or holds no version.
    """
    if not isinstance(state, Mapping):
        return default
    version = state.get(version_key(listilled.component_name()))
    return default if version is None else version
