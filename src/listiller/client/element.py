"""Element tree abstraction used by the client reconciler.

:class:`Element` is the structural protocol a host's live tree must
satisfy.  :class:`MemoryElement` is a plain in-memory implementation,
useful for hosts that keep their own tree (server-side rendering, tests,
headless previews).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """Protocol that a host element must satisfy."""

    @property
    def id(self) -> str | None:
        """The element's DOM id, if any."""
        ...

    @property
    def parent(self) -> Element | None:
        """The element's parent, or ``None`` when detached or a root."""
        ...

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or ``None`` when absent."""
        ...

    def has_attribute(self, name: str) -> bool:
        ...

    def iter_descendants(self) -> Iterator[Element]:
        """Yield all descendants in document order, excluding the element."""
        ...

    def get_element_by_id(self, element_id: str) -> Element | None:
        """Look *element_id* up in the whole tree the element belongs to."""
        ...

    def append_child(self, child: Element) -> None:
        ...

    def insert_before(self, child: Element, reference: Element | None) -> None:
        """Move or insert *child* immediately before *reference*."""
        ...

    def remove_child(self, child: Element) -> None:
        ...

    def dispatch_event(self, event_name: str) -> None:
        ...


EventListener = Callable[["MemoryElement", str], Any]


class MemoryElement:
    """A minimal mutable element tree node.

    Parameters
    ----------
    tag:
        Element tag name.
    attributes:
        Initial attributes; ``"id"`` is the element id.
    children:
        Initial children, appended in order.
    """

    __slots__ = ("_listeners", "attributes", "children", "parent", "tag")

    def __init__(
        self,
        tag: str = "div",
        attributes: dict[str, str] | None = None,
        children: list[MemoryElement] | None = None,
    ) -> None:
        self.tag = tag
        self.attributes: dict[str, str] = dict(attributes or {})
        self.children: list[MemoryElement] = []
        self.parent: MemoryElement | None = None
        self._listeners: dict[str, list[EventListener]] = {}
        for child in children or []:
            self.append_child(child)

    def __repr__(self) -> str:
        return f"MemoryElement(tag={self.tag!r}, id={self.id!r}, children={len(self.children)})"

    # ── Attributes ──────────────────────────────────────────────────────

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    # ── Traversal ───────────────────────────────────────────────────────

    def root(self) -> MemoryElement:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def iter_descendants(self) -> Iterator[MemoryElement]:
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def get_element_by_id(self, element_id: str) -> MemoryElement | None:
        root = self.root()
        if root.id == element_id:
            return root
        for node in root.iter_descendants():
            if node.id == element_id:
                return node
        return None

    def child_ids(self) -> list[str | None]:
        return [child.id for child in self.children]

    # ── Mutation ────────────────────────────────────────────────────────

    def append_child(self, child: MemoryElement) -> None:
        child._detach()
        self.children.append(child)
        child.parent = self

    def insert_before(self, child: MemoryElement, reference: MemoryElement | None) -> None:
        if reference is None:
            self.append_child(child)
            return
        if reference.parent is not self:
            raise ValueError(f"{reference!r} is not a child of {self!r}")
        if child is reference:
            return
        child._detach()
        index = next(i for i, node in enumerate(self.children) if node is reference)
        self.children.insert(index, child)
        child.parent = self

    def remove_child(self, child: MemoryElement) -> None:
        if child.parent is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        child._detach()

    def _detach(self) -> None:
        if self.parent is not None:
            siblings = self.parent.children
            del siblings[next(i for i, node in enumerate(siblings) if node is self)]
            self.parent = None

    # ── Events ──────────────────────────────────────────────────────────

    def add_event_listener(self, event_name: str, listener: EventListener) -> None:
        self._listeners.setdefault(event_name, []).append(listener)

    def remove_event_listener(self, event_name: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_name, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event_name: str) -> None:
        for listener in list(self._listeners.get(event_name, [])):
            listener(self, event_name)
