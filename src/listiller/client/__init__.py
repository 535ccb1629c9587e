"""Client-side reconciliation of listilled containers.

Exports
-------
ListillReconciler
    Collects move instructions while a container is patched, then deletes
    tombstones and applies the moves in one deferred pass.
ContainerHook
    Adapter driving a reconciler from host lifecycle callbacks.
Element
    Protocol for host elements.
MemoryElement
    In-memory element tree.
"""

from .element import Element, MemoryElement
from .hook import ContainerHook
from .reconciler import BEFORE_REMOVED_EVENT, ListillReconciler

__all__ = [
    "BEFORE_REMOVED_EVENT",
    "ContainerHook",
    "Element",
    "ListillReconciler",
    "MemoryElement",
]
