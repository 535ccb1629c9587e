"""Test doubles shared across the listiller test suite.

``RowComponent`` is a minimal listilled source over ``{"rows": [(key,
value), ...]}`` states.  ``Host`` simulates a UI host rendering a
listilled container: it patches existing elements in place, appends new
ones, and notifies the container hook in patch order, with the sentinel
last.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from listiller.client import ContainerHook, ListillReconciler, MemoryElement
from listiller.config import ListillerConfig
from listiller.helpers import item_attributes
from listiller.listilled import Listilled
from listiller.models import ListillResult, ListUpdate

CONTAINER_ID = "rows"
SENTINEL_ID = "rows-sentinel"


def make_state(keys: list[Hashable], values: dict[Hashable, Any] | None = None) -> dict:
    values = values or {}
    return {"rows": [(key, values.get(key, 0)) for key in keys]}


def element_id(key: Hashable) -> str:
    return f"row-{key}"


class RowComponent(Listilled):
    def prepare_list(self, state):
        return [key for key, _ in state["rows"]], state

    def component_id(self, key, state):
        return element_id(key)

    def construct_assigns(self, state, key):
        return {"id": element_id(key), "key": key, "value": dict(state["rows"]).get(key)}


class Host:
    """A container plus sentinel wired to a :class:`ContainerHook`."""

    def __init__(self, config: ListillerConfig | None = None) -> None:
        self.config = config if config is not None else ListillerConfig()
        self.container = MemoryElement("ul", {"id": CONTAINER_ID})
        self.sentinel = MemoryElement("div", {"id": SENTINEL_ID})
        self.root = MemoryElement("section", {"id": "page"}, [self.container, self.sentinel])
        self.reconciler = ListillReconciler.from_config(self.config)
        self.hook = ContainerHook(self.reconciler, SENTINEL_ID)
        self.hook.init(self.container)

    def render(self, result: ListillResult) -> None:
        if result.meta.update == ListUpdate.FULL:
            for child in list(self.container.children):
                self.container.remove_child(child)

        for item in result.items:
            attrs = item_attributes(item, self.config)
            element = self.container.get_element_by_id(attrs["id"])
            if element is None:
                element = MemoryElement("li", attrs)
                self.container.append_child(element)
            else:
                element.attributes = attrs
            element.set_attribute("data-value", str(item["value"]))
            self.hook.on_patch_observed(element)

        self.hook.on_patch_observed(self.sentinel)

    def rendered_ids(self) -> list[str | None]:
        return self.container.child_ids()


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def names(self) -> list[str]:
        return [call["name"] for call in self.increments + self.timings + self.gauges]
