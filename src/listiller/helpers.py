"""Helpers for templates and hosts rendering listilled lists.

They encode the per-item DOM contract shared by the server-side engine
and the client-side reconciler:

* every item element carries its stable component id;
* the delete-marker attribute is present iff ``updated == "delete"``;
* the sort attribute ``"<anchorComponentId>:<versionBase36>"`` is present
  iff ``updated`` is a :class:`~listiller.models.SortInstruction`.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from listiller.config import SORT_SEPARATOR, ListillerConfig
from listiller.errors import ListillerSortDataError
from listiller.listilled import list_items_key, list_update_key, version_key
from listiller.models import DELETE, ListillResult, ListUpdate, SortInstruction
from listiller.utils.radix import from_base36, to_base36


def encode_sort_data(updated: Any, separator: str = SORT_SEPARATOR) -> str | None:
    """Return the sort attribute value for an ``updated`` tag.

    Returns ``None`` unless *updated* is a :class:`SortInstruction`.  An
    instruction without an anchor encodes as ``":<version>"``.

    >>> encode_sort_data(SortInstruction("item-4", 71))
    'item-4:1Z'
    """
    if not isinstance(updated, SortInstruction):
        return None
    return f"{updated.anchor_id or ''}{separator}{to_base36(updated.version)}"


def decode_sort_data(value: str, separator: str = SORT_SEPARATOR) -> SortInstruction:
    """Parse a sort attribute value back into a :class:`SortInstruction`.

    Raises
    ------
    ListillerSortDataError
        If *value* has no separator or its version is not base 36.
    """
    anchor_id, sep, version_text = value.rpartition(separator)
    if not sep:
        raise ListillerSortDataError(
            message=f"Sort data {value!r} has no {separator!r} separator",
            context={"value": value, "reason": "missing_separator"},
        )
    try:
        version = from_base36(version_text)
    except ValueError as exc:
        raise ListillerSortDataError(
            message=f"Sort data {value!r} has an invalid version {version_text!r}",
            context={"value": value, "reason": "invalid_version"},
            cause=exc,
        ) from exc
    return SortInstruction(anchor_id or None, version)


def container_update_mode(update: ListUpdate) -> str:
    """Return the container update strategy for a list update mode.

    A full update replaces the container's children; a partial update
    appends new elements and patches existing ones in place.
    """
    return "replace" if update == ListUpdate.FULL else "append"


def assign_list(
    assigns: MutableMapping[str, Any],
    result: ListillResult,
) -> MutableMapping[str, Any]:
    """Store a cycle's payload in *assigns* under the list's wire keys.

    The keys are ``<name>_list_items``, ``<name>_list_update`` and
    ``<name>_list_version``, where ``name`` is the listilled component
    name.  *assigns* is updated in place and returned.
    """
    name = result.meta.name
    assigns[list_items_key(name)] = result.items
    assigns[list_update_key(name)] = result.meta.update
    assigns[version_key(name)] = result.meta.version
    return assigns


def item_attributes(
    item: dict[str, Any],
    config: ListillerConfig | None = None,
    id_key: str = "id",
) -> dict[str, str]:
    """Return the DOM attributes an item element must be rendered with.

    Parameters
    ----------
    item:
        Tagged assigns from :attr:`ListillResult.items`.
    config:
        Supplies the attribute names, separator and reserved key.
    id_key:
        Assigns key holding the item's component id.
    """
    config = config if config is not None else ListillerConfig()
    updated = item.get(config.reserved_key)

    attrs = {"id": str(item[id_key])}
    if updated == DELETE:
        attrs[config.delete_attr] = ""
    sort_data = encode_sort_data(updated, config.separator)
    if sort_data is not None:
        attrs[config.sort_attr] = sort_data
    return attrs
