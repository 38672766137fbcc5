"""Extensible registry of cookbook attribute keys.

AttributeKey is an empty StrEnum base class. Each cookbook subclasses it
with its own dotted keys, mirroring the nested node attribute tree the
orchestrator reads (``ruby.version`` is ``node["ruby"]["version"]``).

Example:
    Declaring keys for a cookbook::

        from vcap.foundation.attributes.keys import AttributeKey

        class NginxAttributeKey(AttributeKey):
            VERSION = "nginx.version"
            WORKER_PROCESSES = "nginx.worker_processes"
"""

from __future__ import annotations

from enum import StrEnum


class AttributeKey(StrEnum):
    """Base class for dotted cookbook attribute keys.

    Uses StrEnum so members compare equal to, and serialize as, their
    dotted string form.
    """

    @property
    def path(self) -> tuple[str, ...]:
        """Segments of the key in the nested node attribute tree."""
        return tuple(self.value.split("."))


def split_key(key: str) -> tuple[str, ...]:
    """Split a dotted key into node tree segments.

    Raises:
        ValueError: If the key is empty or contains an empty segment.
    """
    parts = tuple(key.split("."))
    if not key or any(not part for part in parts):
        msg = f"Invalid attribute key: {key!r}"
        raise ValueError(msg)
    return parts


def nest(flat: dict[str, object]) -> dict[str, object]:
    """Build a nested node attribute tree from dotted keys.

    A key may not be both a leaf and a branch (``a.b`` and ``a.b.c``).

    Example:
        >>> nest({"rubygems.version": "1.7.2", "rubygems.bundler.version": "1.0.12"})
        {'rubygems': {'version': '1.7.2', 'bundler': {'version': '1.0.12'}}}
    """
    tree: dict[str, object] = {}
    for key, value in flat.items():
        *parents, leaf = split_key(key)
        node = tree
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                msg = f"Attribute {key!r} conflicts with leaf value at {part!r}"
                raise ValueError(msg)
            node = child
        if isinstance(node.get(leaf), dict):
            msg = f"Attribute {key!r} conflicts with nested attributes"
            raise ValueError(msg)
        node[leaf] = value
    return tree
