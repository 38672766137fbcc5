"""Attribute precedence levels and layered resolution.

Implements the resolution chain: override -> normal -> default. A value
set at a higher precedence level shadows the same key at every lower level.
A ``None`` value means "not set" and never shadows a lower level.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class Precedence(IntEnum):
    """Attribute precedence levels, ordered lowest to highest.

    - DEFAULT: values declared by the cookbook's attribute file
    - NORMAL: values supplied by the host (environment, node file)
    - OVERRIDE: values forced by the caller for a convergence run
    """

    DEFAULT = 10
    NORMAL = 20
    OVERRIDE = 30

    @property
    def label(self) -> str:
        """Lowercase name used as the ``source`` of a resolved value."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class ResolvedAttribute:
    """A resolved attribute value and the precedence level it came from."""

    key: str
    value: Any
    source: Precedence

    def as_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value, "source": self.source.label}


@dataclass(frozen=True, slots=True)
class AttributeLayers:
    """Immutable per-precedence mappings of dotted keys to values.

    Example:
        >>> layers = AttributeLayers().with_layer(Precedence.DEFAULT, {"ruby.user": "ruby"})
        >>> layers = layers.with_layer(Precedence.OVERRIDE, {"ruby.user": "vcap"})
        >>> layers.resolve("ruby.user").source
        <Precedence.OVERRIDE: 30>
    """

    layers: Mapping[Precedence, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {
            Precedence(level): MappingProxyType(dict(values))
            for level, values in self.layers.items()
        }
        object.__setattr__(self, "layers", MappingProxyType(frozen))

    def with_layer(
        self,
        precedence: Precedence,
        values: Mapping[str, Any],
    ) -> AttributeLayers:
        """Return new layers with ``values`` merged into one precedence level.

        Within a level, keys in ``values`` replace existing keys.
        """
        merged = dict(self.layers)
        merged[precedence] = {**self.layers.get(precedence, {}), **values}
        return AttributeLayers(merged)

    def keys(self) -> list[str]:
        """Every key present at any level, sorted."""
        return sorted({key for values in self.layers.values() for key in values})

    def resolve(self, key: str) -> ResolvedAttribute | None:
        """Resolve a single key, highest precedence first.

        Returns:
            The winning value, or None if no level sets the key.
        """
        for level in sorted(self.layers, reverse=True):
            value = self.layers[level].get(key)
            if value is not None:
                return ResolvedAttribute(key=key, value=value, source=level)
        return None

    def resolve_all(self) -> dict[str, ResolvedAttribute]:
        """Resolve every key present at any level."""
        result: dict[str, ResolvedAttribute] = {}
        for key in self.keys():
            resolved = self.resolve(key)
            if resolved is not None:
                result[key] = resolved
        return result
