"""Ruby cookbook attribute resolution service.

Implements the resolution chain: caller override -> host environment
(normal) -> cookbook default. Templated attributes are rendered against
the resolved version, so overriding only ``ruby.version`` moves both the
download URL and the install path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vcap.cookbooks.ruby.attributes import DEFAULT_ATTRIBUTES
from vcap.cookbooks.ruby.descriptor import VersionedPackageDescriptor
from vcap.cookbooks.ruby.keys import RubyAttributeKey, coerce_key
from vcap.cookbooks.ruby.settings import RubyCookbookSettings, get_ruby_settings
from vcap.foundation.attributes.exceptions import UnknownAttributeError
from vcap.foundation.attributes.precedence import AttributeLayers, Precedence
from vcap.infra.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vcap.foundation.attributes.precedence import ResolvedAttribute


class RubyAttributeService:
    """Attribute resolution for one convergence run.

    The layers are fixed at construction; the descriptor is built on first
    use and reused afterwards.

    Args:
        settings: Host settings (normal precedence). Defaults to the cached
            environment settings.
        overrides: Caller overrides keyed by dotted attribute key
            (override precedence). ``None`` values are ignored.

    Raises:
        UnknownAttributeError: If an override names an unknown key.
    """

    def __init__(
        self,
        settings: RubyCookbookSettings | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        if settings is None:
            settings = get_ruby_settings()
        forced = {coerce_key(key).value: value for key, value in (overrides or {}).items()}
        self._layers = (
            AttributeLayers()
            .with_layer(Precedence.DEFAULT, DEFAULT_ATTRIBUTES)
            .with_layer(Precedence.NORMAL, settings.as_attributes())
            .with_layer(Precedence.OVERRIDE, forced)
        )
        self._descriptor: VersionedPackageDescriptor | None = None

    @property
    def layers(self) -> AttributeLayers:
        return self._layers

    def _resolve(self, key: RubyAttributeKey) -> ResolvedAttribute:
        resolved = self._layers.resolve(key.value)
        if resolved is None:
            raise UnknownAttributeError(key.value, cookbook="ruby")
        return resolved

    def descriptor(self) -> VersionedPackageDescriptor:
        """Build the descriptor from the resolved attribute values.

        Raises:
            AttributeValidationError: If a resolved value is invalid.
            AttributeTemplateError: If a resolved template is unusable.
        """
        if self._descriptor is None:
            values = {key.value: self._resolve(key).value for key in RubyAttributeKey}
            self._descriptor = VersionedPackageDescriptor.from_attributes(values)
            get_logger(__name__).debug(
                "ruby_descriptor_built",
                version=self._descriptor.version,
                source=self._descriptor.source_url,
            )
        return self._descriptor

    def get_attribute(self, key: str) -> dict[str, Any]:
        """Resolve a single attribute.

        Args:
            key: Dotted attribute key (e.g. "ruby.path").

        Returns:
            Dict with ``key``, ``value`` and ``source`` fields. ``source`` is
            the precedence level ("default", "normal", "override") that
            supplied the value or, for templated keys, the template.

        Raises:
            UnknownAttributeError: If the key is not a ruby cookbook attribute.
            AttributeValidationError: If any resolved value is invalid; values
                are only returned once the whole descriptor validates.
            AttributeTemplateError: If a resolved template is unusable.
        """
        attribute_key = coerce_key(key)
        resolved = self._resolve(attribute_key)
        value = self.descriptor().lookup(attribute_key)

        get_logger(__name__).debug(
            "attribute_resolved",
            key=attribute_key.value,
            source=resolved.source.label,
        )
        return {
            "key": attribute_key.value,
            "value": value,
            "source": resolved.source.label,
        }

    def get_all_attributes(self) -> list[dict[str, Any]]:
        """Resolve every ruby cookbook attribute, sorted by key."""
        keys = sorted(key.value for key in RubyAttributeKey)
        return [self.get_attribute(key) for key in keys]


def load_descriptor(
    overrides: Mapping[str, Any] | None = None,
    settings: RubyCookbookSettings | None = None,
) -> VersionedPackageDescriptor:
    """Resolve the ruby cookbook attributes and return the descriptor.

    Args:
        overrides: Caller overrides keyed by dotted attribute key.
        settings: Host settings. Defaults to the environment.

    Example:
        >>> load_descriptor({"ruby.version": "1.9.3-p0"}).source_url
        'http://ftp.ruby-lang.org//pub/ruby/1.9/ruby-1.9.3-p0.tar.gz'
    """
    descriptor = RubyAttributeService(settings=settings, overrides=overrides).descriptor()
    get_logger(__name__).info(
        "ruby_descriptor_loaded",
        version=descriptor.version,
        install_path=descriptor.install_path,
    )
    return descriptor
