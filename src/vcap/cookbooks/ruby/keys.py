"""Attribute keys recognized by the ruby cookbook."""

from __future__ import annotations

from vcap.foundation.attributes.exceptions import UnknownAttributeError
from vcap.foundation.attributes.keys import AttributeKey


class RubyAttributeKey(AttributeKey):
    """Dotted keys of the ruby cookbook's node attributes."""

    VERSION = "ruby.version"
    SOURCE = "ruby.source"
    PATH = "ruby.path"
    RUBYGEMS_VERSION = "rubygems.version"
    BUNDLER_VERSION = "rubygems.bundler.version"
    USER = "ruby.user"
    GROUP = "ruby.group"


# Keys whose values are templates rendered against the resolved version.
TEMPLATED_KEYS: frozenset[RubyAttributeKey] = frozenset(
    {RubyAttributeKey.SOURCE, RubyAttributeKey.PATH}
)


def coerce_key(key: str) -> RubyAttributeKey:
    """Return the RubyAttributeKey for a dotted key string.

    Raises:
        UnknownAttributeError: If the key is not part of the ruby cookbook.
    """
    try:
        return RubyAttributeKey(key)
    except ValueError:
        raise UnknownAttributeError(str(key), cookbook="ruby") from None
