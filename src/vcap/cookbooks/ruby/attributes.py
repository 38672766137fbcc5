"""Default attributes of the ruby cookbook.

These defaults apply when neither the host environment nor the caller sets
a value for a key. ``ruby.source`` and ``ruby.path`` are templates rendered
against the resolved ``ruby.version`` at read time.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType

from vcap.cookbooks.ruby.descriptor import VersionedPackageDescriptor
from vcap.cookbooks.ruby.keys import RubyAttributeKey

DEFAULT_ATTRIBUTES: MappingProxyType[str, str] = MappingProxyType(
    {
        RubyAttributeKey.VERSION.value: "1.9.2-p180",
        # The doubled slash after the host is the upstream default, kept verbatim.
        RubyAttributeKey.SOURCE.value: (
            "http://ftp.ruby-lang.org//pub/ruby/1.9/ruby-{version}.tar.gz"
        ),
        RubyAttributeKey.PATH.value: "/var/vcap/deploy/rubies/ruby-{version}",
        RubyAttributeKey.RUBYGEMS_VERSION.value: "1.7.2",
        RubyAttributeKey.BUNDLER_VERSION.value: "1.0.12",
        RubyAttributeKey.USER.value: "ruby",
        RubyAttributeKey.GROUP.value: "ruby",
    }
)


@lru_cache(maxsize=1)
def default_descriptor() -> VersionedPackageDescriptor:
    """Descriptor built from DEFAULT_ATTRIBUTES alone.

    Cached: repeated loads return the same immutable instance.
    """
    return VersionedPackageDescriptor.from_attributes(DEFAULT_ATTRIBUTES)
