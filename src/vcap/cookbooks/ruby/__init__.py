"""vcap ruby cookbook -- default attributes of the ruby runtime installation."""

from vcap.cookbooks.ruby.attributes import DEFAULT_ATTRIBUTES, default_descriptor
from vcap.cookbooks.ruby.descriptor import VersionedPackageDescriptor
from vcap.cookbooks.ruby.keys import TEMPLATED_KEYS, RubyAttributeKey
from vcap.cookbooks.ruby.service import RubyAttributeService, load_descriptor
from vcap.cookbooks.ruby.settings import RubyCookbookSettings, get_ruby_settings

__all__ = [
    "DEFAULT_ATTRIBUTES",
    "TEMPLATED_KEYS",
    "RubyAttributeKey",
    "RubyAttributeService",
    "RubyCookbookSettings",
    "VersionedPackageDescriptor",
    "default_descriptor",
    "get_ruby_settings",
    "load_descriptor",
]
