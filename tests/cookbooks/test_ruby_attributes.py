"""Tests for the ruby cookbook's default attribute table."""

from __future__ import annotations

import pytest

from vcap.cookbooks.ruby.attributes import DEFAULT_ATTRIBUTES, default_descriptor
from vcap.cookbooks.ruby.keys import TEMPLATED_KEYS, RubyAttributeKey, coerce_key
from vcap.foundation.attributes.exceptions import UnknownAttributeError


@pytest.mark.unit
class TestDefaultAttributes:
    def test_values(self) -> None:
        assert dict(DEFAULT_ATTRIBUTES) == {
            "ruby.version": "1.9.2-p180",
            "ruby.source": "http://ftp.ruby-lang.org//pub/ruby/1.9/ruby-{version}.tar.gz",
            "ruby.path": "/var/vcap/deploy/rubies/ruby-{version}",
            "rubygems.version": "1.7.2",
            "rubygems.bundler.version": "1.0.12",
            "ruby.user": "ruby",
            "ruby.group": "ruby",
        }

    def test_covers_every_key(self) -> None:
        assert set(DEFAULT_ATTRIBUTES) == {key.value for key in RubyAttributeKey}

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_ATTRIBUTES["ruby.version"] = "2.0.0"  # type: ignore[index]

    def test_templated_keys(self) -> None:
        assert TEMPLATED_KEYS == {RubyAttributeKey.SOURCE, RubyAttributeKey.PATH}


@pytest.mark.unit
class TestDefaultDescriptor:
    def test_repeated_reads_return_same_instance(self) -> None:
        assert default_descriptor() is default_descriptor()

    def test_stable_across_reloads(self) -> None:
        first = default_descriptor()
        default_descriptor.cache_clear()
        second = default_descriptor()
        assert first == second
        assert first.to_flat_attributes() == second.to_flat_attributes()


@pytest.mark.unit
class TestCoerceKey:
    def test_known_key(self) -> None:
        assert coerce_key("ruby.group") is RubyAttributeKey.GROUP

    def test_unknown_key(self) -> None:
        with pytest.raises(UnknownAttributeError) as exc_info:
            coerce_key("ruby.flavour")
        assert exc_info.value.context == {"key": "ruby.flavour", "cookbook": "ruby"}
