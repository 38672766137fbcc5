"""Tests for templated attribute interpolation."""

from __future__ import annotations

import pytest

from vcap.foundation.attributes.exceptions import AttributeTemplateError
from vcap.foundation.attributes.templates import (
    render_template,
    require_placeholder,
    template_fields,
)


@pytest.mark.unit
class TestTemplateFields:
    def test_named_placeholder(self) -> None:
        assert template_fields("ruby-{version}.tar.gz") == frozenset({"version"})

    def test_repeated_and_multiple_placeholders(self) -> None:
        fields = template_fields("/home/{user}/ruby-{version}/{version}")
        assert fields == frozenset({"user", "version"})

    def test_literal_has_no_fields(self) -> None:
        assert template_fields("/opt/ruby") == frozenset()

    def test_escaped_braces_are_literal(self) -> None:
        assert template_fields("{{version}}") == frozenset()

    @pytest.mark.parametrize("template", ["ruby-{version", "ruby-}version"])
    def test_malformed(self, template: str) -> None:
        with pytest.raises(AttributeTemplateError):
            template_fields(template)

    @pytest.mark.parametrize(
        "template",
        ["ruby-{}", "ruby-{0}", "ruby-{version.major}", "ruby-{version[0]}"],
    )
    def test_rejects_non_named_placeholders(self, template: str) -> None:
        with pytest.raises(AttributeTemplateError, match="not a named attribute"):
            template_fields(template)

    @pytest.mark.parametrize(
        "template",
        ["ruby-{version!r}", "ruby-{version!s}", "ruby-{version:>20}", "ruby-{version:d}"],
    )
    def test_rejects_conversions_and_format_specs(self, template: str) -> None:
        with pytest.raises(AttributeTemplateError, match="not allowed"):
            template_fields(template)

    def test_rejects_nested_placeholder_in_format_spec(self) -> None:
        with pytest.raises(AttributeTemplateError, match="format spec not allowed"):
            template_fields("ruby-{version:{flavour}}")


@pytest.mark.unit
class TestRenderTemplate:
    def test_substitutes_value(self) -> None:
        rendered = render_template("ruby-{version}.tar.gz", {"version": "1.9.2-p180"})
        assert rendered == "ruby-1.9.2-p180.tar.gz"

    def test_escaped_braces_render_literally(self) -> None:
        assert render_template("{{version}}-{version}", {"version": "1.9"}) == "{version}-1.9"

    def test_extra_values_are_ignored(self) -> None:
        assert render_template("ruby", {"version": "1.9"}) == "ruby"

    def test_missing_value(self) -> None:
        with pytest.raises(AttributeTemplateError, match="no value for placeholder"):
            render_template("/home/{user}/ruby-{version}", {"version": "1.9"})

    @pytest.mark.parametrize("template", ["ruby-{version:d}", "ruby-{version:{width}}"])
    def test_format_spec_raises_template_error(self, template: str) -> None:
        with pytest.raises(AttributeTemplateError):
            render_template(template, {"version": "1.9", "width": "20"})


@pytest.mark.unit
class TestRequirePlaceholder:
    def test_accepts_valid_template(self) -> None:
        template = "/var/vcap/deploy/rubies/ruby-{version}"
        assert require_placeholder(template, "version", frozenset({"version"})) == template

    def test_rejects_missing_required(self) -> None:
        with pytest.raises(AttributeTemplateError, match=r"must reference \{version\}"):
            require_placeholder("/opt/ruby", "version", frozenset({"version"}))

    def test_rejects_unknown_placeholder(self) -> None:
        with pytest.raises(AttributeTemplateError, match="unknown placeholder"):
            require_placeholder(
                "/opt/{flavour}/ruby-{version}", "version", frozenset({"version"})
            )
