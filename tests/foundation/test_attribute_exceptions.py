"""Tests for the attribute exception hierarchy."""

from __future__ import annotations

import pytest

from vcap.foundation.attributes.exceptions import (
    AttributeTemplateError,
    AttributeValidationError,
    CookbookAttributeError,
    UnknownAttributeError,
)


@pytest.mark.unit
class TestCookbookAttributeError:
    """Tests for base CookbookAttributeError."""

    def test_message_and_code(self) -> None:
        err = CookbookAttributeError("Load failed")
        assert err.message == "Load failed"
        assert err.error_code == "ATTRIBUTE_ERROR"
        assert err.context == {}

    def test_str_without_context(self) -> None:
        assert str(CookbookAttributeError("Load failed")) == "Load failed"

    def test_str_with_context(self) -> None:
        err = CookbookAttributeError("Load failed", context={"cookbook": "ruby"})
        assert str(err) == "Load failed (cookbook=ruby)"

    def test_repr(self) -> None:
        err = CookbookAttributeError("Load failed", context={"a": "1"})
        assert "CookbookAttributeError" in repr(err)
        assert "Load failed" in repr(err)

    def test_is_exception(self) -> None:
        assert issubclass(CookbookAttributeError, Exception)


@pytest.mark.unit
class TestUnknownAttributeError:
    def test_error_code(self) -> None:
        assert UnknownAttributeError("ruby.flavour").error_code == "UNKNOWN_ATTRIBUTE"

    def test_message_and_context(self) -> None:
        err = UnknownAttributeError("ruby.flavour", cookbook="ruby")
        assert err.key == "ruby.flavour"
        assert err.message == "Unknown attribute: ruby.flavour"
        assert err.context == {"key": "ruby.flavour", "cookbook": "ruby"}

    def test_catch_base_catches_subtype(self) -> None:
        with pytest.raises(CookbookAttributeError):
            raise UnknownAttributeError("ruby.flavour")


@pytest.mark.unit
class TestAttributeValidationError:
    def test_error_code(self) -> None:
        err = AttributeValidationError("ruby.version", "must not be empty")
        assert err.error_code == "ATTRIBUTE_VALIDATION_ERROR"

    def test_message_format(self) -> None:
        err = AttributeValidationError("ruby.version", "must not be empty")
        assert err.message == "Invalid value for 'ruby.version': must not be empty"
        assert err.key == "ruby.version"
        assert err.reason == "must not be empty"

    def test_extra_context(self) -> None:
        err = AttributeValidationError("ruby.user", "bad", value="")
        assert err.context["value"] == ""


@pytest.mark.unit
class TestAttributeTemplateError:
    def test_error_code(self) -> None:
        err = AttributeTemplateError("ruby-{", "unbalanced")
        assert err.error_code == "ATTRIBUTE_TEMPLATE_ERROR"

    def test_keeps_template_and_reason(self) -> None:
        err = AttributeTemplateError("ruby-{", "unbalanced", key="ruby.path")
        assert err.template == "ruby-{"
        assert err.reason == "unbalanced"
        assert err.context == {"reason": "unbalanced", "key": "ruby.path"}
        assert "'ruby-{'" in err.message
