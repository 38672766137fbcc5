"""VersionedPackageDescriptor: the ruby runtime a convergence run installs.

The descriptor stores the version and the *templates* for the download URL
and install path. ``source_url`` and ``install_path`` are computed from the
current version every time they are read, so they can never drift from it.

Example:
    >>> from vcap.cookbooks.ruby import default_descriptor
    >>> descriptor = default_descriptor().with_version("1.9.3-p0")
    >>> descriptor.install_path
    '/var/vcap/deploy/rubies/ruby-1.9.3-p0'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationInfo,
    computed_field,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from vcap.cookbooks.ruby.keys import RubyAttributeKey, coerce_key
from vcap.foundation.attributes.exceptions import (
    AttributeTemplateError,
    AttributeValidationError,
)
from vcap.foundation.attributes.keys import nest
from vcap.foundation.attributes.templates import render_template, require_placeholder

_VERSION_PATTERN = re.compile(r"^[0-9A-Za-z][0-9A-Za-z._-]*$")
_IDENTITY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")

# Model field -> attribute key. Templates are stored under their own key.
FIELD_KEYS: dict[str, RubyAttributeKey] = {
    "version": RubyAttributeKey.VERSION,
    "source_template": RubyAttributeKey.SOURCE,
    "path_template": RubyAttributeKey.PATH,
    "rubygems_version": RubyAttributeKey.RUBYGEMS_VERSION,
    "bundler_version": RubyAttributeKey.BUNDLER_VERSION,
    "runtime_user": RubyAttributeKey.USER,
    "runtime_group": RubyAttributeKey.GROUP,
}

# Placeholders a source or path template may reference.
TEMPLATE_PLACEHOLDERS: frozenset[str] = frozenset(
    {"version", "rubygems_version", "bundler_version", "user", "group"}
)


class VersionedPackageDescriptor(BaseModel):
    """Immutable description of a ruby runtime installation.

    Attributes:
        version: Ruby version string (e.g. "1.9.2-p180").
        source_template: Download URL template, must reference ``{version}``.
        path_template: Install path template, must reference ``{version}``.
        rubygems_version: RubyGems version to install.
        bundler_version: Bundler gem version to install.
        runtime_user: Owner of the installed runtime.
        runtime_group: Group of the installed runtime.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str
    source_template: str
    path_template: str
    rubygems_version: str
    bundler_version: str
    runtime_user: str
    runtime_group: str

    @field_validator("version", "rubygems_version", "bundler_version")
    @classmethod
    def validate_version(cls, v: str, info: ValidationInfo) -> str:
        if not _VERSION_PATTERN.match(v):
            raise AttributeValidationError(
                FIELD_KEYS[info.field_name].value,
                "must start with a letter or digit and contain only "
                "letters, digits, '.', '_' or '-'",
                value=v,
            )
        return v

    @field_validator("source_template", "path_template")
    @classmethod
    def validate_template(cls, v: str, info: ValidationInfo) -> str:
        key = FIELD_KEYS[info.field_name]
        try:
            return require_placeholder(v, "version", TEMPLATE_PLACEHOLDERS)
        except AttributeTemplateError as exc:
            exc.context.setdefault("key", key.value)
            raise

    @field_validator("runtime_user", "runtime_group")
    @classmethod
    def validate_identity(cls, v: str, info: ValidationInfo) -> str:
        if not _IDENTITY_PATTERN.match(v):
            raise AttributeValidationError(
                FIELD_KEYS[info.field_name].value,
                "must be a non-empty user or group name",
                value=v,
            )
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def source_url(self) -> str:
        """Download URL for the current version."""
        return render_template(self.source_template, self._placeholders())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def install_path(self) -> str:
        """Install destination for the current version."""
        return render_template(self.path_template, self._placeholders())

    def _placeholders(self) -> dict[str, str]:
        return {
            "version": self.version,
            "rubygems_version": self.rubygems_version,
            "bundler_version": self.bundler_version,
            "user": self.runtime_user,
            "group": self.runtime_group,
        }

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, Any],
    ) -> VersionedPackageDescriptor:
        """Build a descriptor from a dotted-key mapping.

        ``ruby.source`` and ``ruby.path`` hold templates, not rendered values.

        Raises:
            UnknownAttributeError: If a key is not a ruby cookbook attribute.
            AttributeValidationError: If a key is missing or a value is invalid.
            AttributeTemplateError: If a template is unusable.
        """
        by_key = {coerce_key(key): value for key, value in attributes.items()}
        values: dict[str, Any] = {}
        for field_name, key in FIELD_KEYS.items():
            if by_key.get(key) is None:
                raise AttributeValidationError(key.value, "is required")
            values[field_name] = by_key[key]
        return cls._build(values)

    @classmethod
    def _build(cls, values: dict[str, Any]) -> VersionedPackageDescriptor:
        try:
            return cls(**values)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else "version"
            key = FIELD_KEYS.get(field_name, RubyAttributeKey.VERSION)
            raise AttributeValidationError(key.value, error["msg"]) from exc

    def with_version(self, version: str) -> VersionedPackageDescriptor:
        """Return a copy for another version; derived values follow it.

        Raises:
            AttributeValidationError: If ``version`` is not a valid version string.
        """
        values = self.model_dump(include=set(FIELD_KEYS))
        values["version"] = version
        return type(self)._build(values)

    def to_flat_attributes(self) -> dict[str, str]:
        """Rendered attribute values keyed by dotted key."""
        return {
            RubyAttributeKey.VERSION.value: self.version,
            RubyAttributeKey.SOURCE.value: self.source_url,
            RubyAttributeKey.PATH.value: self.install_path,
            RubyAttributeKey.RUBYGEMS_VERSION.value: self.rubygems_version,
            RubyAttributeKey.BUNDLER_VERSION.value: self.bundler_version,
            RubyAttributeKey.USER.value: self.runtime_user,
            RubyAttributeKey.GROUP.value: self.runtime_group,
        }

    def to_node_attributes(self) -> dict[str, Any]:
        """Rendered attributes as the nested tree the orchestrator reads.

        Example:
            >>> descriptor.to_node_attributes()["rubygems"]["bundler"]
            {'version': '1.0.12'}
        """
        return nest(self.to_flat_attributes())  # type: ignore[arg-type]

    def lookup(self, key: str) -> str:
        """Look up a rendered attribute value by dotted key.

        Raises:
            UnknownAttributeError: If the key is not a ruby cookbook attribute.
        """
        return self.to_flat_attributes()[coerce_key(key).value]
