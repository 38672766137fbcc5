"""Ruby cookbook configuration using Pydantic settings.

Host-level values for the ruby cookbook's attributes, loaded from
environment variables with the ``VCAP_RUBY_`` prefix. They resolve at
normal precedence: above the cookbook defaults, below caller overrides.
Unset variables leave the default in place.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vcap.cookbooks.ruby.keys import RubyAttributeKey


class RubyCookbookSettings(BaseSettings):
    """Environment configuration for the ruby cookbook.

    Environment Variables:
        VCAP_RUBY_VERSION: Ruby version (ruby.version)
        VCAP_RUBY_SOURCE: Download URL template (ruby.source)
        VCAP_RUBY_PATH: Install path template (ruby.path)
        VCAP_RUBY_RUBYGEMS_VERSION: RubyGems version (rubygems.version)
        VCAP_RUBY_BUNDLER_VERSION: Bundler version (rubygems.bundler.version)
        VCAP_RUBY_USER: Runtime owner (ruby.user)
        VCAP_RUBY_GROUP: Runtime group (ruby.group)

    Example:
        >>> RubyCookbookSettings(version="1.9.3-p0").as_attributes()
        {'ruby.version': '1.9.3-p0'}
    """

    model_config = SettingsConfigDict(
        env_prefix="VCAP_RUBY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    version: str | None = Field(default=None, description="Ruby version")
    source: str | None = Field(
        default=None,
        description="Download URL template; must reference {version}",
    )
    path: str | None = Field(
        default=None,
        description="Install path template; must reference {version}",
    )
    rubygems_version: str | None = Field(default=None, description="RubyGems version")
    bundler_version: str | None = Field(default=None, description="Bundler version")
    user: str | None = Field(default=None, description="Owner of the installed runtime")
    group: str | None = Field(default=None, description="Group of the installed runtime")

    def as_attributes(self) -> dict[str, str]:
        """The configured values keyed by dotted attribute key."""
        values = {
            RubyAttributeKey.VERSION: self.version,
            RubyAttributeKey.SOURCE: self.source,
            RubyAttributeKey.PATH: self.path,
            RubyAttributeKey.RUBYGEMS_VERSION: self.rubygems_version,
            RubyAttributeKey.BUNDLER_VERSION: self.bundler_version,
            RubyAttributeKey.USER: self.user,
            RubyAttributeKey.GROUP: self.group,
        }
        return {key.value: value for key, value in values.items() if value is not None}


@lru_cache(maxsize=1)
def get_ruby_settings() -> RubyCookbookSettings:
    """Get cached ruby cookbook settings singleton."""
    return RubyCookbookSettings()
