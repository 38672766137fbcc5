"""vcap Infra Observability -- structlog logging for convergence runs."""

from __future__ import annotations

from vcap.infra.observability.logging import (
    LoggingSettings,
    SensitiveDataProcessor,
    configure_logging,
    get_logger,
    get_logging_settings,
    redact_url_credentials,
)

__all__ = [
    "LoggingSettings",
    "SensitiveDataProcessor",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
    "redact_url_credentials",
]
