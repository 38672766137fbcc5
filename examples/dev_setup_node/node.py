"""Node attribute assembly for a convergence run.

Resolves the ruby cookbook's attributes once and hands the orchestrator the
nested node tree it reads (``node["ruby"]["path"]`` and so on). Attribute
errors are turned into a plain failure report instead of a traceback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

from vcap.cookbooks.ruby import RubyAttributeService
from vcap.infra.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vcap.cookbooks.ruby import RubyCookbookSettings
    from vcap.foundation.attributes import CookbookAttributeError


def build_node(
    overrides: Mapping[str, Any] | None = None,
    *,
    settings: RubyCookbookSettings | None = None,
    run_id: str | None = None,
) -> dict[str, Any]:
    """Resolve attributes and return the node tree for one convergence run.

    Args:
        overrides: Run-level overrides keyed by dotted attribute key.
        settings: Host settings; defaults to the environment.
        run_id: Identifier bound to every log event of the run.
    """
    with structlog.contextvars.bound_contextvars(run_id=run_id or uuid4().hex):
        descriptor = RubyAttributeService(settings=settings, overrides=overrides).descriptor()
        node = descriptor.to_node_attributes()
        get_logger(__name__).info("node_attributes_built", cookbooks=sorted(node))
    return node


def failure_report(exc: CookbookAttributeError) -> dict[str, Any]:
    """Machine-readable report of a failed attribute load."""
    return {
        "error_code": exc.error_code,
        "message": exc.message,
        "context": dict(exc.context),
    }
