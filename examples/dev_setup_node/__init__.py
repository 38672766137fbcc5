"""dev_setup node -- minimal orchestrator-side consumer of the ruby cookbook.

Modules:
    node: build_node (resolve attributes into the node tree), failure_report
"""

from .node import build_node, failure_report

__all__ = ["build_node", "failure_report"]
