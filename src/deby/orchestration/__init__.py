"""Orchestration of changelog/control updates.

This package provides:
- UpdateOrchestrator: per-section compose + write with aggregated outcomes
- UpdateResult / FileOutcome: structured results for callers
- from_config_file: wiring helper for `.debyrc` + local filesystem
"""

from deby.orchestration.orchestrator import (
    FileOutcome,
    UpdateOrchestrator,
    UpdateResult,
    from_config_file,
)

__all__ = [
    "FileOutcome",
    "UpdateOrchestrator",
    "UpdateResult",
    "from_config_file",
]
