from __future__ import annotations

from .composing.changelog import compose_changelog
from .composing.control import compose_control, split_extra_fields
from .core.config import PartialConfig, ResolvedConfig
from .core.errors import (
    ComposeError,
    ConfigError,
    DebyError,
    EmptyChanges,
    EmptyVersion,
    InvalidEnumValue,
    InvalidFieldValue,
    MalformedExtraField,
    MissingRequiredField,
    UnreadableFile,
)
from .core.resolver import resolve_config
from .orchestration.orchestrator import FileOutcome, UpdateOrchestrator, UpdateResult, from_config_file

__all__ = [
    "compose_changelog",
    "compose_control",
    "split_extra_fields",
    "PartialConfig",
    "ResolvedConfig",
    "resolve_config",
    "FileOutcome",
    "UpdateOrchestrator",
    "UpdateResult",
    "from_config_file",
    "DebyError",
    "ConfigError",
    "ComposeError",
    "InvalidEnumValue",
    "InvalidFieldValue",
    "MissingRequiredField",
    "EmptyVersion",
    "EmptyChanges",
    "MalformedExtraField",
    "UnreadableFile",
]
