"""Core data models, configuration records, errors and the config resolver.

This package provides:
- Value types (Maintainer, ChangelogEntry, Found/NotFound, Disabled)
- Partial and resolved configuration records
- The resolver (resolve_config)
- File collaborator interfaces (IFileReader, IFileWriter)
"""

from deby.core.config import (
    BinaryControl,
    ChangelogConfig,
    ControlConfig,
    PartialConfig,
    ResolvedConfig,
    SourceControl,
)
from deby.core.interfaces import IFileReader, IFileWriter
from deby.core.models import ChangelogEntry, Disabled, FileContent, Found, Maintainer, NotFound
from deby.core.resolver import resolve_config

__all__ = [
    "BinaryControl",
    "ChangelogConfig",
    "ControlConfig",
    "PartialConfig",
    "ResolvedConfig",
    "SourceControl",
    "IFileReader",
    "IFileWriter",
    "ChangelogEntry",
    "Disabled",
    "FileContent",
    "Found",
    "Maintainer",
    "NotFound",
    "resolve_config",
]
