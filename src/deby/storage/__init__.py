"""Filesystem collaborators.

This package provides:
- LocalFiles: reader/writer for target files with atomic replace
- load_partial_config: `.debyrc` loader
"""

from deby.storage.config_file import load_partial_config
from deby.storage.files import LocalFiles

__all__ = [
    "LocalFiles",
    "load_partial_config",
]
