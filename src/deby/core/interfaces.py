from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from deby.core.models import FileContent


# ---------------------------------------------------------------------------
# IFileReader
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileReader(Protocol):
    """
    Source of existing target-file content.

    Domain expectations:
    - A missing file is reported as `NotFound`, never raised.
    - An existing but empty file is `Found("")`.
    - Content that cannot be decoded raises `UnreadableFile`.
    - Any other failure (permissions) propagates as `OSError`.
    - Line endings are returned untranslated.
    """

    def read(self, path: Path) -> FileContent:
        """
        Return the current content of `path`.

        Implementations:
        - LocalFiles (filesystem)
        - In-memory fake for testing
        """
        ...


# ---------------------------------------------------------------------------
# IFileWriter
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileWriter(Protocol):
    """
    Sink for composed file text.

    Domain expectations:
    - The write replaces the whole file atomically.
    - Failures propagate as `OSError`; no retries are expected.
    """

    def write(self, path: Path, text: str) -> None:
        """
        Replace the content of `path` with `text`.

        Implementations:
        - LocalFiles (temp file + os.replace)
        - In-memory fake for testing
        """
        ...
