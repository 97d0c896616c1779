from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from deby.core.errors import UnreadableFile
from deby.core.models import FileContent, Found, NotFound

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class LocalFiles:
    """Filesystem reader/writer for target files.

    Writes are atomic: text goes to a temporary file in the target directory,
    which is synced and then renamed over the target. The target keeps its
    permission bits; a new file gets ``0o666`` minus the umask. Missing parent
    directories (e.g. ``debian/``) are created.

    Line endings are neither translated on read nor on write.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: Path) -> FileContent:
        """Return `Found(text)` for an existing file, `NotFound()` otherwise.

        Raises `UnreadableFile` if the content is not valid in `encoding`.
        """
        try:
            with path.open(encoding=self.encoding, newline="") as f:
                text = f.read()
        except FileNotFoundError:
            logger.debug("%s does not exist yet", path)
            return NotFound()
        except UnicodeDecodeError as e:
            raise UnreadableFile(str(path), f"not valid {self.encoding}: {e.reason}") from e
        logger.debug("read %d chars from %s", len(text), path)
        return Found(text)

    def write(self, path: Path, text: str) -> None:
        """Atomically replace `path` with `text`."""
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            if path.exists():
                shutil.copymode(path, tmp)
            else:
                os.chmod(tmp, 0o666 & ~_current_umask())
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("wrote %d chars to %s", len(text), path)
