"""Update orchestrator: resolved config → composed text → file writes.

`UpdateOrchestrator` depends only on the `IFileReader` / `IFileWriter`
interfaces and never raises for an expected failure. Each target file gets
a `FileOutcome`, and a failure on one file does not stop the other.

`from_config_file(...)` is a convenience wrapper that loads `.debyrc` and
wires `LocalFiles` for typical CLI usage.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from deby.composing.changelog import Clock, compose_changelog, local_now
from deby.composing.control import compose_control
from deby.constants import CHANGELOG, CONFIG_FILE, CONTROL, DEBIAN_DIR
from deby.core.config import ChangelogConfig, ResolvedConfig
from deby.core.errors import DebyError
from deby.core.interfaces import IFileReader, IFileWriter
from deby.core.models import Disabled
from deby.core.resolver import resolve_config
from deby.storage.config_file import load_partial_config
from deby.storage.files import LocalFiles

logger = logging.getLogger(__name__)

Status = Literal["written", "skipped", "failed"]


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class FileOutcome:
    """What happened to one target file."""

    path: Path
    status: Status
    message: str
    error: DebyError | OSError | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


@dataclass(kw_only=True)
class UpdateResult:
    """Combined outcome of updating both target files."""

    changelog: FileOutcome
    control: FileOutcome

    @property
    def outcomes(self) -> tuple[FileOutcome, FileOutcome]:
        return (self.changelog, self.control)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> bool:
        """Every attempted file failed (skipped files are not attempts)."""
        attempted = [o for o in self.outcomes if o.status != "skipped"]
        return bool(attempted) and not any(o.ok for o in attempted)

    @property
    def partial(self) -> bool:
        return not self.ok and not self.failed

    @property
    def errors(self) -> list[DebyError | OSError]:
        return [o.error for o in self.outcomes if o.error is not None]

    @property
    def messages(self) -> tuple[str, str]:
        return (self.changelog.message, self.control.message)

    def raise_for_errors(self) -> None:
        """Re-raise the first recorded error, if any."""
        if self.errors:
            raise self.errors[0]


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class UpdateOrchestrator:
    """Compose and write `debian/changelog` and `debian/control`.

    Sections that are `Disabled` are skipped without any read or write.
    Composition happens entirely in memory before the write call, so a
    validation error never leaves a file partially written.
    """

    config: ResolvedConfig
    reader: IFileReader
    writer: IFileWriter
    debian_dir: Path = Path(DEBIAN_DIR)
    now: Clock = field(default=local_now)

    @property
    def changelog_path(self) -> Path:
        return self.debian_dir / CHANGELOG

    @property
    def control_path(self) -> Path:
        return self.debian_dir / CONTROL

    def update(self, version: str, changes: str, extra_fields: Sequence[str] = ()) -> UpdateResult:
        """Update both files; neither failure short-circuits the other."""
        return UpdateResult(
            changelog=self.update_changelog_file(version, changes),
            control=self.update_control_file(extra_fields),
        )

    def update_changelog_file(self, version: str, changes: str) -> FileOutcome:
        path = self.changelog_path
        section = self.config.changelog
        if isinstance(section, Disabled):
            return self._skipped(path)
        return self._run(path, lambda: self._changelog_text(section, version, changes))

    def update_control_file(self, extra_fields: Sequence[str] = ()) -> FileOutcome:
        path = self.control_path
        section = self.config.control
        if isinstance(section, Disabled):
            return self._skipped(path)
        return self._run(path, lambda: compose_control(section, extra_fields))

    # -- helpers -----------------------------------------------------------

    def _changelog_text(self, config: ChangelogConfig, version: str, changes: str) -> str:
        existing = self.reader.read(self.changelog_path)
        return compose_changelog(config, version, changes, existing, now=self.now)

    def _run(self, path: Path, compose: Callable[[], str]) -> FileOutcome:
        try:
            text = compose()
        except (DebyError, OSError) as e:
            logger.warning("%s not updated: %s", path, e)
            return FileOutcome(path=path, status="failed", message=f"{path} not updated: {e}", error=e)

        try:
            self.writer.write(path, text)
        except OSError as e:
            logger.warning("failed to write %s: %s", path, e)
            return FileOutcome(path=path, status="failed", message=f"failed to write {path}: {e}", error=e)

        logger.info("wrote %s", path)
        return FileOutcome(
            path=path,
            status="written",
            message=f"Successfully created a new entry in {path} file.",
        )

    @staticmethod
    def _skipped(path: Path) -> FileOutcome:
        logger.info("%s skipped (update is off)", path)
        return FileOutcome(
            path=path,
            status="skipped",
            message=f"{path} file not updated due to config file setting.",
        )


def from_config_file(
    *,
    config_path: Path = Path(CONFIG_FILE),
    debian_dir: Path = Path(DEBIAN_DIR),
    now: Clock = local_now,
) -> UpdateOrchestrator:
    """Load and resolve `config_path`, and wire local filesystem collaborators.

    Raises `ConfigError` if the file is missing, malformed or invalid.
    """
    resolved = resolve_config(load_partial_config(config_path))
    files = LocalFiles()
    return UpdateOrchestrator(
        config=resolved,
        reader=files,
        writer=files,
        debian_dir=debian_dir,
        now=now,
    )
