from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

from deby.core.models import FileContent, Found, NotFound

FIXED_NOW = datetime(2026, 10, 16, 12, 30, 0, tzinfo=timezone(timedelta(hours=2)))
FIXED_DATE = "Fri, 16 Oct 2026 12:30:00 +0200"


class FakeFiles:
    """In-memory IFileReader / IFileWriter."""

    def __init__(self, files: dict[Path, str] | None = None, fail_writes: bool = False) -> None:
        self.files = dict(files or {})
        self.fail_writes = fail_writes
        self.reads: list[Path] = []
        self.writes: list[Path] = []

    def read(self, path: Path) -> FileContent:
        self.reads.append(path)
        if path in self.files:
            return Found(self.files[path])
        return NotFound()

    def write(self, path: Path, text: str) -> None:
        if self.fail_writes:
            raise PermissionError(f"read-only: {path}")
        self.writes.append(path)
        self.files[path] = text


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW


@pytest.fixture
def fake_files() -> FakeFiles:
    return FakeFiles()


@pytest.fixture
def raw_config() -> dict[str, Any]:
    return {
        "changelog": {
            "update": True,
            "package": "deby",
            "maintainer": {"name": "Jane Doe", "email": "jane@example.org"},
        },
        "control": {
            "update": True,
            "sourceControl": {
                "source": "deby",
                "section": "utils",
                "priority": "optional",
                "buildDepends": ["debhelper-compat (= 13)", "python3-all"],
                "standardsVersion": "4.6.2",
                "homepage": "https://example.org/deby",
                "vcsBrowser": "https://example.org/deby.git",
                "maintainer": {"name": "Jane Doe", "email": "jane@example.org"},
            },
            "binaryControl": {
                "package": "deby",
                "description": "Debian metadata generator",
                "section": "utils",
                "priority": "optional",
                "preDepends": "dpkg (>= 1.15.6)",
                "architecture": "all",
            },
        },
    }


@pytest.fixture
def fixed_date() -> str:
    return FIXED_DATE
