"""Compose `debian/changelog` text.

A new entry is prepended to whatever the file already holds; the existing
content is never parsed or reformatted.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from email.utils import format_datetime

from deby.core.config import ChangelogConfig
from deby.core.errors import EmptyChanges, EmptyVersion, InvalidFieldValue
from deby.core.models import ChangelogEntry, FileContent, Found, NotFound

Clock = Callable[[], datetime]

BULLET = "  * "


def local_now() -> datetime:
    """Current local time, timezone-aware (numeric offset in RFC 2822 output)."""
    return datetime.now().astimezone()


def format_date(dt: datetime) -> str:
    """Format `dt` per RFC 2822, e.g. ``Fri, 16 Oct 2026 14:03:00 +0200``."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return format_datetime(dt)


def format_changes(changes: str) -> str:
    """Turn each line of `changes` into a ``  * `` bullet.

    Whitespace-only lines are dropped rather than emitted as empty bullets,
    and trailing whitespace is stripped, so no bullet line ends in spaces.
    Leading indentation is kept.
    """
    lines = [line.rstrip() for line in changes.splitlines()]
    return "\n".join(BULLET + line for line in lines if line.strip())


def make_entry(
    config: ChangelogConfig,
    version: str,
    changes: str,
    *,
    now: Clock = local_now,
) -> ChangelogEntry:
    """Build a `ChangelogEntry`.

    `version` and `changes` must not be blank; header and trailer fields
    must be single lines.
    """
    if not version.strip():
        raise EmptyVersion()
    if not changes.strip():
        raise EmptyChanges()
    for field, value in (
        ("version", version.strip()),
        ("package", config.package),
        ("maintainer.name", config.maintainer.name),
        ("maintainer.email", config.maintainer.email),
    ):
        if "\n" in value or "\r" in value:
            raise InvalidFieldValue(field, value)

    return ChangelogEntry(
        package=config.package,
        version=version.strip(),
        distribution=config.distribution,
        urgency=config.urgency,
        changes=format_changes(changes),
        maintainer=config.maintainer,
        timestamp=format_date(now()),
    )


def compose_changelog(
    config: ChangelogConfig,
    version: str,
    changes: str,
    existing: FileContent,
    *,
    now: Clock = local_now,
) -> str:
    """Return the full changelog text with a new entry on top.

    Raises
    ------
    EmptyVersion, EmptyChanges
        When the corresponding argument is blank.
    InvalidFieldValue
        The version, package or maintainer contains a line break.
    """
    block = make_entry(config, version, changes, now=now).render()
    match existing:
        case Found(text=text):
            return block + text
        case NotFound():
            return block
    raise TypeError(f"unsupported read outcome: {existing!r}")
