"""Core value types shared by the resolver, the composers and the orchestrator.

This module defines:
- Enumerated Debian policy values (`Distribution`, `Urgency`, `Priority`,
  `Architecture`) as `Literal` aliases plus their allowed-value tuples.
- `Maintainer`: a name/email pair rendered as ``Name <email>``.
- `ChangelogEntry`: one fully-populated changelog block.
- `Found` / `NotFound`: the two outcomes of reading a target file.
- `Disabled`: placeholder for a section whose ``update`` flag is off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

# === Debian policy value sets ===

Distribution = Literal["unstable", "experimental"]
Urgency = Literal["low", "medium", "high", "emergency", "critical"]
Priority = Literal["required", "important", "standard", "optional", "extra"]
Architecture = Literal["all", "any"]

DISTRIBUTIONS: tuple[str, ...] = get_args(Distribution)
URGENCIES: tuple[str, ...] = get_args(Urgency)
PRIORITIES: tuple[str, ...] = get_args(Priority)
ARCHITECTURES: tuple[str, ...] = get_args(Architecture)

SectionName = Literal["changelog", "control"]


@dataclass(slots=True, frozen=True)
class Maintainer:
    """Package maintainer identity."""

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


# === Changelog ===


@dataclass(slots=True, frozen=True)
class ChangelogEntry:
    """A single versioned changelog block.

    `changes` holds the already-bulleted lines (``  * ...``), joined by
    newlines. `timestamp` is an RFC 2822 date string.
    """

    package: str
    version: str
    distribution: Distribution
    urgency: Urgency
    changes: str
    maintainer: Maintainer
    timestamp: str

    def render(self) -> str:
        """Render the block, including its trailing blank separator line."""
        return (
            f"{self.package} ({self.version}) {self.distribution}; urgency={self.urgency}\n"
            "\n"
            f"{self.changes}\n"
            "\n"
            f" -- {self.maintainer}  {self.timestamp}\n"
            "\n"
        )


# === Read outcome ===


@dataclass(slots=True, frozen=True)
class Found:
    """Existing file content (possibly empty)."""

    text: str


@dataclass(slots=True, frozen=True)
class NotFound:
    """The target file does not exist yet."""


FileContent = Found | NotFound


# === Section toggle ===


@dataclass(slots=True, frozen=True)
class Disabled:
    """A config section with ``update: false`` (or omitted entirely)."""

    section: SectionName
