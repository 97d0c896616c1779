"""Exception taxonomy.

Config errors are raised while loading or resolving `.debyrc`; compose
errors while building file text. Both happen before any write is attempted.
I/O failures are left as the underlying `OSError`; an undecodable target
file is reported as `UnreadableFile`.
"""

from __future__ import annotations

from collections.abc import Sequence


class DebyError(Exception):
    """Base class for all deby errors."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(DebyError):
    """The configuration could not be loaded or resolved."""


class ConfigFileNotFound(ConfigError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"config file not found: {path}")


class InvalidConfigDocument(ConfigError):
    """The config document is not valid JSON or has wrongly-typed fields."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"invalid config file {path}: {detail}")


class InvalidEnumValue(ConfigError):
    def __init__(self, field: str, got: str, allowed: Sequence[str]) -> None:
        self.field = field
        self.got = got
        self.allowed = tuple(allowed)
        super().__init__(f"{field}: {got!r} is not one of {', '.join(self.allowed)}")


class MissingRequiredField(ConfigError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required when the section is enabled")


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class ComposeError(DebyError):
    """File text could not be composed from the given inputs."""


class EmptyVersion(ComposeError):
    def __init__(self) -> None:
        super().__init__("version must not be empty")


class EmptyChanges(ComposeError):
    def __init__(self) -> None:
        super().__init__("changes must not be empty")


class MalformedExtraField(ComposeError):
    def __init__(self, entry: str, reason: str = "expected 'Key: Value'") -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"malformed extra field {entry!r}: {reason}")


class InvalidFieldValue(ComposeError):
    """A single-line field value contains a line break."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: {value!r} must be a single line")


# ---------------------------------------------------------------------------
# Target files
# ---------------------------------------------------------------------------


class UnreadableFile(DebyError):
    """An existing target file could not be decoded."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"cannot read {path}: {detail}")
