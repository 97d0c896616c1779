"""Configuration records.

Two stages:

1) Partial records (pydantic models) mirror the `.debyrc` JSON document.
   Field names are the JSON keys; every field is optional and ``None``
   means "absent".
2) Resolved records (frozen dataclasses) are fully defaulted and validated.
   They are only produced by `deby.core.resolver.resolve_config`.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from deby.core.models import (
    Architecture,
    Disabled,
    Distribution,
    Maintainer,
    Priority,
    Urgency,
)

# ---------------------------------------------------------------------------
# Partial (input) records
# ---------------------------------------------------------------------------


class PartialMaintainer(BaseModel):
    name: str | None = None
    email: str | None = None


class PartialChangelog(BaseModel):
    update: bool | None = None
    package: str | None = None
    distribution: str | None = None
    urgency: str | None = None
    maintainer: PartialMaintainer | None = None


class PartialSourceControl(BaseModel):
    source: str | None = None
    section: str | None = None
    priority: str | None = None
    buildDepends: list[str] | str | None = None
    standardsVersion: str | None = None
    homepage: str | None = None
    vcsBrowser: str | None = None
    maintainer: PartialMaintainer | None = None


class PartialBinaryControl(BaseModel):
    package: str | None = None
    description: str | None = None
    section: str | None = None
    priority: str | None = None
    preDepends: str | None = None
    architecture: str | None = None


class PartialControl(BaseModel):
    update: bool | None = None
    sourceControl: PartialSourceControl | None = None
    binaryControl: PartialBinaryControl | None = None


class PartialConfig(BaseModel):
    """Root of the `.debyrc` document.

    `package` and `maintainer` at the top level are inherited by sections
    that leave them out.
    """

    package: str | None = None
    maintainer: PartialMaintainer | None = None
    changelog: PartialChangelog | None = None
    control: PartialControl | None = None


# ---------------------------------------------------------------------------
# Resolved records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChangelogConfig:
    package: str
    maintainer: Maintainer
    distribution: Distribution = "unstable"
    urgency: Urgency = "low"


@dataclass(frozen=True)
class SourceControl:
    source: str
    maintainer: Maintainer
    priority: Priority = "optional"
    build_depends: tuple[str, ...] = ()
    section: str | None = None
    standards_version: str | None = None
    homepage: str | None = None
    vcs_browser: str | None = None


@dataclass(frozen=True)
class BinaryControl:
    package: str
    priority: Priority = "optional"
    architecture: Architecture = "any"
    section: str | None = None
    description: str | None = None
    pre_depends: str | None = None


@dataclass(frozen=True)
class ControlConfig:
    source_control: SourceControl
    binary_control: BinaryControl


ChangelogSection = ChangelogConfig | Disabled
ControlSection = ControlConfig | Disabled


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully resolved configuration; each section is enabled or `Disabled`."""

    changelog: ChangelogSection = Disabled("changelog")
    control: ControlSection = Disabled("control")
