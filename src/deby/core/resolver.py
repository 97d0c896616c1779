"""Turn a `PartialConfig` into a validated `ResolvedConfig`.

Rules
-----
- Defaults are applied only to absent (``None``) fields. An explicit empty
  string is kept as-is.
- Enum fields are matched case-sensitively against their allowed values.
- Required fields are only checked for sections with ``update: true``;
  other sections resolve to `Disabled` and are never inspected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar, cast

from deby.core.config import (
    BinaryControl,
    ChangelogConfig,
    ChangelogSection,
    ControlConfig,
    ControlSection,
    PartialBinaryControl,
    PartialChangelog,
    PartialConfig,
    PartialControl,
    PartialMaintainer,
    PartialSourceControl,
    ResolvedConfig,
    SourceControl,
)
from deby.core.errors import InvalidEnumValue, MissingRequiredField
from deby.core.models import (
    ARCHITECTURES,
    DISTRIBUTIONS,
    PRIORITIES,
    URGENCIES,
    Architecture,
    Disabled,
    Distribution,
    Maintainer,
    Priority,
    Urgency,
)

E = TypeVar("E", bound=str)


def _enum(field: str, value: str | None, allowed: Sequence[str], default: E) -> E:
    """Return `value` if it is one of `allowed`, `default` if absent."""
    if value is None:
        return default
    if value not in allowed:
        raise InvalidEnumValue(field, value, allowed)
    return cast(E, value)


def _required(field: str, value: str | None) -> str:
    if value is None:
        raise MissingRequiredField(field)
    return value


def _maintainer(
    field: str,
    own: PartialMaintainer | None,
    inherited: PartialMaintainer | None,
) -> Maintainer:
    """Resolve a maintainer, falling back to the top-level one as a whole."""
    m = own if own is not None else inherited
    if m is None:
        raise MissingRequiredField(f"{field}.name")
    return Maintainer(
        name=_required(f"{field}.name", m.name),
        email=_required(f"{field}.email", m.email),
    )


def normalize_build_depends(value: Sequence[str] | str | None) -> tuple[str, ...]:
    """Normalize ``buildDepends`` to a tuple of non-empty, stripped entries.

    A single string is split on commas.
    """
    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else value
    return tuple(s.strip() for s in items if s.strip())


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def resolve_changelog(raw: PartialChangelog | None, root: PartialConfig) -> ChangelogSection:
    if raw is None or not raw.update:
        return Disabled("changelog")

    distribution: Distribution = _enum(
        "changelog.distribution", raw.distribution, DISTRIBUTIONS, "unstable"
    )
    urgency: Urgency = _enum("changelog.urgency", raw.urgency, URGENCIES, "low")
    package = raw.package if raw.package is not None else root.package

    return ChangelogConfig(
        package=_required("changelog.package", package),
        maintainer=_maintainer("changelog.maintainer", raw.maintainer, root.maintainer),
        distribution=distribution,
        urgency=urgency,
    )


def _resolve_source(raw: PartialSourceControl, root: PartialConfig) -> SourceControl:
    prefix = "control.sourceControl"
    priority: Priority = _enum(f"{prefix}.priority", raw.priority, PRIORITIES, "optional")
    return SourceControl(
        source=_required(f"{prefix}.source", raw.source),
        maintainer=_maintainer(f"{prefix}.maintainer", raw.maintainer, root.maintainer),
        priority=priority,
        build_depends=normalize_build_depends(raw.buildDepends),
        section=raw.section,
        standards_version=raw.standardsVersion,
        homepage=raw.homepage,
        vcs_browser=raw.vcsBrowser,
    )


def _resolve_binary(raw: PartialBinaryControl, root: PartialConfig) -> BinaryControl:
    prefix = "control.binaryControl"
    priority: Priority = _enum(f"{prefix}.priority", raw.priority, PRIORITIES, "optional")
    architecture: Architecture = _enum(
        f"{prefix}.architecture", raw.architecture, ARCHITECTURES, "any"
    )
    package = raw.package if raw.package is not None else root.package
    return BinaryControl(
        package=_required(f"{prefix}.package", package),
        priority=priority,
        architecture=architecture,
        section=raw.section,
        description=raw.description,
        pre_depends=raw.preDepends,
    )


def resolve_control(raw: PartialControl | None, root: PartialConfig) -> ControlSection:
    if raw is None or not raw.update:
        return Disabled("control")

    return ControlConfig(
        source_control=_resolve_source(raw.sourceControl or PartialSourceControl(), root),
        binary_control=_resolve_binary(raw.binaryControl or PartialBinaryControl(), root),
    )


def resolve_config(raw: PartialConfig) -> ResolvedConfig:
    """Resolve defaults and validate enums / required fields.

    Raises
    ------
    InvalidEnumValue
        An enum field holds a value outside its allowed set.
    MissingRequiredField
        A required field of an enabled section is absent.
    """
    return ResolvedConfig(
        changelog=resolve_changelog(raw.changelog, raw),
        control=resolve_control(raw.control, raw),
    )
