from typing import Any

import pytest

from deby.core.config import ChangelogConfig, ControlConfig, PartialConfig
from deby.core.errors import InvalidEnumValue, MissingRequiredField
from deby.core.models import PRIORITIES, Disabled, Maintainer
from deby.core.resolver import normalize_build_depends, resolve_config


def _resolve(data: dict[str, Any]):
    return resolve_config(PartialConfig.model_validate(data))


def test_changelog_defaults_applied(raw_config: dict[str, Any]) -> None:
    resolved = _resolve(raw_config)

    assert isinstance(resolved.changelog, ChangelogConfig)
    assert resolved.changelog.distribution == "unstable"
    assert resolved.changelog.urgency == "low"
    assert resolved.changelog.maintainer == Maintainer("Jane Doe", "jane@example.org")


def test_explicit_distribution_preserved(raw_config: dict[str, Any]) -> None:
    raw_config["changelog"]["distribution"] = "experimental"
    raw_config["changelog"]["urgency"] = "critical"

    resolved = _resolve(raw_config)

    assert resolved.changelog.distribution == "experimental"
    assert resolved.changelog.urgency == "critical"


def test_invalid_priority_rejected(raw_config: dict[str, Any]) -> None:
    raw_config["control"]["sourceControl"]["priority"] = "urgent"

    with pytest.raises(InvalidEnumValue) as exc:
        _resolve(raw_config)

    assert exc.value.field == "control.sourceControl.priority"
    assert exc.value.got == "urgent"
    assert exc.value.allowed == PRIORITIES


def test_enum_match_is_case_sensitive(raw_config: dict[str, Any]) -> None:
    raw_config["changelog"]["distribution"] = "Unstable"

    with pytest.raises(InvalidEnumValue) as exc:
        _resolve(raw_config)

    assert exc.value.field == "changelog.distribution"


def test_invalid_architecture_rejected(raw_config: dict[str, Any]) -> None:
    raw_config["control"]["binaryControl"]["architecture"] = "amd64"

    with pytest.raises(InvalidEnumValue) as exc:
        _resolve(raw_config)

    assert exc.value.field == "control.binaryControl.architecture"
    assert exc.value.allowed == ("all", "any")


@pytest.mark.parametrize(
    "path, field",
    [
        (("changelog", "package"), "changelog.package"),
        (("changelog", "maintainer"), "changelog.maintainer.name"),
        (("control", "sourceControl", "source"), "control.sourceControl.source"),
        (("control", "binaryControl", "package"), "control.binaryControl.package"),
    ],
)
def test_missing_required_field(raw_config: dict[str, Any], path: tuple[str, ...], field: str) -> None:
    section = raw_config
    for key in path[:-1]:
        section = section[key]
    del section[path[-1]]

    with pytest.raises(MissingRequiredField) as exc:
        _resolve(raw_config)

    assert exc.value.field == field


def test_missing_maintainer_email(raw_config: dict[str, Any]) -> None:
    del raw_config["changelog"]["maintainer"]["email"]

    with pytest.raises(MissingRequiredField) as exc:
        _resolve(raw_config)

    assert exc.value.field == "changelog.maintainer.email"


def test_disabled_section_is_not_checked(raw_config: dict[str, Any]) -> None:
    raw_config["changelog"] = {"update": False, "urgency": "whenever"}

    resolved = _resolve(raw_config)

    assert resolved.changelog == Disabled("changelog")
    assert isinstance(resolved.control, ControlConfig)


def test_omitted_sections_are_disabled() -> None:
    resolved = _resolve({})

    assert resolved.changelog == Disabled("changelog")
    assert resolved.control == Disabled("control")


def test_top_level_package_and_maintainer_inherited() -> None:
    resolved = _resolve(
        {
            "package": "foo",
            "maintainer": {"name": "Ann", "email": "ann@example.org"},
            "changelog": {"update": True},
            "control": {"update": True, "sourceControl": {"source": "foo"}},
        }
    )

    assert resolved.changelog.package == "foo"
    assert resolved.control.binary_control.package == "foo"
    assert str(resolved.control.source_control.maintainer) == "Ann <ann@example.org>"


def test_empty_string_is_not_replaced_by_default(raw_config: dict[str, Any]) -> None:
    raw_config["control"]["sourceControl"]["homepage"] = ""
    raw_config["package"] = "fallback"
    raw_config["changelog"]["package"] = ""

    resolved = _resolve(raw_config)

    assert resolved.control.source_control.homepage == ""
    assert resolved.changelog.package == ""


def test_control_defaults(raw_config: dict[str, Any]) -> None:
    src = raw_config["control"]["sourceControl"]
    binary = raw_config["control"]["binaryControl"]
    for key in ("priority", "buildDepends", "section"):
        del src[key]
    for key in ("priority", "architecture", "preDepends"):
        del binary[key]

    control = _resolve(raw_config).control

    assert control.source_control.priority == "optional"
    assert control.source_control.build_depends == ()
    assert control.source_control.section is None
    assert control.binary_control.priority == "optional"
    assert control.binary_control.architecture == "any"
    assert control.binary_control.pre_depends is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ()),
        ([], ()),
        (["", "  "], ()),
        ([" a ", "b"], ("a", "b")),
        ("a, b (>= 1),", ("a", "b (>= 1)")),
    ],
)
def test_normalize_build_depends(value, expected) -> None:
    assert normalize_build_depends(value) == expected
