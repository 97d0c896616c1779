"""Compose `debian/control` text.

The file always holds two stanzas, source then binary, separated by one
blank line. Stanzas are rendered with python-debian's `Deb822`, which keeps
insertion order and never leaves trailing whitespace after an empty value.
Caller-supplied extra fields are appended to the source stanza.
"""

from __future__ import annotations

from collections.abc import Iterable

from debian.deb822 import Deb822

from deby.core.config import BinaryControl, ControlConfig, SourceControl
from deby.core.errors import InvalidFieldValue, MalformedExtraField

ExtraField = tuple[str, str]


def has_line_break(value: str) -> bool:
    return "\n" in value or "\r" in value


def split_extra_fields(joined: str) -> list[str]:
    """Split the ``"Key: Value;Key2: Value2"`` command-line form into entries."""
    return joined.split(";")


def parse_extra_field(entry: str) -> ExtraField | None:
    """Parse one ``Key: Value`` entry.

    Whitespace-only entries yield ``None``. The split happens at the first
    colon, so values may contain colons (URLs, ports).
    """
    if not entry.strip():
        return None
    key, sep, value = entry.partition(":")
    if not sep:
        raise MalformedExtraField(entry, "missing ':' separator")
    key = key.strip()
    value = value.strip()
    if not key:
        raise MalformedExtraField(entry, "empty field name")
    if any(c.isspace() for c in key):
        raise MalformedExtraField(entry, "field name contains whitespace")
    if has_line_break(value):
        raise MalformedExtraField(entry, "value spans several lines")
    return key, value


def parse_extra_fields(entries: Iterable[str]) -> list[ExtraField]:
    return [f for f in (parse_extra_field(e) for e in entries) if f is not None]


def format_description(description: str) -> str:
    """Format a possibly multi-line description as a deb822 field value.

    The first line is the synopsis; following lines become continuation
    lines, with blank lines written as ``" ."``.
    """
    synopsis, *rest = description.strip().splitlines() or [""]
    body = [f" {line.rstrip()}" if line.strip() else " ." for line in rest]
    return "\n".join([synopsis.strip(), *body])


def _set(stanza: Deb822, key: str, value: str) -> None:
    """Set a single-line field, rejecting values Deb822 would mis-render."""
    if has_line_break(value):
        raise InvalidFieldValue(key, value)
    try:
        stanza[key] = value
    except ValueError as e:
        raise InvalidFieldValue(key, value) from e


def source_stanza(src: SourceControl, extra: Iterable[ExtraField] = ()) -> Deb822:
    stanza = Deb822()
    _set(stanza, "Source", src.source)
    if src.section is not None:
        _set(stanza, "Section", src.section)
    _set(stanza, "Priority", src.priority)
    _set(stanza, "Maintainer", str(src.maintainer))
    if src.build_depends:
        _set(stanza, "Build-Depends", ", ".join(src.build_depends))
    if src.standards_version is not None:
        _set(stanza, "Standards-Version", src.standards_version)
    if src.homepage is not None:
        _set(stanza, "Homepage", src.homepage)
    if src.vcs_browser is not None:
        _set(stanza, "Vcs-Browser", src.vcs_browser)

    for key, value in extra:
        # Deb822 keys are case-insensitive; a repeat would overwrite in place.
        if key in stanza:
            raise MalformedExtraField(f"{key}: {value}", f"duplicate field {key!r}")
        _set(stanza, key, value)
    return stanza


def binary_stanza(binary: BinaryControl) -> Deb822:
    stanza = Deb822()
    _set(stanza, "Package", binary.package)
    _set(stanza, "Architecture", binary.architecture)
    if binary.section is not None:
        _set(stanza, "Section", binary.section)
    _set(stanza, "Priority", binary.priority)
    if binary.pre_depends:
        _set(stanza, "Pre-Depends", binary.pre_depends)
    if binary.description is not None:
        try:
            stanza["Description"] = format_description(binary.description)
        except ValueError as e:
            raise InvalidFieldValue("Description", binary.description) from e
    return stanza


def compose_control(config: ControlConfig, extra_fields: Iterable[str] = ()) -> str:
    """Return the full control file text.

    Raises
    ------
    MalformedExtraField
        An extra field lacks a ``:`` separator, has an invalid name, spans
        several lines, or repeats a source stanza field.
    InvalidFieldValue
        A configured single-line value contains a line break.
    """
    extra = parse_extra_fields(extra_fields)
    source = source_stanza(config.source_control, extra).dump()
    binary = binary_stanza(config.binary_control).dump()
    return f"{source}\n{binary}"
