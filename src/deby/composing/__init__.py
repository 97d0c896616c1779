"""Text synthesis for Debian packaging files.

This package provides:
- Changelog composition (new entry prepended to existing history)
- Control composition (source + binary stanzas, extra fields)
"""

from deby.composing.changelog import compose_changelog, format_changes, format_date, make_entry
from deby.composing.control import (
    compose_control,
    parse_extra_field,
    parse_extra_fields,
    split_extra_fields,
)

__all__ = [
    "compose_changelog",
    "format_changes",
    "format_date",
    "make_entry",
    "compose_control",
    "parse_extra_field",
    "parse_extra_fields",
    "split_extra_fields",
]
