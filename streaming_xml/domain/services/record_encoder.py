"""Recursive record-to-XML rendering.

The encoder writes each element straight to the sink as it is produced, so
the memory held while rendering a record is bounded by the nesting depth of
that record rather than by its size. Nothing here opens, flushes or closes the
sink; that belongs to the document session.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
import re
from typing import TYPE_CHECKING, Protocol

from ...constants import Patterns, XMLFormat
from ..entities.record import ArrayEncodingPolicy

if TYPE_CHECKING:
    from ..entities.record import Value

_INVALID_NAME_CHARS = re.compile(Patterns.INVALID_NAME_CHARS)
_NAME_START = re.compile(Patterns.NAME_START)
_INVALID_TEXT_CHARS = re.compile(Patterns.INVALID_TEXT_CHARS)


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def sanitize_element_name(name: object) -> str:
    """Map an arbitrary key to a valid XML element name.

    Characters outside ``[A-Za-z0-9_-]`` become ``_`` and a name that does not
    start with a letter or underscore gets a leading ``_``. The mapping is
    lossy (``"a.b"`` and ``"a b"`` both give ``a_b``) and idempotent.
    """
    safe = _INVALID_NAME_CHARS.sub("_", str(name))
    if not safe:
        return "_"
    if not _NAME_START.match(safe):
        safe = f"_{safe}"
    return safe


def escape_xml_text(value: str) -> str:
    """Escape special XML characters in element content.

    Characters that XML 1.0 cannot represent (C0 controls other than tab, LF
    and CR, lone surrogates, U+FFFE and U+FFFF) become U+FFFD so the text can
    always be encoded and re-parsed.
    """
    value = _INVALID_TEXT_CHARS.sub(XMLFormat.REPLACEMENT_CHAR, value)
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def format_scalar(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_scalar(value.value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def is_sequence_value(value: object) -> bool:
    return isinstance(value, (list, tuple))


def render_element(
    sink: TextSink,
    tag: object,
    value: Value,
    indent_level: int,
    *,
    array_policy: ArrayEncodingPolicy = ArrayEncodingPolicy.REPEAT,
) -> None:
    """Write ``value`` to ``sink`` as one or more elements named after ``tag``.

    Args:
        sink: Any object with a ``write(str)`` method.
        tag: Raw element name; sanitized before use.
        value: A mapping, a list/tuple, or any scalar with a text form.
        indent_level: Nesting depth, two spaces per level.
        array_policy: ``REPEAT`` emits one sibling element per list item;
            ``INDEXED_CHILD`` wraps the list and names items ``item_{index}``.
    """
    name = sanitize_element_name(tag)
    indent = XMLFormat.INDENT * indent_level

    if isinstance(value, Mapping):
        sink.write(f"{indent}<{name}>\n")
        for key, child in value.items():
            render_element(
                sink, key, child, indent_level + 1, array_policy=array_policy
            )
        sink.write(f"{indent}</{name}>\n")
        return

    if is_sequence_value(value):
        if array_policy is ArrayEncodingPolicy.INDEXED_CHILD:
            sink.write(f"{indent}<{name}>\n")
            for index, item in enumerate(value):
                render_element(
                    sink,
                    f"{XMLFormat.INDEXED_CHILD_PREFIX}{index}",
                    item,
                    indent_level + 1,
                    array_policy=array_policy,
                )
            sink.write(f"{indent}</{name}>\n")
            return
        # Nested lists flatten into the same repeated tag at every depth.
        for item in value:
            render_element(sink, name, item, indent_level, array_policy=array_policy)
        return

    text = escape_xml_text(format_scalar(value))
    sink.write(f"{indent}<{name}>{text}</{name}>\n")
