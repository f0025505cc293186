"""Well-formedness checks for generated XML files.

``validate_xml_file`` re-parses the whole document with ElementTree's
incremental parser, detaching each record from the root once it closes so
large outputs can be checked without building the tree.
``basic_validate_xml_file`` is a cheaper structural check: XML declaration
present and opening/closing tag names balanced.
"""

from __future__ import annotations

from collections import Counter
import re
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from ...application.models import ValidationResult
from ...constants import XMLFormat

if TYPE_CHECKING:
    from pathlib import Path

_DECLARATION_PREFIX = b"<?xml"
_OPEN_TAG = re.compile(r"<([A-Za-z_][\w.-]*)(?:\s[^<>]*)?(?<!/)>")
_CLOSE_TAG = re.compile(r"</([A-Za-z_][\w.-]*)\s*>")


def _has_declaration(path: Path) -> bool:
    with path.open("rb") as handle:
        head = handle.read(len(_DECLARATION_PREFIX) + 3)
    return head.removeprefix(b"\xef\xbb\xbf").startswith(_DECLARATION_PREFIX)


def validate_xml_file(path: Path) -> ValidationResult:
    result = ValidationResult(path=path, is_valid=False, method="parser")
    if not path.is_file():
        result.errors.append(f"File not found: {path}")
        return result
    if not _has_declaration(path):
        result.errors.append("Missing XML declaration")
        return result

    depth = 0
    root: ET.Element | None = None
    try:
        for event, element in ET.iterparse(path, events=("start", "end")):
            if event == "start":
                depth += 1
                if depth == 1:
                    root = element
                    result.root_element = element.tag
                elif depth == 2:
                    result.child_count += 1
                continue
            depth -= 1
            # Finished children are detached so only one record is held.
            if depth == 1 and root is not None:
                root.clear()
    except ET.ParseError as e:
        result.errors.append(f"XML parse error: {e}")
        return result

    result.is_valid = True
    return result


def basic_validate_xml_file(path: Path) -> ValidationResult:
    result = ValidationResult(path=path, is_valid=False, method="basic")
    if not path.is_file():
        result.errors.append(f"File not found: {path}")
        return result
    if not _has_declaration(path):
        result.errors.append("Missing XML declaration")
        return result

    opened: Counter[str] = Counter()
    closed: Counter[str] = Counter()
    with path.open("r", encoding=XMLFormat.ENCODING, errors="replace") as handle:
        for line in handle:
            for name in _OPEN_TAG.findall(line):
                if result.root_element is None:
                    result.root_element = name
                opened[name] += 1
            closed.update(_CLOSE_TAG.findall(line))

    if opened != closed:
        for name in sorted(set(opened) | set(closed)):
            if opened[name] != closed[name]:
                result.errors.append(
                    f"Tag mismatch for <{name}>: {opened[name]} opened, "
                    f"{closed[name]} closed"
                )
        return result

    result.is_valid = True
    return result


class XMLValidator:
    pass

    def __init__(self, *, basic: bool = False) -> None:
        super().__init__()
        self.basic = basic

    def validate(self, path: Path) -> ValidationResult:
        if self.basic:
            return basic_validate_xml_file(path)
        return validate_xml_file(path)
