"""XML format validation tests.

This module tests that generated XML files:
- Are well-formed XML
- Have balanced opening and closing tags
- Round-trip escaped text through a standard parser
"""

from pathlib import Path
import re
import xml.etree.ElementTree as ET

import pytest

from streaming_xml.domain.entities.record import ArrayEncodingPolicy
from streaming_xml.infrastructure.io.document_session import open_document

_OPEN = re.compile(r"<([A-Za-z_][\w-]*)>")
_CLOSE = re.compile(r"</([A-Za-z_][\w-]*)>")

AWKWARD_RECORDS = [
    {"text": "Tom & Jerry <3 \"quotes\" 'apostrophes'"},
    {"first name": "Ada", "123x": 1, "a.b": 2, "ключ": "значение"},
    {"nested": {"deep": {"deeper": [1, [2, [3]]]}}},
    {"mixed": [{"k": "v"}, "scalar", [], {}]},
    {"empty": "", "none": None, "flag": False, "ratio": 0.25},
    {"markup": "</item><item>injected</item>"},
]


def write_document(target: Path, records, policy=ArrayEncodingPolicy.REPEAT) -> str:
    with open_document(target, "records", array_policy=policy) as session:
        session.write_records(records, "item")
    return target.read_text(encoding="utf-8")


@pytest.mark.validation
class TestXMLWellFormedness:
    """Generated documents parse with a standard XML parser."""

    @pytest.mark.parametrize("policy", list(ArrayEncodingPolicy))
    def test_awkward_records_parse(self, tmp_path: Path, policy):
        # Arrange
        target = tmp_path / "awkward.xml"

        # Act
        write_document(target, AWKWARD_RECORDS, policy)

        # Assert
        root = ET.parse(target).getroot()
        assert root.tag == "records"
        assert len(root.findall("item")) == len(AWKWARD_RECORDS)

    def test_escaped_text_round_trips(self, tmp_path: Path):
        # Arrange
        target = tmp_path / "escaped.xml"

        # Act
        write_document(target, AWKWARD_RECORDS)

        # Assert
        root = ET.parse(target).getroot()
        assert root[0].findtext("text") == "Tom & Jerry <3 \"quotes\" 'apostrophes'"
        assert root[5].findtext("markup") == "</item><item>injected</item>"

    def test_sanitized_names(self, tmp_path: Path):
        # Arrange
        target = tmp_path / "names.xml"

        # Act
        write_document(target, AWKWARD_RECORDS)

        # Assert
        item = ET.parse(target).getroot()[1]
        assert [child.tag for child in item] == ["first_name", "_123x", "a_b", "____"]

    def test_document_starts_with_declaration(self, tmp_path: Path):
        content = write_document(tmp_path / "decl.xml", [{"id": 1}])
        assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<records>\n')

    def test_nested_lists_flatten_under_repeat(self, tmp_path: Path):
        # Arrange
        target = tmp_path / "nested.xml"

        # Act
        write_document(target, AWKWARD_RECORDS)

        # Assert
        deeper = ET.parse(target).getroot()[2].find("nested/deep")
        assert deeper is not None
        assert [el.text for el in deeper.findall("deeper")] == ["1", "2", "3"]


@pytest.mark.validation
class TestTagBalance:
    """Opening and closing tag counts match for any record sequence."""

    @pytest.mark.parametrize("count", [0, 1, 17, 250])
    def test_tag_counts_match(self, tmp_path: Path, count: int):
        # Arrange
        records = (AWKWARD_RECORDS[n % len(AWKWARD_RECORDS)] for n in range(count))

        # Act
        content = write_document(tmp_path / "balance.xml", records)

        # Assert
        body = content.split("\n", 1)[1]
        assert sorted(_OPEN.findall(body)) == sorted(_CLOSE.findall(body))

    def test_every_line_is_indented_by_depth(self, tmp_path: Path):
        # Act
        content = write_document(tmp_path / "indent.xml", [{"a": {"b": 1}}])

        # Assert
        assert content.splitlines()[1:] == [
            "<records>",
            "  <item>",
            "    <a>",
            "      <b>1</b>",
            "    </a>",
            "  </item>",
            "</records>",
        ]
