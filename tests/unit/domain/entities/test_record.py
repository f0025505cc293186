"""Unit tests for record entities."""

import pytest

from streaming_xml.domain.entities.record import ArrayEncodingPolicy


class TestArrayEncodingPolicy:
    """Tests for ArrayEncodingPolicy lookup."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("repeat", ArrayEncodingPolicy.REPEAT),
            ("REPEAT", ArrayEncodingPolicy.REPEAT),
            ("indexed", ArrayEncodingPolicy.INDEXED_CHILD),
            ("indexed_child", ArrayEncodingPolicy.INDEXED_CHILD),
            ("Indexed-Child", ArrayEncodingPolicy.INDEXED_CHILD),
            (" repeat ", ArrayEncodingPolicy.REPEAT),
        ],
    )
    def test_from_name(self, name: str, expected: ArrayEncodingPolicy):
        assert ArrayEncodingPolicy.from_name(name) is expected

    def test_from_name_passes_members_through(self):
        policy = ArrayEncodingPolicy.INDEXED_CHILD
        assert ArrayEncodingPolicy.from_name(policy) is policy

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown array policy"):
            ArrayEncodingPolicy.from_name("wrapped")

    def test_values_are_strings(self):
        assert ArrayEncodingPolicy.REPEAT == "repeat"
        assert ArrayEncodingPolicy.INDEXED_CHILD.value == "indexed"
