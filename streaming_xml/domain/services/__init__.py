"""Domain services.

Pure rendering logic that operates on records.
"""

from .record_encoder import (
    TextSink,
    escape_xml_text,
    format_scalar,
    render_element,
    sanitize_element_name,
)

__all__ = [
    "TextSink",
    "escape_xml_text",
    "format_scalar",
    "render_element",
    "sanitize_element_name",
]
