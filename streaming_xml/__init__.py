"""Streaming XML writer package.

This package converts sequences of key-value records (nested mappings,
lists and scalars) into well-formed XML documents, writing each record to
disk as soon as it is rendered so memory use does not grow with input size.

Features:
- DocumentSession: incremental writer with a guaranteed root end tag
- Record encoder: element name sanitization and content escaping
- BatchingWriter: grouped hand-over in front of a session
- CSV and JSON Lines record sources
- Well-formedness validation of generated files
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("streaming-xml")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from streaming_xml.domain.entities.record import ArrayEncodingPolicy
from streaming_xml.domain.services.record_encoder import (
    escape_xml_text,
    render_element,
    sanitize_element_name,
)
from streaming_xml.infrastructure.io.batching import BatchingWriter
from streaming_xml.infrastructure.io.document_session import (
    DocumentSession,
    open_document,
)
from streaming_xml.infrastructure.io.exceptions import SessionStateError
from streaming_xml.infrastructure.io.xml_validator import validate_xml_file

__all__ = [
    "__version__",
    # Writer
    "DocumentSession",
    "open_document",
    "BatchingWriter",
    "ArrayEncodingPolicy",
    "SessionStateError",
    # Encoder
    "escape_xml_text",
    "render_element",
    "sanitize_element_name",
    # Validation
    "validate_xml_file",
]
