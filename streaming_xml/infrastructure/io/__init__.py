"""I/O adapters: the streaming document session, record sources and validator."""

from .batching import BatchingWriter
from .csv_source import CSVReadOptions, CSVRecordSource
from .document_session import DocumentSession, SessionState, open_document
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    SessionStateError,
    StreamingXMLError,
)
from .jsonl_source import JSONLRecordSource
from .writer_factory import StreamingWriterFactory
from .xml_validator import XMLValidator, basic_validate_xml_file, validate_xml_file

__all__ = [
    "BatchingWriter",
    "CSVReadOptions",
    "CSVRecordSource",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DocumentSession",
    "JSONLRecordSource",
    "SessionState",
    "SessionStateError",
    "StreamingWriterFactory",
    "StreamingXMLError",
    "XMLValidator",
    "basic_validate_xml_file",
    "open_document",
    "validate_xml_file",
]
