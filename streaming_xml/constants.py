from typing import ClassVar


class Defaults:
    ROOT_ELEMENT = "data"
    RECORD_ELEMENT = "item"
    ARRAY_POLICY = "repeat"
    BATCH_SIZE = 1000
    CSV_CHUNK_SIZE = 1000
    PROGRESS_INTERVAL = 10000
    CONFIG_FILE = "streaming_xml.toml"


class XMLFormat:
    DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
    ENCODING = "utf-8"
    INDENT = "  "
    INDEXED_CHILD_PREFIX = "item_"
    REPLACEMENT_CHAR = "\uFFFD"


class Patterns:
    ELEMENT_NAME = "^[A-Za-z_][A-Za-z0-9_-]*$"
    INVALID_NAME_CHARS = "[^A-Za-z0-9_-]"
    NAME_START = "^[A-Za-z_]"
    # Characters XML 1.0 does not allow in element content
    INVALID_TEXT_CHARS = r"[\x00-\x08\x0B\x0C\x0E-\x1F\uD800-\uDFFF\uFFFE\uFFFF]"


class SourceFormats:
    CSV = "csv"
    JSONL = "jsonl"
    SUPPORTED: ClassVar[tuple[str, ...]] = ("csv", "jsonl")
    SUFFIXES: ClassVar[dict[str, str]] = {
        ".csv": "csv",
        ".jsonl": "jsonl",
        ".ndjson": "jsonl",
    }


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
