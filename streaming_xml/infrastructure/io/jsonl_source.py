from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..logging.null_logger import NullLogger
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from ...application.ports.services import LoggerPort


class JSONLRecordSource:
    """Yield one record per JSON Lines entry.

    Lines that are blank are ignored. Lines that are not valid JSON, or that
    hold something other than a JSON object, are skipped with a warning and
    counted in ``skipped_lines``.
    """

    def __init__(
        self, logger: LoggerPort | None = None, encoding: str = "utf-8"
    ) -> None:
        super().__init__()
        self.logger: LoggerPort = logger or NullLogger()
        self.encoding = encoding
        self.skipped_lines = 0

    def iter_records(self, path: Path) -> Iterator[dict[str, object]]:
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        self.skipped_lines = 0
        try:
            with path.open("r", encoding=self.encoding) as handle:
                for line_number, line in enumerate(handle, start=1):
                    stripped = line.strip()
                    if not stripped:
                        continue
                    try:
                        value = json.loads(stripped)
                    except json.JSONDecodeError as e:
                        self._skip(line_number, f"invalid JSON ({e.msg})")
                        continue
                    if not isinstance(value, dict):
                        self._skip(
                            line_number, f"expected an object, got {type(value).__name__}"
                        )
                        continue
                    yield value
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e

    def _skip(self, line_number: int, reason: str) -> None:
        self.skipped_lines += 1
        self.logger.log_record_skipped(line_number, reason)
