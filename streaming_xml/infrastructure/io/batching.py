from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...constants import Defaults
from ..logging.null_logger import NullLogger

if TYPE_CHECKING:
    from types import TracebackType

    from ...application.ports.services import LoggerPort, RecordWriterPort
    from ...domain.entities.record import Record


@dataclass(frozen=True, slots=True)
class PendingRecord:
    record: Record
    element_name: str


class BatchingWriter:
    """Group records in front of a writer and hand them over in batches.

    The wrapped writer (normally a ``DocumentSession``) still renders and
    flushes each record on its own; this class only decides *when* records are
    handed over. At most ``batch_size`` records are held at once.
    """

    def __init__(
        self,
        writer: RecordWriterPort,
        batch_size: int = Defaults.BATCH_SIZE,
        *,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.writer = writer
        self.batch_size = batch_size
        self.logger: LoggerPort = logger or NullLogger()
        self._pending: list[PendingRecord] = []
        self._flushed_records = 0
        self._batches_flushed = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def flushed_records(self) -> int:
        return self._flushed_records

    @property
    def batches_flushed(self) -> int:
        return self._batches_flushed

    def add(self, record: Record, element_name: str = Defaults.RECORD_ELEMENT) -> None:
        self._pending.append(PendingRecord(record, element_name))
        if len(self._pending) >= self.batch_size:
            self.flush_batch()

    def write_record(
        self, record: Record, element_name: str = Defaults.RECORD_ELEMENT
    ) -> None:
        self.add(record, element_name)

    def flush_batch(self) -> int:
        if not self._pending:
            return 0
        batch = self._pending
        self._pending = []
        for item in batch:
            self.writer.write_record(item.record, item.element_name)
        count = len(batch)
        self._flushed_records += count
        self._batches_flushed += 1
        self.logger.log_batch_flushed(count, self._flushed_records)
        return count

    def finish(self) -> None:
        try:
            self.flush_batch()
        finally:
            self.writer.finish()

    def __enter__(self) -> BatchingWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finish()
