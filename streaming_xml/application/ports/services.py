from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from ...domain.entities.record import ArrayEncodingPolicy, Record
    from ..models import ConversionSummary, ValidationResult


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_conversion_start(
        self, source: Path, output: Path, source_format: str, root_element: str
    ) -> None: ...

    def log_progress(self, records_written: int) -> None: ...

    def log_batch_flushed(self, batch_records: int, total_records: int) -> None: ...

    def log_record_skipped(self, line_number: int, reason: str) -> None: ...

    def log_validation_result(self, result: ValidationResult) -> None: ...

    def log_conversion_summary(self, summary: ConversionSummary) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class RecordSourcePort(Protocol):
    pass

    def iter_records(self, path: Path) -> Iterator[Record]: ...


@runtime_checkable
class RecordWriterPort(Protocol):
    pass

    def write_record(self, record: Record, element_name: str = "item") -> None: ...

    def finish(self) -> None: ...


@runtime_checkable
class XMLValidatorPort(Protocol):
    pass

    def validate(self, path: Path) -> ValidationResult: ...


@runtime_checkable
class WriterFactoryPort(Protocol):
    pass

    def open_writer(
        self,
        output: Path,
        *,
        root_element_name: str,
        array_policy: ArrayEncodingPolicy,
        batch_size: int,
    ) -> RecordWriterPort: ...
