from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import ConversionSummary, ValidationResult


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_conversion_start(
        self, source: Path, output: Path, source_format: str, root_element: str
    ) -> None:
        return None

    @override
    def log_progress(self, records_written: int) -> None:
        return None

    @override
    def log_batch_flushed(self, batch_records: int, total_records: int) -> None:
        return None

    @override
    def log_record_skipped(self, line_number: int, reason: str) -> None:
        return None

    @override
    def log_validation_result(self, result: ValidationResult) -> None:
        return None

    @override
    def log_conversion_summary(self, summary: ConversionSummary) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
