from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import ConversionSummary, ValidationResult


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    output: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_processed": 0,
        "records_written": 0,
        "batches_flushed": 0,
        "records_skipped": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_conversion_start(
        self, source: Path, output: Path, source_format: str, root_element: str
    ) -> None:
        self.set_context(source=source.name, output=output.name, operation="convert")
        self._stats["files_processed"] += 1
        self.console.print(
            f"[bold]Converting {source.name}[/bold] [dim]({source_format.upper()})[/dim]"
            f" → {output}"
        )
        self.verbose(f"Root element: <{root_element}>")

    @override
    def log_progress(self, records_written: int) -> None:
        self.verbose(f"  Written {records_written:,} records")

    @override
    def log_batch_flushed(self, batch_records: int, total_records: int) -> None:
        self._stats["batches_flushed"] += 1
        self.debug(f"  Flushed batch of {batch_records:,} ({total_records:,} total)")

    @override
    def log_record_skipped(self, line_number: int, reason: str) -> None:
        self._stats["records_skipped"] += 1
        self.warning(f"Skipping line {line_number}: {reason}")

    @override
    def log_validation_result(self, result: ValidationResult) -> None:
        if result.is_valid:
            details = f"root <{result.root_element}>" if result.root_element else ""
            if result.method == "parser":
                details += f", {result.child_count:,} child elements"
            self.success(f"{result.path.name} is well-formed ({details})")
            return
        self.error(f"{result.path.name} failed {result.method} validation")
        for message in result.errors:
            self.console.print(f"  - {message}")

    @override
    def log_conversion_summary(self, summary: ConversionSummary) -> None:
        self._stats["records_written"] += summary.records_written
        self.success(
            f"Wrote {summary.records_written:,} records to {summary.output}"
            f" in {summary.elapsed_seconds:.2f}s"
        )
        if summary.skipped_lines:
            self.warning(f"Skipped {summary.skipped_lines:,} unreadable input lines")
        if self.verbosity >= LogLevel.VERBOSE:
            size_kb = summary.output_bytes / 1024
            self.verbose(f"  Output size: {size_kb:,.1f} KB")
            self.verbose(f"  Rate: {summary.records_per_second:,.0f} records/s")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Processing Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files processed: {self._stats['files_processed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Records written: {self._stats['records_written']:,}[/dim]"
            )
            if self._stats["records_skipped"] > 0:
                self.console.print(
                    f"[dim yellow]  Skipped lines: {self._stats['records_skipped']}[/dim yellow]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.source:
            parts.append(self._context.source)
        if self._context.operation:
            parts.append(self._context.operation)
        return f"[{':'.join(parts)}] " if parts else ""
