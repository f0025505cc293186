from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults
from ..domain.entities.record import ArrayEncodingPolicy

if TYPE_CHECKING:
    from pathlib import Path


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class ValidationResult:
    path: Path
    is_valid: bool
    method: str = "parser"
    root_element: str | None = None
    child_count: int = 0
    errors: list[str] = field(default_factory=_empty_str_list)


@dataclass(slots=True)
class ConvertRequest:
    source: Path
    output: Path
    source_format: str
    root_element_name: str = Defaults.ROOT_ELEMENT
    element_name: str = Defaults.RECORD_ELEMENT
    array_policy: ArrayEncodingPolicy = ArrayEncodingPolicy.REPEAT
    batch_size: int = Defaults.BATCH_SIZE
    progress_interval: int = Defaults.PROGRESS_INTERVAL
    validate_output: bool = False
    verbose: int = 0


@dataclass(slots=True)
class ConversionSummary:
    source: Path
    output: Path
    source_format: str
    records_written: int
    skipped_lines: int
    elapsed_seconds: float
    output_bytes: int

    @property
    def records_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.records_written / self.elapsed_seconds


@dataclass(slots=True)
class ConvertResponse:
    success: bool = True
    output: Path | None = None
    records_written: int = 0
    skipped_lines: int = 0
    summary: ConversionSummary | None = None
    validation: ValidationResult | None = None
    error: str | None = None

    @property
    def has_errors(self) -> bool:
        return not self.success or (
            self.validation is not None and not self.validation.is_valid
        )
