from __future__ import annotations

from dataclasses import dataclass, field
import time
import traceback
from typing import TYPE_CHECKING

from .models import ConversionSummary, ConvertResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import ConvertRequest
    from .ports.services import (
        LoggerPort,
        RecordSourcePort,
        RecordWriterPort,
        WriterFactoryPort,
        XMLValidatorPort,
    )

VERBOSE_TRACEBACK_LEVEL = 2


def _empty_sources() -> dict[str, RecordSourcePort]:
    return {}


@dataclass(slots=True)
class ConversionDependencies:
    logger: LoggerPort
    writer_factory: WriterFactoryPort
    record_sources: Mapping[str, RecordSourcePort] = field(
        default_factory=_empty_sources
    )
    validator: XMLValidatorPort | None = None


class ConvertRecordsUseCase:
    """Stream every record of one input file into one XML document."""

    def __init__(self, dependencies: ConversionDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._writer_factory = dependencies.writer_factory
        self._record_sources = dependencies.record_sources
        self._validator = dependencies.validator

    def execute(self, request: ConvertRequest) -> ConvertResponse:
        response = ConvertResponse(output=request.output)
        source = self._record_sources.get(request.source_format)
        if source is None:
            response.success = False
            response.error = f"Unsupported source format: {request.source_format}"
            self.logger.error(response.error)
            return response

        self.logger.log_conversion_start(
            request.source,
            request.output,
            request.source_format,
            request.root_element_name,
        )
        started = time.perf_counter()
        writer: RecordWriterPort | None = None
        try:
            writer = self._writer_factory.open_writer(
                request.output,
                root_element_name=request.root_element_name,
                array_policy=request.array_policy,
                batch_size=request.batch_size,
            )
            for record in source.iter_records(request.source):
                writer.write_record(record, request.element_name)
                response.records_written += 1
                if response.records_written % request.progress_interval == 0:
                    self.logger.log_progress(response.records_written)
        except Exception as exc:
            self._record_failure(response, request, exc)
        finally:
            if writer is not None:
                self._finish_writer(writer, response, request)

        response.skipped_lines = int(getattr(source, "skipped_lines", 0) or 0)
        if not response.success:
            return response

        response.summary = ConversionSummary(
            source=request.source,
            output=request.output,
            source_format=request.source_format,
            records_written=response.records_written,
            skipped_lines=response.skipped_lines,
            elapsed_seconds=time.perf_counter() - started,
            output_bytes=request.output.stat().st_size,
        )
        self.logger.log_conversion_summary(response.summary)

        if request.validate_output and self._validator is not None:
            response.validation = self._validator.validate(request.output)
            self.logger.log_validation_result(response.validation)
            if not response.validation.is_valid:
                response.success = False
                response.error = f"{request.output.name}: output failed validation"
        return response

    def _finish_writer(
        self,
        writer: RecordWriterPort,
        response: ConvertResponse,
        request: ConvertRequest,
    ) -> None:
        try:
            writer.finish()
        except Exception as exc:
            if response.success:
                self._record_failure(response, request, exc)

    def _record_failure(
        self, response: ConvertResponse, request: ConvertRequest, exc: Exception
    ) -> None:
        response.success = False
        response.error = str(exc)
        self.logger.error(f"{request.source.name}: {exc}")
        if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
            self.logger.error(traceback.format_exc())
