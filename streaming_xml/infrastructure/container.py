from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.conversion_use_case import (
    ConversionDependencies,
    ConvertRecordsUseCase,
)
from ..config import WriterConfig
from ..constants import SourceFormats
from .io.csv_source import CSVReadOptions, CSVRecordSource
from .io.jsonl_source import JSONLRecordSource
from .io.writer_factory import StreamingWriterFactory
from .io.xml_validator import XMLValidator
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import (
        LoggerPort,
        RecordSourcePort,
        WriterFactoryPort,
        XMLValidatorPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: WriterConfig | None = None,
        csv_has_header: bool = True,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or WriterConfig()
        self.csv_has_header = csv_has_header
        self._logger_instance: LoggerPort | None = None
        self._csv_source_instance: CSVRecordSource | None = None
        self._jsonl_source_instance: JSONLRecordSource | None = None
        self._writer_factory_instance: WriterFactoryPort | None = None
        self._validator_instance: XMLValidatorPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_csv_source(self) -> CSVRecordSource:
        if self._csv_source_instance is None:
            self._csv_source_instance = CSVRecordSource(
                CSVReadOptions(
                    has_header=self.csv_has_header,
                    chunk_size=self.config.csv_chunk_size,
                )
            )
        return self._csv_source_instance

    def create_jsonl_source(self) -> JSONLRecordSource:
        if self._jsonl_source_instance is None:
            self._jsonl_source_instance = JSONLRecordSource(logger=self.create_logger())
        return self._jsonl_source_instance

    def create_record_sources(self) -> dict[str, RecordSourcePort]:
        return {
            SourceFormats.CSV: self.create_csv_source(),
            SourceFormats.JSONL: self.create_jsonl_source(),
        }

    def create_writer_factory(self) -> WriterFactoryPort:
        if self._writer_factory_instance is None:
            self._writer_factory_instance = StreamingWriterFactory(
                logger=self.create_logger()
            )
        return self._writer_factory_instance

    def create_validator(self, *, basic: bool = False) -> XMLValidatorPort:
        if basic:
            return XMLValidator(basic=True)
        if self._validator_instance is None:
            self._validator_instance = XMLValidator()
        return self._validator_instance

    def create_conversion_use_case(self) -> ConvertRecordsUseCase:
        dependencies = ConversionDependencies(
            logger=self.create_logger(),
            writer_factory=self.create_writer_factory(),
            record_sources=self.create_record_sources(),
            validator=self.create_validator(),
        )
        return ConvertRecordsUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._csv_source_instance = None
        self._jsonl_source_instance = None
        self._writer_factory_instance = None
        self._validator_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_writer_factory(self, writer_factory: WriterFactoryPort) -> None:
        self._writer_factory_instance = writer_factory


def create_default_container(
    verbose: int = 0, config: WriterConfig | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=config)
