from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import Defaults
from ...domain.entities.record import ArrayEncodingPolicy
from ..logging.null_logger import NullLogger
from .batching import BatchingWriter
from .document_session import DocumentSession

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.ports.services import LoggerPort, RecordWriterPort


class StreamingWriterFactory:
    pass

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self.logger: LoggerPort = logger or NullLogger()

    def open_writer(
        self,
        output: Path,
        *,
        root_element_name: str = Defaults.ROOT_ELEMENT,
        array_policy: ArrayEncodingPolicy = ArrayEncodingPolicy.REPEAT,
        batch_size: int = Defaults.BATCH_SIZE,
    ) -> RecordWriterPort:
        session = DocumentSession(
            output, root_element_name, array_policy=array_policy, logger=self.logger
        )
        session.start()
        if batch_size <= 1:
            return session
        return BatchingWriter(session, batch_size, logger=self.logger)
