"""Streaming XML document session.

A session owns one output file for its whole open lifetime. It writes the
XML declaration and the root start tag on ``start()``, renders one record per
``write_record()`` call straight to the file and flushes after every record,
then writes the root end tag and closes the file on ``finish()``.

Only the current record is ever held in memory, so the memory used stays
flat however many records are written::

    with DocumentSession(output, "users") as session:
        for record in fetch_users():
            session.write_record(record, "user")
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from ...constants import Defaults, XMLFormat
from ...domain.entities.record import ArrayEncodingPolicy
from ...domain.services.record_encoder import render_element, sanitize_element_name
from ..logging.null_logger import NullLogger
from .exceptions import SessionStateError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from types import TracebackType

    from ...application.ports.services import LoggerPort
    from ...domain.entities.record import Record


class SessionState(Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class DocumentSession:
    """One XML output document, written incrementally."""

    def __init__(
        self,
        target: str | Path,
        root_element_name: str = Defaults.ROOT_ELEMENT,
        *,
        array_policy: ArrayEncodingPolicy | str = ArrayEncodingPolicy.REPEAT,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        if not root_element_name:
            raise ValueError("root_element_name must be a non-empty string")
        self._target = Path(target)
        self._root_element_name = root_element_name
        self._root_tag = sanitize_element_name(root_element_name)
        self.array_policy = ArrayEncodingPolicy.from_name(array_policy)
        self.logger: LoggerPort = logger or NullLogger()
        self._handle: TextIO | None = None
        self._state = SessionState.UNOPENED
        self._records_written = 0

    @property
    def target(self) -> Path:
        return self._target

    @property
    def root_element_name(self) -> str:
        return self._root_element_name

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.OPEN

    @property
    def records_written(self) -> int:
        return self._records_written

    def start(self) -> None:
        """Open the target and write the declaration and root start tag.

        Raises:
            SessionStateError: If the session was already started.
            OSError: If the target cannot be created or written.
        """
        if self._state is not SessionState.UNOPENED:
            raise SessionStateError(
                f"Session for {self._target} is {self._state.value}; "
                "create a new DocumentSession to write again"
            )
        self._target.parent.mkdir(parents=True, exist_ok=True)
        handle = self._target.open("w", encoding=XMLFormat.ENCODING, newline="\n")
        try:
            handle.write(f"{XMLFormat.DECLARATION}\n")
            handle.write(f"<{self._root_tag}>\n")
        except BaseException:
            handle.close()
            raise
        self._handle = handle
        self._state = SessionState.OPEN
        self.logger.debug(f"Opened {self._target} with root <{self._root_tag}>")

    def write_record(
        self, record: Record, element_name: str = Defaults.RECORD_ELEMENT
    ) -> None:
        """Render one record under ``element_name`` and flush it to disk.

        Does nothing when the session is not open.
        """
        handle = self._handle
        if handle is None or self._state is not SessionState.OPEN:
            self.logger.debug(
                f"Ignoring record for {self._target}: session is {self._state.value}"
            )
            return
        render_element(handle, element_name, record, 1, array_policy=self.array_policy)
        handle.flush()
        self._records_written += 1

    def write_records(
        self, records: Iterable[Record], element_name: str = Defaults.RECORD_ELEMENT
    ) -> int:
        """Write every record from ``records`` (list, generator, ...).

        Returns:
            The number of records written by this call.
        """
        before = self._records_written
        for record in records:
            self.write_record(record, element_name)
        return self._records_written - before

    def finish(self) -> None:
        """Write the root end tag and close the target. No-op unless open."""
        handle = self._handle
        if handle is None or self._state is not SessionState.OPEN:
            return
        self._handle = None
        self._state = SessionState.CLOSED
        try:
            handle.write(f"</{self._root_tag}>\n")
        finally:
            handle.close()
        self.logger.debug(
            f"Closed {self._target} after {self._records_written:,} records"
        )

    def __enter__(self) -> DocumentSession:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finish()


@contextmanager
def open_document(
    target: str | Path,
    root_element_name: str = Defaults.ROOT_ELEMENT,
    *,
    array_policy: ArrayEncodingPolicy | str = ArrayEncodingPolicy.REPEAT,
    logger: LoggerPort | None = None,
) -> Iterator[DocumentSession]:
    """Open a session for the duration of a ``with`` block.

    The root end tag is written and the file closed on every exit path,
    including exceptions raised inside the block.
    """
    session = DocumentSession(
        target, root_element_name, array_policy=array_policy, logger=logger
    )
    with session:
        yield session
