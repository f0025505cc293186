from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from ...constants import Defaults
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@dataclass(slots=True)
class CSVReadOptions:
    has_header: bool = True
    normalize_headers: bool = True
    strict_na_handling: bool = True
    dtype: Any = str
    encoding: str = "utf-8"
    chunk_size: int = Defaults.CSV_CHUNK_SIZE


class CSVRecordSource:
    """Yield one record per CSV row, reading the file in chunks."""

    def __init__(self, options: CSVReadOptions | None = None) -> None:
        super().__init__()
        self.options = options or CSVReadOptions()

    def iter_records(
        self, path: Path, options: CSVReadOptions | None = None
    ) -> Iterator[dict[str, object]]:
        options = options or self.options
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        if options.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {options.chunk_size}")
        try:
            reader = pd.read_csv(
                path,
                header=0 if options.has_header else None,
                dtype=options.dtype,
                keep_default_na=not options.strict_na_handling,
                na_values=[""] if options.strict_na_handling else None,
                encoding=options.encoding,
                chunksize=options.chunk_size,
            )
            with reader:
                for chunk in reader:
                    chunk = self._normalize_columns(chunk, options)
                    for row in chunk.itertuples(index=False, name=None):
                        yield {
                            column: self._clean_value(value)
                            for column, value in zip(chunk.columns, row, strict=True)
                        }
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e

    def _normalize_columns(
        self, chunk: pd.DataFrame, options: CSVReadOptions
    ) -> pd.DataFrame:
        if not options.has_header:
            chunk.columns = [f"column_{i}" for i in range(chunk.shape[1])]
        elif options.normalize_headers:
            chunk.columns = [str(col).strip() for col in chunk.columns]
        else:
            chunk.columns = [str(col) for col in chunk.columns]
        return chunk

    @staticmethod
    def _clean_value(value: object) -> object:
        try:
            if pd.isna(value):
                return None
        except (TypeError, ValueError):
            pass
        return value
