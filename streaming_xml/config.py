from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults
from .domain.entities.record import ArrayEncodingPolicy


@dataclass(frozen=True, slots=True)
class WriterConfig:
    root_element_name: str = Defaults.ROOT_ELEMENT
    element_name: str = Defaults.RECORD_ELEMENT
    array_policy: ArrayEncodingPolicy = ArrayEncodingPolicy.REPEAT
    batch_size: int = Defaults.BATCH_SIZE
    csv_chunk_size: int = Defaults.CSV_CHUNK_SIZE
    progress_interval: int = Defaults.PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        if not self.root_element_name:
            raise ValueError("root_element_name must be a non-empty string")
        if not self.element_name:
            raise ValueError("element_name must be a non-empty string")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.csv_chunk_size < 1:
            raise ValueError(
                f"csv_chunk_size must be positive, got {self.csv_chunk_size}"
            )
        if self.progress_interval < 1:
            raise ValueError(
                f"progress_interval must be positive, got {self.progress_interval}"
            )

    @classmethod
    def from_env(cls) -> WriterConfig:
        return cls(
            root_element_name=os.getenv("XML_ROOT_ELEMENT", Defaults.ROOT_ELEMENT),
            element_name=os.getenv("XML_RECORD_ELEMENT", Defaults.RECORD_ELEMENT),
            array_policy=ArrayEncodingPolicy.from_name(
                os.getenv("XML_ARRAY_POLICY", Defaults.ARRAY_POLICY)
            ),
            batch_size=int(os.getenv("XML_BATCH_SIZE", str(Defaults.BATCH_SIZE))),
            csv_chunk_size=int(
                os.getenv("CSV_CHUNK_SIZE", str(Defaults.CSV_CHUNK_SIZE))
            ),
            progress_interval=int(
                os.getenv("PROGRESS_INTERVAL", str(Defaults.PROGRESS_INTERVAL))
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        output = _get_table(data, "output")
        input_section = _get_table(data, "input")
        batching = _get_table(data, "batching")
        root_element_name = base_config.root_element_name
        if value := output.get("root_element"):
            root_element_name = str(value)
        element_name = base_config.element_name
        if value := output.get("record_element"):
            element_name = str(value)
        array_policy = base_config.array_policy
        if (value := output.get("array_policy")) is not None:
            array_policy = ArrayEncodingPolicy.from_name(str(value))
        batch_size = base_config.batch_size
        if (value := batching.get("batch_size")) is not None:
            batch_size = _coerce_int(value, key="batching.batch_size")
        progress_interval = base_config.progress_interval
        if (value := batching.get("progress_interval")) is not None:
            progress_interval = _coerce_int(value, key="batching.progress_interval")
        csv_chunk_size = base_config.csv_chunk_size
        if (value := input_section.get("csv_chunk_size")) is not None:
            csv_chunk_size = _coerce_int(value, key="input.csv_chunk_size")
        return WriterConfig(
            root_element_name=root_element_name,
            element_name=element_name,
            array_policy=array_policy,
            batch_size=batch_size,
            csv_chunk_size=csv_chunk_size,
            progress_interval=progress_interval,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
