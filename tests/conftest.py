from pathlib import Path

import pytest

_CONFIG_ENV_VARS = (
    "XML_ROOT_ELEMENT",
    "XML_RECORD_ELEMENT",
    "XML_ARRAY_POLICY",
    "XML_BATCH_SIZE",
    "CSV_CHUNK_SIZE",
    "PROGRESS_INTERVAL",
)


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's shell settings from leaking into config defaults."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_records() -> list[dict[str, object]]:
    return [
        {"id": 1, "name": "Alice", "tags": ["admin", "ops"]},
        {"id": 2, "name": "Bob & Co", "address": {"city": "Paris", "zip": "75001"}},
        {"id": 3, "name": "<Carol>", "active": True, "score": None},
    ]


@pytest.fixture
def jsonl_file(tmp_path: Path) -> Path:
    path = tmp_path / "events.jsonl"
    path.write_text(
        '{"id": 1, "name": "Alice", "tags": ["a", "b"]}\n'
        "\n"
        '{"id": 2, "name": "Bob", "meta": {"source": "web"}}\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "users.csv"
    path.write_text("id,name,email\n1,Alice,a@example.com\n2,Bob,\n", encoding="utf-8")
    return path
