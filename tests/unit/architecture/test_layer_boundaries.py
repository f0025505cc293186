"""Tests for architecture import boundaries.

These tests ensure that the layering is maintained:
- domain imports nothing from application, infrastructure or cli
- application imports nothing from infrastructure or cli
- infrastructure imports nothing from cli
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

# Root of the streaming_xml package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "streaming_xml"
PACKAGE_NAME = "streaming_xml"


def get_python_files(directory: Path) -> list[Path]:
    return sorted(directory.rglob("*.py"))


def module_name_for(file_path: Path) -> str:
    relative = file_path.relative_to(PACKAGE_ROOT.parent).with_suffix("")
    parts = list(relative.parts)
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Return absolute module names imported by ``file_path``.

    Relative imports are resolved against the file's own package.
    """
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    module = module_name_for(file_path)
    package_parts = module.split(".")
    if file_path.name != "__init__.py":
        package_parts = package_parts[:-1]

    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            if node.level == 0:
                if node.module:
                    imports.append(node.module)
                continue
            base = package_parts[: len(package_parts) - (node.level - 1)]
            if node.module:
                base = [*base, *node.module.split(".")]
            imports.append(".".join(base))
    return imports


def layer_of(module: str) -> str | None:
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE_NAME:
        return None
    return parts[1]


FORBIDDEN = {
    "domain": {"application", "infrastructure", "cli"},
    "application": {"infrastructure", "cli"},
    "infrastructure": {"cli"},
}


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_layer_does_not_import_outer_layers(layer: str):
    # Arrange
    violations: list[str] = []

    # Act
    for file_path in get_python_files(PACKAGE_ROOT / layer):
        for imported in extract_imports_from_file(file_path):
            if layer_of(imported) in FORBIDDEN[layer]:
                violations.append(f"{file_path.relative_to(PACKAGE_ROOT)}: {imported}")

    # Assert
    assert violations == [], "Layer boundary violations:\n" + "\n".join(violations)


def test_relative_imports_are_resolved():
    imports = extract_imports_from_file(
        PACKAGE_ROOT / "domain" / "services" / "record_encoder.py"
    )
    assert "streaming_xml.constants" in imports
    assert "streaming_xml.domain.entities.record" in imports
