"""
Architecture boundary tests — enforce layer dependencies.

Allowed dependency direction:
  domain/         → stdlib, sqlmodel (no application, infrastructure, api)
  infrastructure/ → domain, logging_config (NOT application, api)
  application/    → domain, infrastructure, logging_config (NOT api)
  api/            → application, domain, api (infrastructure.database only)
"""

import ast
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).parent.parent

FORBIDDEN = {
    "domain": ["application", "infrastructure", "api"],
    "infrastructure": ["application", "api"],
    "application": ["api"],
}
API_ALLOWED_INFRASTRUCTURE = {"infrastructure.database"}


def _collect_imports(filepath: Path) -> list[str]:
    """Parse a Python file and return all imported module names."""
    tree = ast.parse(filepath.read_text(encoding="utf-8"))
    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            imports.append(node.module)
    return imports


def _get_python_files(layer_dir: Path) -> list[Path]:
    if not layer_dir.exists():
        return []
    return sorted(layer_dir.rglob("*.py"))


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_layer_has_no_forbidden_imports(layer):
    violations = [
        f"{filepath.name}: imports {imp}"
        for filepath in _get_python_files(BACKEND_ROOT / layer)
        for imp in _collect_imports(filepath)
        for forbidden in FORBIDDEN[layer]
        if imp == forbidden or imp.startswith(f"{forbidden}.")
    ]
    assert violations == [], f"{layer} layer violations:\n" + "\n".join(violations)


def test_api_only_uses_database_from_infrastructure():
    violations = [
        f"{filepath.name}: imports {imp}"
        for filepath in _get_python_files(BACKEND_ROOT / "api")
        for imp in _collect_imports(filepath)
        if imp.startswith("infrastructure") and imp not in API_ALLOWED_INFRASTRUCTURE
    ]
    assert violations == [], "API layer infrastructure violations:\n" + "\n".join(
        violations
    )
