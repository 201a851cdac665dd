"""The domain package depends on core only, never on outer layers."""

import ast
from pathlib import Path

import pytest

DOMAIN = Path(__file__).resolve().parents[2] / "src" / "domain"
OUTER_LAYERS = ("infrastructure", "api", "main")


def _imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(), filename=str(path))
    modules: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.append(node.module)
    return modules


@pytest.mark.parametrize(
    "path", sorted(DOMAIN.rglob("*.py")), ids=lambda p: str(p.relative_to(DOMAIN))
)
def test_domain_module_does_not_import_outer_layers(path: Path) -> None:
    offending = [
        module
        for module in _imported_modules(path)
        if module.split(".")[0] in OUTER_LAYERS
    ]

    assert offending == []
