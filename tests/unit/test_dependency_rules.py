"""層構造の import 制約テスト。

各層が import してよい quotebox 内のモジュールを表で定め、
ソースを ast で走査して違反がないことを確認する。
Store 実装を選ぶのは dependencies.py だけで、
service/ と api/ は interfaces/ 経由でしか Store を知らない。
"""

import ast
from pathlib import Path

import pytest

PACKAGE_DIR = Path(__file__).parent.parent.parent / "quotebox"

# 層 → その層から import してはならない quotebox 内モジュールの接頭辞
LAYER_RULES: dict[str, tuple[str, ...]] = {
    "interfaces": (
        "quotebox.store",
        "quotebox.service",
        "quotebox.api",
        "quotebox.dependencies",
    ),
    "store": ("quotebox.service", "quotebox.api", "quotebox.dependencies"),
    "service": ("quotebox.store", "quotebox.api", "quotebox.dependencies"),
    "api": ("quotebox.store",),
}


def _imported_modules(source_file: Path) -> set[str]:
    """ファイル内の import 対象モジュール名を集める。"""
    tree = ast.parse(source_file.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize("layer", sorted(LAYER_RULES))
def test_layer_imports_respect_rules(layer: str):
    """各層が禁止された層を import していない。"""
    layer_dir = PACKAGE_DIR / layer
    sources = sorted(layer_dir.rglob("*.py"))
    assert sources, f"{layer}/ に Python ファイルがない"

    forbidden = LAYER_RULES[layer]
    violations = [
        f"{src.relative_to(PACKAGE_DIR)} -> {module}"
        for src in sources
        for module in sorted(_imported_modules(src))
        if module.startswith(forbidden)
    ]

    assert violations == []


def test_only_dependencies_module_chooses_store():
    """store/ を import するトップレベルモジュールは dependencies.py だけ。"""
    importers = sorted(
        src.name
        for src in PACKAGE_DIR.glob("*.py")
        if any(m.startswith("quotebox.store") for m in _imported_modules(src))
    )

    assert importers == ["dependencies.py"]
