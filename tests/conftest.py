"""Shared pytest fixtures for jsonindex tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "contract: accessor and registry contract tests")


@pytest.fixture
def context():
    from jsonindex.context import default_context

    return default_context()


@pytest.fixture
def accessor():
    from jsonindex.accessors.json_index import JsonIndexAccessor

    return JsonIndexAccessor()


@pytest.fixture
def sample_array():
    from jsonindex.value_model import node_from_native

    return node_from_native([10, "x", True, None, 2.5, [1, [2]], {"name": "Joe", "tags": ["a"]}])


@pytest.fixture
def sample_document(tmp_path: Path) -> Path:
    path = tmp_path / "document.json"
    path.write_text('[10, "x", true, null, [1, 2], {"k": "v"}]', encoding="utf-8")
    return path
