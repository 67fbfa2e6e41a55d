from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from jsonindex import main as main_mod
from jsonindex.config import JSON_INDENT_ENV
from jsonindex.features import OperationResult, handle_list_accessors, handle_read
from jsonindex.version import __version__

runner = CliRunner()


@pytest.mark.unit
def test_feature_or_exit_unknown():
    with pytest.raises(typer.Exit):
        main_mod._feature_or_exit("does-not-exist")


@pytest.mark.unit
def test_handle_cli_result_failure_raises_exit():
    with pytest.raises(typer.Exit):
        main_mod._handle_cli_result("read", OperationResult.fail("boom"))
    assert main_mod._handle_cli_result("read", OperationResult.ok({"a": 1})) == {"a": 1}


@pytest.mark.unit
def test_handle_read_applies_indexes_in_order():
    result = handle_read(document='[[1, {"k": "v"}], "x"]', indexes=["0", "1"])
    assert result.success
    assert result.data == {"kind": "node", "value": {"k": "v"}}

    scalar = handle_read(document='["a", "b"]', indexes=[1])
    assert scalar.data == {"kind": "scalar", "value": "b"}

    missing = handle_read(document='["a"]', indexes=["5"])
    assert missing.data == {"kind": "null", "value": None}


@pytest.mark.unit
def test_handle_read_failures():
    assert not handle_read(document="[1,", indexes=["0"]).success
    assert not handle_read(document='{"a": 1}', indexes=["0"]).success
    assert not handle_read(document="[null]", indexes=["0", "0"]).success
    assert not handle_read(document='["abc"]', indexes=["0", "0"]).success
    assert not handle_read(document="[1]", indexes=["-1"]).success
    failure = handle_read(document="[1]", indexes=["4294967296"])
    assert "out of integer range" in failure.error
    oversized = handle_read(document="[1]", indexes=["9" * 5000])
    assert not oversized.success
    assert "out of integer range" in oversized.error


@pytest.mark.unit
def test_handle_list_accessors():
    result = handle_list_accessors()
    assert list(result.data["accessors"]) == ["JsonIndexAccessor"]


@pytest.mark.unit
def test_version_command():
    outcome = runner.invoke(main_mod.app, ["version"])
    assert outcome.exit_code == 0
    assert __version__ in outcome.output


@pytest.mark.unit
def test_read_command_prints_json(sample_document: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(JSON_INDENT_ENV, "0")
    outcome = runner.invoke(main_mod.app, ["read", str(sample_document), "4"])
    assert outcome.exit_code == 0, outcome.output
    assert json.loads(outcome.output) == [1, 2]

    outcome = runner.invoke(main_mod.app, ["read", str(sample_document), "5"])
    assert json.loads(outcome.output) == {"k": "v"}

    outcome = runner.invoke(main_mod.app, ["read", str(sample_document), "3"])
    assert outcome.output.strip() == "null"


@pytest.mark.unit
def test_read_command_from_stdin():
    outcome = runner.invoke(main_mod.app, ["read", "-", "1", "0"], input='[0, ["deep"]]')
    assert outcome.exit_code == 0, outcome.output
    assert json.loads(outcome.output) == "deep"


@pytest.mark.unit
def test_read_command_failures(sample_document: Path, tmp_path: Path):
    missing = runner.invoke(main_mod.app, ["read", str(tmp_path / "missing.json"), "0"])
    assert missing.exit_code == 1

    bad_index = runner.invoke(main_mod.app, ["read", str(sample_document), "first"])
    assert bad_index.exit_code == 1


@pytest.mark.unit
def test_list_accessors_command():
    outcome = runner.invoke(main_mod.app, ["list-accessors"])
    assert outcome.exit_code == 0
    assert "JsonIndexAccessor" in outcome.output
    assert "ArrayNode" in outcome.output


@pytest.mark.unit
def test_read_command_rejects_undecodable_file(tmp_path: Path):
    binary = tmp_path / "binary.json"
    binary.write_bytes(b"[\xff\xfe]")
    outcome = runner.invoke(main_mod.app, ["read", str(binary), "0"])
    assert outcome.exit_code == 1
    assert not isinstance(outcome.exception, UnicodeDecodeError)


@pytest.mark.unit
def test_read_document_os_error_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    document = tmp_path / "locked.json"
    document.write_text("[1]", encoding="utf-8")

    def _deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "read_text", _deny)
    with pytest.raises(typer.Exit) as exc:
        main_mod._read_document(str(document))
    assert exc.value.exit_code == 1


@pytest.mark.unit
def test_read_command_oversized_index_exits_cleanly(sample_document: Path):
    outcome = runner.invoke(main_mod.app, ["read", str(sample_document), "9" * 5000])
    assert outcome.exit_code == 1
    assert not isinstance(outcome.exception, ValueError)
