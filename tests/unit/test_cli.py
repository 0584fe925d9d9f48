import json
from pathlib import Path

import pytest

import main as cli
from infrastructure.observability.logging import cv_collection, cv_command


@pytest.fixture
def base_args(tmp_path: Path, monkeypatch) -> list[str]:
    # Keep the test runner's logging handlers untouched
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    env_file = tmp_path / ".env"
    env_file.write_text("", encoding="utf-8")
    return ["--env", str(env_file), "--config", str(tmp_path / "store.yaml"), "--backend", "memory"]


def _write(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "taxonomy.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_check_accepts_valid_document(tmp_path: Path, base_args) -> None:
    doc = _write(tmp_path, {"a": {"class_name": "skill", "synonyms": [], "title": "A"}})
    assert cli.main(["check", "json", "--input", str(doc), *base_args]) == 0


def test_check_reports_failure_with_exit_status(tmp_path: Path, base_args) -> None:
    doc = _write(tmp_path, {"a/b": {"class_name": "skill", "synonyms": [], "title": "B"}})
    assert cli.main(["check", "json", "--input", str(doc), *base_args]) == 1


def test_store_into_memory_backend(tmp_path: Path, base_args) -> None:
    doc = _write(tmp_path, {"a": {"class_name": "skill", "synonyms": [], "title": "A"}})
    assert cli.main(["store", "json", "--input", str(doc), *base_args]) == 0


def test_load_writes_document_to_stdout(base_args, capsys) -> None:
    assert cli.main(["load", "json", *base_args]) == 0
    assert capsys.readouterr().out == "{}\n"


def test_format_is_required_to_be_known(base_args) -> None:
    with pytest.raises(SystemExit):
        cli.main(["load", "yaml", *base_args])


def test_missing_input_file_fails_with_exit_status(tmp_path: Path, base_args) -> None:
    assert cli.main(["check", "json", "--input", str(tmp_path / "absent.json"), *base_args]) == 1


def test_invalid_config_value_fails_with_exit_status(tmp_path: Path, base_args) -> None:
    (tmp_path / "store.yaml").write_text("port: 0\n", encoding="utf-8")
    assert cli.main(["load", "json", *base_args]) == 1


def test_log_context_is_reset_after_command(base_args) -> None:
    assert cli.main(["load", "json", "--collection", "taxa", *base_args]) == 0
    assert (cv_command.get(), cv_collection.get()) == ("-", "-")
