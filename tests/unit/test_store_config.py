from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config import StoreBackend, StoreConfig, TextFormat, load_store_config


def test_defaults_without_file_or_environment(tmp_path: Path) -> None:
    cfg = load_store_config(tmp_path / "missing.yaml", environ={})
    assert cfg.backend is StoreBackend.MONGO
    assert (cfg.host, cfg.port) == ("localhost", 27017)
    assert cfg.database == "brigade_matchmaker"
    assert cfg.collection == "projecttaxonomies"
    assert cfg.format is TextFormat.TOML
    assert cfg.connection_uri == "mongodb://localhost:27017"


def test_precedence_file_then_environment_then_overrides(tmp_path: Path) -> None:
    path = tmp_path / "store.yaml"
    path.write_text("host: db.internal\nport: 27018\ncollection: fromfile\nformat: json\n", encoding="utf-8")

    cfg = load_store_config(
        path,
        environ={"TAXONOMY_MONGO_HOST": "env-host", "TAXONOMY_COLLECTION": "fromenv"},
        overrides={"collection": "fromcli", "port": None},
    )

    assert cfg.host == "env-host"
    assert cfg.port == 27018
    assert cfg.collection == "fromcli"
    assert cfg.format is TextFormat.JSON


def test_empty_yaml_file_is_allowed(tmp_path: Path) -> None:
    path = tmp_path / "store.yaml"
    path.write_text("", encoding="utf-8")
    assert load_store_config(path, environ={}) == StoreConfig()


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "store.yaml"
    path.write_text("hostname: oops\n", encoding="utf-8")
    with pytest.raises(ValueError, match="hostname"):
        load_store_config(path, environ={})


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "store.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_store_config(path, environ={})


def test_port_must_be_in_range() -> None:
    with pytest.raises(ValidationError):
        StoreConfig(port=70000)


def test_blank_collection_is_rejected() -> None:
    with pytest.raises(ValidationError):
        StoreConfig(collection="   ")


def test_uri_takes_precedence_over_host_and_port() -> None:
    cfg = StoreConfig(uri="mongodb://user:pw@replica/?replicaSet=rs0")
    assert cfg.connection_uri == "mongodb://user:pw@replica/?replicaSet=rs0"


def test_server_and_target_follow_uri_without_credentials() -> None:
    cfg = StoreConfig(uri="mongodb://user:pw@replica:27017/?replicaSet=rs0", collection="taxa")
    assert cfg.server == "replica:27017"
    assert cfg.target == "replica:27017/brigade_matchmaker.taxa"


def test_server_defaults_to_host_and_port() -> None:
    assert StoreConfig(host="db.internal", port=27018).server == "db.internal:27018"
