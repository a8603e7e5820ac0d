import pytest

from densepack.config_loader import CONFIG_ENV_VAR, load_config


def test_default_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()
    assert config["harness"]["preview_length"] == 60
    assert config["harness"]["random_sizes"] == [50, 100, 500, 1000]
    assert config["server"]["port"] == 5000


def test_env_override(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("server:\n  port: 8080\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config() == {"server": {"port": 8080}}


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
    path = tmp_path / "explicit.yaml"
    path.write_text("harness:\n  seed: 5\n")
    assert load_config(str(path))["harness"]["seed"] == 5


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))
