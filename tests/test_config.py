import json

from chapter_splitter import config
from chapter_splitter.models import SplitterSettings


def test_defaults_when_no_file(isolated_config):
    assert not isolated_config.exists()
    assert config.find_config_file() is None
    assert config.load_config() == SplitterSettings()


def test_load_from_env_path(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"depth": 2, "complete": True, "unknown": 1}), encoding="utf-8")

    settings = config.load_config()
    assert settings.depth == 2
    assert settings.complete is True
    assert settings.chapters_dir == "chapters"


def test_invalid_json_falls_back_to_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("{not json", encoding="utf-8")

    assert config.load_config() == SplitterSettings()


def test_invalid_values_fall_back_to_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"depth": 0}), encoding="utf-8")

    assert config.load_config().depth == 1


def test_set_config_value_saves(isolated_config):
    result = config.set_config_value("depth", "3")

    assert result["ok"]
    assert result["path"] == isolated_config.resolve()
    assert json.loads(isolated_config.read_text(encoding="utf-8"))["depth"] == 3
    assert config.load_config().depth == 3


def test_set_config_value_rejects_unknown_key_and_bad_value():
    assert not config.set_config_value("colour", "blue")["ok"]
    assert not config.set_config_value("depth", "zero")["ok"]


def test_config_file_found_in_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("CHAPTER_SPLITTER_CONFIG", raising=False)
    (tmp_path / config.CONFIG_FILENAME).write_text(json.dumps({"chapters_dir": "parts"}), encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert config.find_config_file() == (tmp_path / config.CONFIG_FILENAME).resolve()
    assert config.load_config().chapters_dir == "parts"
