"""测试配置加载"""

from pathlib import Path

import pytest

from bytesz.config import DEFAULT_CONFIG_TOML, Config, load_config, write_default_config


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """把 HOME 指向临时目录，并清除环境变量"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.delenv("BYTESZ_CONFIG", raising=False)
    return home


def test_default_config(isolated_home):
    """没有任何配置文件时使用内置默认值"""
    assert load_config() == Config()


def test_explicit_path(tmp_path, isolated_home):
    config_file = tmp_path / "bytesz.toml"
    config_file.write_text('[output]\njson = true\n[logging]\nlevel = "debug"\n', encoding="utf-8")
    cfg = load_config(config_file)
    assert cfg.json is True
    assert cfg.color is True
    assert cfg.log_level == "DEBUG"


def test_explicit_path_missing(tmp_path, isolated_home):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_env_variable(tmp_path, isolated_home, monkeypatch):
    config_file = tmp_path / "env.toml"
    config_file.write_text("[output]\ncolor = false\n", encoding="utf-8")
    monkeypatch.setenv("BYTESZ_CONFIG", str(config_file))
    assert load_config().color is False


def test_home_config(isolated_home):
    config_file = isolated_home / ".config" / "bytesz" / "config.toml"
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[logging]\nfile = "/tmp/bytesz.log"\n', encoding="utf-8")
    assert load_config().log_file == "/tmp/bytesz.log"


def test_wrong_types_fall_back(tmp_path, isolated_home):
    """类型错误或未知级别时回退为默认值"""
    config_file = tmp_path / "bad.toml"
    config_file.write_text('[output]\njson = "yes"\n[logging]\nlevel = "LOUD"\nfile = 3\n', encoding="utf-8")
    assert load_config(config_file) == Config()


def test_write_default_config(tmp_path):
    target = tmp_path / "nested" / "config.toml"
    written = write_default_config(target)
    assert written == target.resolve()
    assert written.read_text(encoding="utf-8") == DEFAULT_CONFIG_TOML
    assert load_config(written) == Config()


def test_sections_not_tables(tmp_path, isolated_home):
    """节不是表时整体回退为默认值"""
    config_file = tmp_path / "flat.toml"
    config_file.write_text('output = 5\nlogging = "x"\n', encoding="utf-8")
    assert load_config(config_file) == Config()
