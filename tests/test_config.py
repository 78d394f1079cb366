"""Tests for configuration functionality."""

from datetime import datetime
from pathlib import Path

import pytest
import tomli

from prtitlecheck.config import Config, DEFAULT_CONFIG_FILENAME, parse_bool, parse_max_length
from prtitlecheck.exceptions import ConfigError


def test_default_config():
    """Test default configuration values."""
    config = Config()
    assert config.strict is True
    assert config.max_description_length == 50
    assert config.always_log is False
    assert config.log_file is None


@pytest.mark.parametrize("value, expected", [
    ("true", True),
    ("TRUE", True),
    ("1", True),
    ("false", False),
    ("False", False),
    ("off", False),
])
def test_parse_bool(value, expected):
    assert parse_bool("STRICT", value) is expected


def test_parse_bool_rejects_other_values():
    with pytest.raises(ConfigError):
        parse_bool("STRICT", "maybe")


@pytest.mark.parametrize("value", ["abc", "0", "-5", "1.5"])
def test_parse_max_length_rejects_bad_values(value):
    with pytest.raises(ConfigError):
        parse_max_length("MAX_LENGTH", value)


def test_parse_max_length():
    assert parse_max_length("MAX_LENGTH", " 72 ") == 72


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PR_TITLE_CHECK_STRICT", "false")
    monkeypatch.setenv("PR_TITLE_CHECK_MAX_LENGTH", "72")
    config = Config()
    assert config.strict is False
    assert config.max_description_length == 72


def test_action_inputs(monkeypatch):
    monkeypatch.setenv("INPUT_STRICT", "false")
    monkeypatch.setenv("INPUT_MAX_LENGTH", "")
    config = Config()
    assert config.strict is False
    assert config.max_description_length == 50


def test_tool_variables_win_over_action_inputs(monkeypatch):
    monkeypatch.setenv("INPUT_STRICT", "false")
    monkeypatch.setenv("PR_TITLE_CHECK_STRICT", "true")
    assert Config().strict is True


def test_keyword_arguments_win_over_environment(monkeypatch):
    monkeypatch.setenv("PR_TITLE_CHECK_MAX_LENGTH", "72")
    assert Config(max_description_length=30).max_description_length == 30


@pytest.mark.parametrize("name, value", [
    ("PR_TITLE_CHECK_MAX_LENGTH", "lots"),
    ("PR_TITLE_CHECK_MAX_LENGTH", "0"),
    ("INPUT_STRICT", "yes please"),
])
def test_invalid_environment_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        Config()


def test_non_positive_max_length_rejected():
    with pytest.raises(ConfigError):
        Config(max_description_length=0)


def test_config_load_nonexistent(tmp_path):
    """Test loading configuration when file doesn't exist."""
    config = Config.load(tmp_path)
    assert config.strict is True


def test_config_load_and_save(tmp_path):
    """Test saving and loading configuration."""
    config = Config(
        strict=False,
        max_description_length=72,
        always_log=True,
        log_file="custom.log",
    )

    config_path = config.save(tmp_path)
    assert config_path == tmp_path / DEFAULT_CONFIG_FILENAME

    with config_path.open("rb") as f:
        assert tomli.load(f)["prtitlecheck"]["max_description_length"] == 72

    loaded_config = Config.load(tmp_path)
    assert loaded_config.strict is False
    assert loaded_config.max_description_length == 72
    assert loaded_config.always_log is True
    assert loaded_config.log_file == "custom.log"


def test_config_load_top_level_table(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("strict = false\n")
    assert Config.load(tmp_path).strict is False


def test_config_file_wins_over_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PR_TITLE_CHECK_MAX_LENGTH", "60")
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("[prtitlecheck]\nmax_description_length = 40\n")
    assert Config.load(tmp_path).max_description_length == 40


def test_overrides_win_over_config_file(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("[prtitlecheck]\nstrict = false\n")
    assert Config.load(tmp_path, strict=True).strict is True


def test_config_load_invalid_toml(tmp_path, capsys):
    """Test loading invalid configuration file."""
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("invalid [ toml")

    config = Config.load(tmp_path)
    assert config.max_description_length == 50
    assert "Warning: Error reading config file" in capsys.readouterr().out


def test_config_load_invalid_value(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("[prtitlecheck]\nmax_description_length = -3\n")
    with pytest.raises(ConfigError):
        Config.load(tmp_path)


@pytest.mark.parametrize("content", [
    'prtitlecheck = "oops"\n',
    "prtitlecheck = [1, 2]\n",
])
def test_config_load_section_not_a_table(tmp_path, content):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(content)
    with pytest.raises(ConfigError):
        Config.load(tmp_path)


@pytest.mark.parametrize("value", ["5", "true", "[\"a.log\"]"])
def test_config_load_log_file_not_a_string(tmp_path, value):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(f"[prtitlecheck]\nlog_file = {value}\n")
    with pytest.raises(ConfigError):
        Config.load(tmp_path)


def test_config_load_ignores_unsafe_log_file(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('[prtitlecheck]\nlog_file = "../outside.log"\n')
    assert Config.load(tmp_path).log_file is None


def test_get_log_file_disabled():
    """Test get_log_file when logging is disabled."""
    config = Config(always_log=False, log_file=None)
    assert config.get_log_file() is None


def test_get_log_file_custom():
    """Test get_log_file with custom log file."""
    config = Config(always_log=False, log_file="custom.log")
    assert config.get_log_file() == Path("custom.log")


def test_get_log_file_unsafe():
    config = Config(log_file="/etc/passwd")
    assert config.get_log_file() is None


def test_get_log_file_always():
    """Test get_log_file with always_log enabled."""
    config = Config(always_log=True)
    log_file = config.get_log_file()

    assert log_file is not None
    assert log_file.name.startswith("ptc_log-")
    assert log_file.suffix == ".log"

    timestamp_str = log_file.stem.split("-", 1)[1]
    try:
        datetime.strptime(timestamp_str, "%Y-%m-%d_%H-%M-%S")
    except ValueError:
        pytest.fail("Invalid timestamp format in log filename")
