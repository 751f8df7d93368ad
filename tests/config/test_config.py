import os

import pytest

from errormap import ConfigurationError, MapperConfig, get_config, set_config, to_multiline_message


@pytest.fixture(autouse=True)
def restore_config():
    previous = get_config()
    yield
    set_config(previous)


def test_default_separator_is_newline():
    assert MapperConfig().separator == "\n"


def test_os_linesep_opt_in():
    config = MapperConfig(use_os_linesep=True)
    assert config.separator == os.linesep


def test_from_env_reads_separator_and_flag(monkeypatch):
    monkeypatch.setenv("ERRORMAP_LINE_SEPARATOR", "\\r\\n")
    monkeypatch.setenv("ERRORMAP_USE_OS_LINESEP", "no")
    config = MapperConfig.from_env()
    assert config.line_separator == "\r\n"
    assert config.use_os_linesep is False
    assert config.source == "ERRORMAP_"


def test_from_env_custom_prefix_and_override(monkeypatch):
    monkeypatch.setenv("FORMS_LINE_SEPARATOR", " / ")
    config = MapperConfig.from_env("FORMS_", use_os_linesep=True)
    assert config.line_separator == " / "
    assert config.use_os_linesep is True


def test_from_env_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("ERRORMAP_LINE_SEPARATOR", raising=False)
    monkeypatch.delenv("ERRORMAP_USE_OS_LINESEP", raising=False)
    assert MapperConfig.from_env().separator == "\n"


def test_invalid_boolean_raises(monkeypatch):
    monkeypatch.setenv("ERRORMAP_USE_OS_LINESEP", "maybe")
    with pytest.raises(ConfigurationError):
        MapperConfig.from_env()


def test_active_config_drives_multiline_message():
    previous = set_config(MapperConfig(line_separator="; "))
    assert isinstance(previous, MapperConfig)
    assert to_multiline_message({"a": ["one", "two"], "b": ["three"]}) == "one; two; three"
    assert to_multiline_message({"a": ["one", "two"]}, separator="\n") == "one\ntwo"


def test_from_env_decodes_escapes_inside_value(monkeypatch):
    monkeypatch.setenv("ERRORMAP_LINE_SEPARATOR", " -\\n\\n")
    assert MapperConfig.from_env().line_separator == " -\n\n"
