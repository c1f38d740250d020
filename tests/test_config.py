"""Tests for settings loading and startup configuration errors."""

import pytest
from pydantic import ValidationError

from greeting_service import ConfigurationError, ConfigurationMissing, load_settings


def write_properties(directory, text, name="application.properties"):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_greeting_from_default_properties_file(isolated_environment):
    write_properties(isolated_environment, "greeting.text=Hello\n")

    settings = load_settings()

    assert settings.greeting_text == "Hello"


def test_greeting_from_explicit_properties_file(isolated_environment):
    path = write_properties(isolated_environment, "greeting.text = Hi\nserver.port: 9090\n", name="custom.properties")

    settings = load_settings(path)

    assert settings.greeting_text == "Hi"
    assert settings.server_port == 9090


def test_defaults_apply_when_only_greeting_is_set(isolated_environment):
    write_properties(isolated_environment, "greeting.text=Hello\n")

    settings = load_settings()

    assert settings.service_name == "greeting-service"
    assert settings.server_host == "0.0.0.0"
    assert settings.server_port == 8080
    assert settings.log_level == "info"


def test_environment_overrides_properties(isolated_environment, monkeypatch):
    write_properties(isolated_environment, "greeting.text=Hello\n")
    monkeypatch.setenv("GREETING_TEXT", "Ahoy")

    assert load_settings().greeting_text == "Ahoy"


def test_dotenv_overrides_properties(isolated_environment):
    write_properties(isolated_environment, "greeting.text=Hello\n")
    (isolated_environment / ".env").write_text("GREETING_TEXT=Salut\n", encoding="utf-8")

    assert load_settings().greeting_text == "Salut"


def test_explicit_override_beats_environment(isolated_environment, monkeypatch):
    monkeypatch.setenv("GREETING_TEXT", "Ahoy")

    assert load_settings(greeting_text="Hey").greeting_text == "Hey"


def test_unknown_properties_are_ignored(isolated_environment):
    write_properties(isolated_environment, "greeting.text=Hello\nspring.application.name=demo\n")

    assert load_settings().greeting_text == "Hello"


def test_missing_greeting_is_fatal(isolated_environment):
    """No greeting anywhere raises ConfigurationMissing naming the property key."""
    with pytest.raises(ConfigurationMissing) as exc_info:
        load_settings()

    assert exc_info.value.key == "greeting.text"
    assert "greeting.text" in str(exc_info.value)


def test_missing_greeting_when_file_lacks_key(isolated_environment):
    write_properties(isolated_environment, "server.port=8081\n")

    with pytest.raises(ConfigurationMissing):
        load_settings()


def test_invalid_value_is_configuration_error(isolated_environment):
    write_properties(isolated_environment, "greeting.text=Hello\nserver.port=eighty\n")

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert not isinstance(exc_info.value, ConfigurationMissing)


def test_settings_are_immutable(isolated_environment):
    settings = load_settings(greeting_text="Hello")

    with pytest.raises(ValidationError):
        settings.greeting_text = "Changed"


def test_properties_file_location_ignores_environment(isolated_environment, monkeypatch):
    """Only an explicit argument selects the properties file."""
    write_properties(isolated_environment, "greeting.text=Hi\n")
    write_properties(isolated_environment, "greeting.text=Ahoy\n", name="other.properties")
    monkeypatch.setenv("PROPERTIES_FILE", "other.properties")
    (isolated_environment / ".env").write_text("PROPERTIES_FILE=other.properties\n", encoding="utf-8")

    settings = load_settings()

    assert settings.greeting_text == "Hi"
    assert "properties_file" not in settings.model_dump()
    assert load_settings("other.properties").greeting_text == "Ahoy"


def test_empty_greeting_is_accepted(isolated_environment):
    write_properties(isolated_environment, "greeting.text=\n")

    assert load_settings().greeting_text == ""


def test_malformed_escape_is_configuration_error(isolated_environment):
    write_properties(isolated_environment, "greeting.text=Hi\\uZZZZ\n")

    with pytest.raises(ConfigurationError, match="application.properties"):
        load_settings()


def test_undecodable_file_is_configuration_error(isolated_environment):
    (isolated_environment / "application.properties").write_bytes(b"greeting.text=Gr\xfc\xdf\n")

    with pytest.raises(ConfigurationError):
        load_settings()
