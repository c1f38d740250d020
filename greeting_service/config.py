"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .errors import ConfigurationError, ConfigurationMissing
from .properties import PropertiesSettingsSource

DEFAULT_PROPERTIES_FILE = Path("application.properties")


class Settings(BaseSettings):
    """
    Settings for the greeting service.

    Values come from, highest priority first: keyword arguments, environment
    variables, ``.env``, the properties file, then the defaults below.
    Property keys use dots (``greeting.text``), environment variables use
    the upper-cased field name (``GREETING_TEXT``).

    The properties file is chosen with the ``properties_file`` keyword only;
    it is not a field, so no other source can point it elsewhere.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Greeting
    greeting_text: str

    # Service
    service_name: str = "greeting-service"
    service_version: str = "1.0.0"

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    log_level: str = "info"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        init_kwargs = getattr(init_settings, "init_kwargs", {})
        properties_file = init_kwargs.get("properties_file", DEFAULT_PROPERTIES_FILE)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            PropertiesSettingsSource(settings_cls, properties_file),
            file_secret_settings,
        )


def field_to_property_key(field_name: str) -> str:
    return field_name.replace("_", ".")


def load_settings(properties_file: Path | str | None = None, **overrides) -> Settings:
    """
    Load settings once at startup.

    Args:
        properties_file: Properties file to read (defaults to ``application.properties``)
        **overrides: Explicit field values, taking precedence over every source

    Raises:
        ConfigurationMissing: A required key such as ``greeting.text`` is absent
        ConfigurationError: Any other invalid setting, or an unreadable properties file
    """

    if properties_file is not None:
        overrides["properties_file"] = Path(properties_file)

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        for error in exc.errors():
            if error["type"] == "missing":
                raise ConfigurationMissing(field_to_property_key(str(error["loc"][0]))) from exc
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
