"""Error types raised by the greeting service."""


class GreetingServiceError(Exception):
    """Base class for greeting service errors."""


class ConfigurationError(GreetingServiceError):
    """Settings could not be loaded. Fatal at startup."""


class ConfigurationMissing(ConfigurationError):
    """A required configuration key is absent."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required configuration key '{key}' is not set")


class MissingParameter(GreetingServiceError):
    """A required request parameter was not supplied by the caller."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Required request parameter '{parameter}' is not present")
