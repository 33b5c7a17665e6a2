"""Error kinds raised while producing the widget report."""


class WeatherbarError(Exception):
    """Base class for failures that abort a run."""

    prefix = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def diagnostic(self) -> str:
        return f"{self.prefix}: {self.message}"


class ConfigError(WeatherbarError):
    prefix = "Error loading config"


class FetchError(WeatherbarError):
    """Raised when the weather service cannot be reached or returns an error status."""

    prefix = "Error fetching weather data"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherbarError):
    """Raised when the response body is not a valid weather report."""

    prefix = "Error decoding weather data"


class EncodeError(WeatherbarError):
    prefix = "Error marshaling output"
