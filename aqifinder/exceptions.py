# file: aqifinder/exceptions.py


class ConfigurationError(ValueError):
    """Raised when a required setting is missing."""


class WAQIError(Exception):
    """Base class for failures talking to the WAQI API."""


class WAQIRequestError(WAQIError):
    """The request did not complete or came back with a non-2xx status."""


class WAQIResponseError(WAQIError):
    """WAQI answered, but the payload is unusable (status != "ok", no AQI)."""
