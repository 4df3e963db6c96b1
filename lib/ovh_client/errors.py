from __future__ import annotations


class OvhClientError(Exception):
    """Base client error."""


class ConfigError(OvhClientError, ValueError):
    """Credentials or endpoint could not be resolved."""


class UnknownEndpointError(ConfigError):
    def __init__(self, endpoint: str):
        super().__init__(
            f"Unknown endpoint '{endpoint}'. Consider checking the ENDPOINTS list or using an URL."
        )
        self.endpoint = endpoint


class MissingApplicationKeyError(ConfigError):
    def __init__(self) -> None:
        super().__init__(
            "Missing application key. Please check your configuration or consult the documentation to create one."
        )


class MissingApplicationSecretError(ConfigError):
    def __init__(self) -> None:
        super().__init__(
            "Missing application secret. Please check your configuration or consult the documentation to create one."
        )


class NetworkError(OvhClientError):
    """Transport/network layer error."""


class ApiError(OvhClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class ResourceNotFoundError(ApiError):
    """The requested resource does not exist."""
