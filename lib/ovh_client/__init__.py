from .client import OvhClient
from .config_types import ClientConfig
from .endpoints import ENDPOINTS
from .errors import (
    ApiError,
    AuthError,
    ConfigError,
    MissingApplicationKeyError,
    MissingApplicationSecretError,
    NetworkError,
    ResourceNotFoundError,
    UnknownEndpointError,
)
from .resolve import ConfigResolver, resolve_config

__all__ = [
    "OvhClient",
    "ClientConfig",
    "ConfigResolver",
    "resolve_config",
    "ENDPOINTS",
    "ApiError",
    "AuthError",
    "ConfigError",
    "MissingApplicationKeyError",
    "MissingApplicationSecretError",
    "NetworkError",
    "ResourceNotFoundError",
    "UnknownEndpointError",
]
