"""Configuration layer."""

from .settings import (
    APIConfig,
    ConfigManager,
    EndpointConfig,
    StatusCodeConfig,
    TikTokConfig,
    get_config,
    load_config,
)

__all__ = [
    "APIConfig",
    "ConfigManager",
    "EndpointConfig",
    "StatusCodeConfig",
    "TikTokConfig",
    "get_config",
    "load_config",
]
