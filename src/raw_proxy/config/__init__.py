"""Configuration module for raw-proxy."""

from raw_proxy.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
