"""Configuration module for the directory object client."""
from .settings import GraphConfig, load_settings

__all__ = ["GraphConfig", "load_settings"]
