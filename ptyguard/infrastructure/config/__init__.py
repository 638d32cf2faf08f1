"""Configuration infrastructure - loading and detection."""

from .yaml_loader import YAMLConfigLoader

__all__ = [
    "YAMLConfigLoader",
]
