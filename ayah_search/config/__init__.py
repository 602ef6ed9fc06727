"""Configuration management for ayah search."""

from .settings import LafazWeights, MaknaWeights, Settings, get_settings

__all__ = ["LafazWeights", "MaknaWeights", "Settings", "get_settings"]
