"""Infrastructure modules for chromepdf."""

from . import config_store

__all__ = ["config_store"]
