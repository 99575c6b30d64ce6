from .rng import RngManager
from .settings import RuntimeSettings, get_settings

__all__ = ["RngManager", "RuntimeSettings", "get_settings"]
