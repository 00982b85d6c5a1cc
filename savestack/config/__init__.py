"""Engine defaults and their loaders.

Defaults are stored in ``engine.json`` so they can be changed without code
changes and validated by ``scripts/validate_config.py``.
"""

from .defaults import load_config, get_engine_settings, get_config_value
from .engine import EngineConfig, get_engine_config

__all__ = [
    'EngineConfig',
    'get_config_value',
    'get_engine_config',
    'get_engine_settings',
    'load_config',
]
