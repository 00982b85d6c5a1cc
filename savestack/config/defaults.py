"""Read the JSON files that hold engine defaults.

Named files live beside this module (``engine`` -> ``engine.json``).
``SAVESTACK_CONFIG_PATH`` swaps in a different engine file without touching
the packaged one.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .. import settings

CONFIG_DIR = Path(__file__).parent
ENGINE_CONFIG = 'engine'


def _config_path(config_name: str) -> Path:
    if config_name == ENGINE_CONFIG and settings.CONFIG_PATH is not None:
        return settings.CONFIG_PATH
    return CONFIG_DIR / f"{config_name}.json"


def load_config(config_name: str, path: Optional[Path] = None) -> Dict[str, Any]:
    """Parse the defaults file ``config_name`` (or an explicit ``path``).

    The engine file honours the ``SAVESTACK_CONFIG_PATH`` override; an
    explicit ``path`` wins over both.

    Raises:
        FileNotFoundError: no file at the resolved location
        json.JSONDecodeError: the file is not valid JSON

    Example:
        >>> load_config('engine')['cadence']['weeks_per_month']
        4.345
    """
    source = Path(path) if path is not None else _config_path(config_name)
    try:
        text = source.read_text(encoding='utf-8')
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"No {config_name} defaults at {source}") from exc
    return json.loads(text)


def get_engine_settings() -> Dict[str, Any]:
    """Raw engine defaults: splits, limits, divisors and projection rates."""
    return load_config(ENGINE_CONFIG)


def get_config_value(config_name: str, *keys: str, default: Any = None) -> Any:
    """Walk ``keys`` into a defaults file, returning ``default`` on any miss.

    Example:
        >>> get_config_value('engine', 'tips', 'trim_category')
        'eating_out'
    """
    try:
        node: Any = load_config(config_name)
    except FileNotFoundError:
        return default
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node
