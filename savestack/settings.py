"""Runtime settings for the savestack engine and CLI.

Paths and the log level can be overridden through environment variables so
the CLI and tests can point the plan store at a scratch directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Base project root - assumes this file is in savestack/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DATA_DIR = Path(os.getenv("SAVESTACK_DATA_DIR", _PROJECT_ROOT / "data"))

# JSON file backing the reference plan store
PLANS_PATH = Path(
    os.getenv("SAVESTACK_PLANS_PATH", DATA_DIR / "plans.json")
).resolve()

# Alternate engine defaults file (falls back to the packaged engine.json)
_config_override = os.getenv("SAVESTACK_CONFIG_PATH")
CONFIG_PATH: Optional[Path] = Path(_config_override).resolve() if _config_override else None

LOG_LEVEL = os.getenv("SAVESTACK_LOG_LEVEL", "WARNING").upper()

