"""Environment configuration management for the INP analyzer.

Loads environment variables from .env files, local overrides winning.

File Priority (highest to lowest):
1. .env.local (local overrides, gitignored)
2. .env (base configuration)
3. Variables already set in the process environment
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Loaded in this order, so later files override earlier ones
ENV_FILES = (".env", ".env.local")

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """Load environment variables from the .env files in ``env_dir``.

    Args:
        env_dir: Directory containing .env files. Defaults to current directory.

    Returns:
        Names of the files that were loaded
    """
    env_dir = Path.cwd() if env_dir is None else Path(env_dir)

    loaded_files = []
    for name in ENV_FILES:
        env_file = env_dir / name
        if env_file.exists():
            load_dotenv(env_file, override=True)
            loaded_files.append(name)

    if loaded_files:
        logger.debug(f"Environment loaded from {env_dir}: {', '.join(loaded_files)}")
    return loaded_files


def get_env_bool(key: str, default: bool = False) -> bool:
    """Boolean flag from the environment; unrecognized values give ``default``."""
    value = os.getenv(key, "").strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def get_env_float(key: str, default: float = 0.0) -> float:
    """Get float environment variable."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid float value {raw!r} for {key}, using default: {default}")
        return default


def get_env_path(key: str, default: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Get a filesystem path from the environment, or the default."""
    value = os.getenv(key, "").strip()
    if value:
        return Path(value).expanduser()
    return Path(default) if default is not None else None
