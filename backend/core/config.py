import logging
import os
import sys

from core.environment import load_environment, get_env_bool, get_env_float, get_env_path

load_environment()

DEBUG = get_env_bool("DEBUG", False)
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# eQuest writes single-byte text
INP_FILE_ENCODING = os.getenv("INP_FILE_ENCODING", "latin-1")

# Directory holding the reference CSV tables used by baseline analysis
LOOKUP_DATA_DIR = get_env_path("LOOKUP_DATA_DIR")

# Design rates applied when the caller does not supply them
DEFAULT_COOLING_SQFT_PER_TON = get_env_float("DEFAULT_COOLING_SQFT_PER_TON", 400.0)
DEFAULT_HEATING_BTU_PER_SQFT = get_env_float("DEFAULT_HEATING_BTU_PER_SQFT", 30.0)


def setup_logging(level: str = None):
    """Configure application logging"""
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )

    logger = logging.getLogger('inp_analyzer')
    logger.setLevel(log_level)
    return logger
