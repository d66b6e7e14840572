import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into a ``logging`` level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    name = name.strip().upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValueError(f"Unsupported log level: {name}")
    return getattr(logging, name)


LOG_LEVEL = get_log_level(os.getenv("KANASCRIPT_LOG_LEVEL", "WARNING"))
