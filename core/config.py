# core/config.py
from __future__ import annotations
import os
import logging
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("DEVTOOLS_APP_TITLE", "DevTools Hub")
LOG_LEVEL = os.getenv("DEVTOOLS_LOG_LEVEL", "INFO").upper()

# Slider bounds of the password page
PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 128

_length_str = os.getenv("DEVTOOLS_PASSWORD_LENGTH", "16")
try:
    DEFAULT_PASSWORD_LENGTH = int(_length_str)
except ValueError:
    raise ValueError(f"Invalid DEVTOOLS_PASSWORD_LENGTH '{_length_str}'")
DEFAULT_PASSWORD_LENGTH = min(max(DEFAULT_PASSWORD_LENGTH, PASSWORD_MIN_LENGTH), PASSWORD_MAX_LENGTH)

_batch_str = os.getenv("DEVTOOLS_MAX_BATCH", "50")
try:
    MAX_BATCH = int(_batch_str)
except ValueError:
    raise ValueError(f"Invalid DEVTOOLS_MAX_BATCH '{_batch_str}'")
if MAX_BATCH < 1:
    raise ValueError(f"DEVTOOLS_MAX_BATCH must be >= 1, got {MAX_BATCH}")


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once; Streamlit reruns the script on every interaction."""
    numeric = logging.getLevelName(level or LOG_LEVEL)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
