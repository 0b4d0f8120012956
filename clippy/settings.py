"""
Clippy Settings

This module contains global constants and configuration settings for Clippy.

Key features:
- Default per-call parameters for the string transforms (truncation suffix,
  token delimiter).
- Logging and terminal settings used by the command-line interface.

@dependencies
- `python-dotenv` for loading a local `.env` file.

@notes
- The transform defaults are plain constants. Only the CLI-facing settings
  (log level, colors) read the environment, so transform output never depends
  on it.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Transform Defaults
DEFAULT_TRUNCATE_SUFFIX: str = "..."
DEFAULT_TOKEN_DELIMITER: str = ","

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

# UI/UX
USE_ANSI_COLORS: bool = os.getenv("NO_COLOR") is None and os.getenv("TERM") != "dumb"
