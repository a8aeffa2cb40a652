"""Configuration settings for the media splitter worker

This module centralizes:
- Log directory and log level
- The ffprobe executable used to read media durations
- Job parameter defaults

User-configurable settings are read from environment variables; the rest
are constants shared by the job layer.
"""

import os
from pathlib import Path

# LOG_DIR: user definable with default of "$HOME/media_splitter_logs"
LOG_DIR = Path(os.environ.get("MEDIA_SPLITTER_LOG_DIR", str(Path.home() / "media_splitter_logs")))

# Logging configuration
LOG_LEVEL = os.environ.get("MEDIA_SPLITTER_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL

# ffprobe binary, overridable for non-standard installs
FFPROBE_BIN = os.environ.get("MEDIA_SPLITTER_FFPROBE", "ffprobe")

# Job parameter defaults
OUTPUT_PARAMETER_NAME = "segments"
DEFAULT_NUMBER_OF_SEGMENTS = 1
