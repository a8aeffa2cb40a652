"""Low-level ffprobe command execution utilities

Responsibilities:
- Execute ffprobe queries and parse their output
- Handle command failures and parsing errors
- Define the metadata exception type
"""

import subprocess
import logging
from pathlib import Path
from typing import Dict, Any

import ffmpeg

from ..config import FFPROBE_BIN
from ..utils import run_cmd

logger = logging.getLogger(__name__)

class MetadataError(Exception):
    """Raised when metadata cannot be retrieved or parsed"""
    def __init__(self, message: str, property_name: str = None):
        self.property_name = property_name
        super().__init__(f"Metadata error: {message}")

def ffprobe_query(path: Path) -> Dict[str, Any]:
    """
    Probe a media file for its format and stream information.

    Args:
        path: Path to media file.

    Returns:
        Parsed ffprobe JSON as a dictionary, with "format" and "streams" keys.

    Raises:
        MetadataError if ffprobe fails or its output cannot be parsed.
    """
    try:
        return ffmpeg.probe(str(path), cmd=FFPROBE_BIN)
    except ffmpeg.Error as e:
        stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else str(e)
        raise MetadataError(f"Failed to query ffprobe: {stderr}") from e
    except (OSError, ValueError) as e:
        raise MetadataError(f"Failed to query ffprobe: {str(e)}") from e

def get_format_duration(path: Path) -> float:
    """
    Get the container duration of a media file, in seconds.

    Raises:
        MetadataError: If the duration cannot be retrieved or parsed
    """
    cmd = [
        FFPROBE_BIN, "-v", "error",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        str(path)
    ]
    try:
        result = run_cmd(cmd)
    except (subprocess.CalledProcessError, OSError) as e:
        raise MetadataError(f"Could not get duration: {str(e)}", "duration") from e

    value = result.stdout.strip()
    if not value or value.lower() in ["n/a", "nan"]:
        raise MetadataError("No valid value found for duration", "duration")

    try:
        return float(value)
    except ValueError as e:
        raise MetadataError(f"Could not convert {value} to required type", "duration") from e
