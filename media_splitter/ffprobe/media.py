"""High-level media property extraction

Responsibilities:
- Read the container duration of a media file
- Fall back to stream durations when the container has none
- Convert the duration to whole milliseconds for segmentation
"""

import logging
from pathlib import Path
from typing import Union

from .exec import ffprobe_query, get_format_duration, MetadataError

logger = logging.getLogger(__name__)

def _longest_stream_duration(path: Path) -> float:
    durations = []
    for stream in ffprobe_query(path).get("streams", []):
        try:
            durations.append(float(stream.get("duration", "nan")))
        except (TypeError, ValueError):
            continue
    durations = [d for d in durations if d > 0]
    if not durations:
        raise MetadataError("No stream carries a valid duration", "duration")
    return max(durations)

def get_duration(path: Path) -> float:
    """Get media duration in seconds, from the container or the longest stream."""
    try:
        duration = get_format_duration(path)
        if duration > 0:
            return duration
        raise MetadataError("Invalid format duration", "duration")
    except MetadataError as e:
        logger.debug("Container duration unavailable for %s: %s", path, e)

    try:
        return _longest_stream_duration(path)
    except MetadataError as e:
        raise MetadataError(f"No valid duration found for {path}: {str(e)}", "duration") from e

def get_media_duration_ms(path: Union[str, Path]) -> int:
    """
    Get media duration in whole milliseconds.

    Args:
        path: Path to media file.

    Returns:
        Duration in milliseconds, truncated.

    Raises:
        MetadataError: If the source cannot be probed or has no duration.
    """
    duration = get_duration(Path(path))
    duration_ms = int(duration * 1000)
    logger.debug("Media duration for %s: %d ms", path, duration_ms)
    return duration_ms
