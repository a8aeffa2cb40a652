"""FFProbe utilities for media duration lookup

This package provides utilities for:
- Executing ffprobe queries and parsing results
- Extracting the media duration with fallbacks
"""

from .exec import MetadataError, ffprobe_query, get_format_duration
from .media import get_duration, get_media_duration_ms

__all__ = [
    'MetadataError',
    'ffprobe_query',
    'get_format_duration',
    'get_duration',
    'get_media_duration_ms',
]
