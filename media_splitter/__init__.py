"""
media_splitter - Split a media timeline into segments

This package provides a worker core that:
- Resolves a selection window (duration, max duration, start/end anchor)
  over the full media duration
- Splits that window into a requested number of segments
- Enforces a minimum segment duration and optional overlap
- Probes the source media duration with ffprobe
- Builds a job result holding the segment list

All segment boundaries are integer milliseconds. Consecutive segments share
their boundary: a segment ends where the next one starts.
"""

__version__ = "0.1.0"
