"""Segment selection over the media timeline

Responsibilities:
  - Resolve the selection window (length and position) from the job
    parameters and the media duration
  - Resolve overlap, minimum and fixed segment durations to milliseconds
  - Delegate the actual partitioning to the split policy

Every function here is pure: the same media duration and parameters always
yield the same window and segments.
"""

import logging
from typing import List, NamedTuple, Optional

from .duration import DurationPosition
from .parameters import SplitterParameters
from .split_policy import Segment, SplitPolicy

logger = logging.getLogger(__name__)


class Window(NamedTuple):
    """Part of the media timeline to split, in milliseconds."""
    duration: int
    start_offset: int
    overlap: Optional[int] = None


def resolve_window(media_duration: int, parameters: SplitterParameters) -> Window:
    """
    Resolve the part of the media to split.

    The window defaults to the whole media. ``duration`` and ``max_duration``
    can only shrink it. With an end anchor the window is aligned on the end of
    the media, so ``start_offset + duration`` never exceeds ``media_duration``.

    Args:
        media_duration: Full media duration in milliseconds.
        parameters: Job parameters.

    Returns:
        The window length, its start offset and the resolved overlap.
    """
    if parameters.duration is not None:
        window = min(parameters.duration.to_millis(media_duration), media_duration)
    else:
        window = media_duration

    if parameters.max_duration is not None:
        window = min(parameters.max_duration.to_millis(media_duration), window)

    overlap = None
    if parameters.overlap is not None:
        overlap = parameters.overlap.to_millis(media_duration)

    if parameters.duration_position is DurationPosition.END:
        start_offset = media_duration - window
    else:
        start_offset = 0

    if parameters.entry_point is not None:
        logger.debug("entry_point (%s) is reserved and does not affect the window", parameters.entry_point)

    return Window(window, start_offset, overlap)


def build_split_policy(media_duration: int, parameters: SplitterParameters) -> SplitPolicy:
    """Create the split policy for a job, resolving its durations to milliseconds."""
    min_segment_duration = None
    if parameters.min_segment_duration is not None:
        min_segment_duration = parameters.min_segment_duration.to_millis(media_duration)
    segment_duration = None
    if parameters.segment_duration is not None:
        segment_duration = parameters.segment_duration.to_millis(media_duration)
    return SplitPolicy(parameters.number_of_segments, min_segment_duration, segment_duration)


def select_segments(media_duration: int, parameters: SplitterParameters) -> List[Segment]:
    """
    Compute the segments of a media for the given job parameters.

    Args:
        media_duration: Full media duration in milliseconds.
        parameters: Job parameters.

    Returns:
        Segments in chronological order, in media timeline coordinates.
    """
    window = resolve_window(media_duration, parameters)
    logger.debug(
        "Selected window: %d ms starting at %d ms (media duration %d ms)",
        window.duration, window.start_offset, media_duration
    )
    policy = build_split_policy(media_duration, parameters)
    return policy.split(window.duration, window.start_offset, window.overlap)
