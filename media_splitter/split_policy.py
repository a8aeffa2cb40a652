"""Split policy: partition a duration into segments

Responsibilities:
  - Resolve the effective number of segments from the requested count or
    the fixed segment duration, the minimum segment duration and the
    window length
  - Emit consecutive segments, each claiming a fair share of what remains
    or a fixed length when splitting by segment duration
  - Apply overlap between consecutive segments
  - Offset every segment into the original media timeline

Segments follow a half-open convention: without overlap, a segment's end is
the next segment's start. All arithmetic is on integer milliseconds.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A [start, end) range of the media timeline, in milliseconds."""
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    def to_dict(self) -> Dict[str, int]:
        return {"start": self.start, "end": self.end}


@dataclass
class SplitPolicy:
    """
    How a window is split into segments.

    Attributes:
        number_of_segments: Requested number of segments. Zero is treated as one.
        min_segment_duration: Optional lower bound (ms) on segment length. It
            takes precedence over ``number_of_segments``.
        segment_duration: Optional fixed segment length (ms). When set, it
            replaces ``number_of_segments``: the window is cut into segments of
            this length and the last one is clamped to the window end. Zero
            means one segment covering the whole window.
    """
    number_of_segments: int = 1
    min_segment_duration: Optional[int] = None
    segment_duration: Optional[int] = None

    def fixed_segment_length(self, total_duration: int) -> Optional[int]:
        """Length (ms) of every segment when splitting by duration, else None."""
        if self.segment_duration is None:
            return None
        length = self.segment_duration or total_duration
        if self.min_segment_duration:
            length = max(length, self.min_segment_duration)
        return length

    def effective_segment_count(self, total_duration: int) -> int:
        """
        Number of segments actually produced for a window.

        Args:
            total_duration: Window length in milliseconds.

        Returns:
            Segment count, never larger than the window length in ms.
        """
        if total_duration <= 0:
            return 0

        fixed_length = self.fixed_segment_length(total_duration)
        if fixed_length is not None:
            # ceil(total / length), the last segment may be shorter
            return min(-(-total_duration // fixed_length), total_duration)

        count = max(self.number_of_segments, 1)
        if self.min_segment_duration:
            count = min(count, total_duration // self.min_segment_duration)
            if count == 0:
                # Window shorter than one minimum segment: keep it whole
                logger.debug(
                    "Window of %d ms is shorter than the minimum segment duration (%d ms)",
                    total_duration, self.min_segment_duration
                )
                count = 1

        return min(count, total_duration)

    def split(
        self,
        total_duration: int,
        start_offset: int = 0,
        overlap: Optional[int] = None
    ) -> List[Segment]:
        """
        Split a window into segments.

        Args:
            total_duration: Window length in milliseconds.
            start_offset: Position of the window in the media, in milliseconds.
            overlap: Milliseconds each segment starts before the previous end.

        Returns:
            Segments in chronological order, in media timeline coordinates.
        """
        number_of_segments = self.effective_segment_count(total_duration)
        fixed_length = self.fixed_segment_length(total_duration)
        overlap = overlap or 0
        logger.debug(
            "Splitting %d ms (offset %d ms) into %d segments, overlap %d ms",
            total_duration, start_offset, number_of_segments, overlap
        )

        segments = []
        next_start = 0
        next_end = 0

        for index in range(number_of_segments):
            remaining = total_duration - next_end
            remaining_segments = number_of_segments - index
            if fixed_length is not None:
                segment_length = fixed_length
            elif remaining == remaining_segments:
                segment_length = 1
            else:
                segment_length = remaining // remaining_segments

            next_end = min(next_end + segment_length, total_duration)
            segments.append(Segment(next_start + start_offset, next_end + start_offset))

            if next_end == total_duration:
                break
            next_start = max(next_end - overlap, 0)

        return segments
