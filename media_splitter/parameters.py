"""Job parameters for the media splitter worker

Responsibilities:
  - Define the parameter set carried by a split job
  - Validate and convert a job envelope mapping into that parameter set
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .config import DEFAULT_NUMBER_OF_SEGMENTS, OUTPUT_PARAMETER_NAME
from .duration import Duration, DurationPosition, parse_position
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DURATION_FIELDS = (
    "min_segment_duration", "segment_duration", "entry_point", "duration", "max_duration", "overlap"
)


@dataclass
class SplitterParameters:
    """
    Parameters of a split job.

    Attributes:
        source_path: Media file to split.
        output_parameter_name: Key under which segments are returned.
        number_of_segments: Number of parts to split into.
        min_segment_duration: Minimum duration of a segment. Overrides
            ``number_of_segments`` when both cannot be satisfied.
        segment_duration: Fixed duration of each segment. Replaces
            ``number_of_segments`` when present.
        entry_point: Reserved. Accepted and validated, not used for selection.
        duration: Duration of the content processed. Defaults to the whole media.
        max_duration: Upper bound on ``duration``.
        duration_position: Whether ``duration`` is reckoned from the start or
            the end of the media.
        overlap: Duration by which consecutive segments overlap.
    """
    source_path: str
    output_parameter_name: str = OUTPUT_PARAMETER_NAME
    number_of_segments: int = DEFAULT_NUMBER_OF_SEGMENTS
    min_segment_duration: Optional[Duration] = None
    segment_duration: Optional[Duration] = None
    entry_point: Optional[Duration] = None
    duration: Optional[Duration] = None
    max_duration: Optional[Duration] = None
    duration_position: DurationPosition = DurationPosition.START
    overlap: Optional[Duration] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SplitterParameters":
        """
        Build parameters from a job envelope.

        Args:
            data: Mapping of parameter names to values. Duration fields are
                mappings with "value" and "unit" keys.

        Returns:
            Validated parameters.

        Raises:
            ConfigurationError: If a parameter is missing or invalid.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Job parameters must be a mapping", module="parameters")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown parameters: %s", ", ".join(unknown))

        source_path = data.get("source_path")
        if not source_path or not isinstance(source_path, str):
            raise ConfigurationError("Missing required parameter: source_path", module="parameters")

        output_parameter_name = data.get("output_parameter_name") or OUTPUT_PARAMETER_NAME
        if not isinstance(output_parameter_name, str):
            raise ConfigurationError(
                f"output_parameter_name must be a string, got {output_parameter_name!r}",
                module="parameters"
            )

        number_of_segments = data.get("number_of_segments", DEFAULT_NUMBER_OF_SEGMENTS)
        if (
            isinstance(number_of_segments, bool)
            or not isinstance(number_of_segments, int)
            or number_of_segments < 0
        ):
            raise ConfigurationError(
                f"number_of_segments must be a non-negative integer, got {number_of_segments!r}",
                module="parameters"
            )

        durations = {}
        for name in DURATION_FIELDS:
            value = data.get(name)
            durations[name] = Duration.from_dict(value, name) if value is not None else None

        return cls(
            source_path=source_path,
            output_parameter_name=output_parameter_name,
            number_of_segments=number_of_segments,
            duration_position=parse_position(data.get("duration_position")),
            **durations
        )
