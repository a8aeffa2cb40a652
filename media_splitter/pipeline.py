"""Job processing for the media splitter worker

Responsibilities:
  - Validate the job envelope into SplitterParameters
  - Look up the source media duration
  - Select segments for the job parameters
  - Build the job result holding the segments under the output parameter name
"""

import logging
from typing import Any, Dict, Mapping, Sequence

from .exceptions import ProcessingError
from .ffprobe import MetadataError, get_media_duration_ms
from .parameters import SplitterParameters
from .selection import select_segments
from .split_policy import Segment

logger = logging.getLogger(__name__)

STATUS_COMPLETED = "completed"


def build_job_result(output_parameter_name: str, segments: Sequence[Segment]) -> Dict[str, Any]:
    """Build a completed job result holding the serialized segments."""
    return {
        "status": STATUS_COMPLETED,
        "parameters": {
            output_parameter_name: [segment.to_dict() for segment in segments],
        },
    }


def process(parameters: SplitterParameters) -> Dict[str, Any]:
    """
    Split the source media of a job.

    Args:
        parameters: Validated job parameters.

    Returns:
        The completed job result.

    Raises:
        ProcessingError: If the source media duration cannot be read.
    """
    logger.info("Processing %s", parameters.source_path)
    try:
        media_duration = get_media_duration_ms(parameters.source_path)
    except MetadataError as e:
        raise ProcessingError(str(e), module="pipeline") from e

    logger.debug("Input media duration: %d ms", media_duration)

    segments = select_segments(media_duration, parameters)
    logger.info("Produced %d segments for %s", len(segments), parameters.source_path)
    return build_job_result(parameters.output_parameter_name, segments)


def process_job(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a job envelope and process it.

    Raises:
        ConfigurationError: If the job parameters are invalid.
        ProcessingError: If the source media cannot be processed.
    """
    return process(SplitterParameters.from_dict(data))
