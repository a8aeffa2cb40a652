"""Unit tests for job parameter validation"""

import pytest

from media_splitter.duration import Duration, DurationPosition, DurationUnit
from media_splitter.exceptions import ConfigurationError
from media_splitter.parameters import SplitterParameters


def test_defaults():
    parameters = SplitterParameters.from_dict({"source_path": "/tmp/test.mkv"})
    assert parameters.source_path == "/tmp/test.mkv"
    assert parameters.output_parameter_name == "segments"
    assert parameters.number_of_segments == 1
    assert parameters.duration_position is DurationPosition.START
    assert parameters.duration is None
    assert parameters.max_duration is None
    assert parameters.min_segment_duration is None
    assert parameters.segment_duration is None
    assert parameters.overlap is None
    assert parameters.entry_point is None


def test_full_envelope():
    parameters = SplitterParameters.from_dict({
        "source_path": "/tmp/test.mkv",
        "output_parameter_name": "parts",
        "number_of_segments": 4,
        "min_segment_duration": {"value": 2, "unit": "second"},
        "segment_duration": {"value": 5, "unit": "second"},
        "entry_point": {"value": 10, "unit": "percent"},
        "duration": {"value": 50, "unit": "percent"},
        "max_duration": {"value": 30, "unit": "second"},
        "duration_position": "end",
        "overlap": {"value": 200, "unit": "millisecond"},
    })
    assert parameters.output_parameter_name == "parts"
    assert parameters.number_of_segments == 4
    assert parameters.min_segment_duration == Duration(2, DurationUnit.SECOND)
    assert parameters.segment_duration == Duration(5, DurationUnit.SECOND)
    assert parameters.entry_point == Duration(10, DurationUnit.PERCENT)
    assert parameters.duration == Duration(50, DurationUnit.PERCENT)
    assert parameters.max_duration == Duration(30, DurationUnit.SECOND)
    assert parameters.duration_position is DurationPosition.END
    assert parameters.overlap == Duration(200, DurationUnit.MILLISECOND)


def test_empty_duration_mapping_uses_default():
    parameters = SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "duration": {}})
    assert parameters.duration == Duration()
    assert parameters.duration.to_millis(5000) == 1000


def test_zero_segments_accepted():
    parameters = SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "number_of_segments": 0})
    assert parameters.number_of_segments == 0


def test_unknown_keys_ignored():
    parameters = SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "requirements": {}})
    assert parameters.source_path == "/tmp/test.mkv"


def test_missing_source_path():
    for data in ({}, {"source_path": ""}, {"source_path": 42}):
        with pytest.raises(ConfigurationError, match="source_path"):
            SplitterParameters.from_dict(data)


def test_invalid_number_of_segments():
    for value in (-1, 2.5, "3", True):
        with pytest.raises(ConfigurationError, match="number_of_segments"):
            SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "number_of_segments": value})


def test_overlap_without_unit():
    with pytest.raises(ConfigurationError, match="Expected overlap unit, one of: millisecond, second, percent"):
        SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "overlap": {"value": 5}})


def test_invalid_duration_unit():
    with pytest.raises(ConfigurationError, match="max_duration"):
        SplitterParameters.from_dict({
            "source_path": "/tmp/test.mkv",
            "max_duration": {"value": 5, "unit": "hours"},
        })


def test_invalid_duration_position():
    with pytest.raises(ConfigurationError, match="duration_position"):
        SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "duration_position": "middle"})


def test_invalid_output_parameter_name():
    with pytest.raises(ConfigurationError, match="output_parameter_name"):
        SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "output_parameter_name": 3})


def test_non_mapping_envelope():
    with pytest.raises(ConfigurationError):
        SplitterParameters.from_dict(["source_path"])


def test_segment_duration_without_unit():
    with pytest.raises(ConfigurationError) as exc_info:
        SplitterParameters.from_dict({"source_path": "/tmp/test.mkv", "segment_duration": {"value": 10}})
    assert "segment_duration" in str(exc_info.value)
