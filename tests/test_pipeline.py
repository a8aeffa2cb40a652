"""Unit tests for job processing

The media duration lookup is patched out; these tests cover job envelope
handling, result construction and error reporting.
"""

import unittest
from unittest.mock import patch

from media_splitter.exceptions import ConfigurationError, ProcessingError
from media_splitter.ffprobe.exec import MetadataError
from media_splitter.parameters import SplitterParameters
from media_splitter.pipeline import build_job_result, process, process_job
from media_splitter.split_policy import Segment


class TestPipeline(unittest.TestCase):
    def setUp(self):
        self.job = {"source_path": "/tmp/test.mkv", "number_of_segments": 3}

    @patch("media_splitter.pipeline.get_media_duration_ms", return_value=100)
    def test_process_job(self, mock_duration):
        result = process_job(self.job)
        mock_duration.assert_called_once_with("/tmp/test.mkv")
        self.assertEqual(result, {
            "status": "completed",
            "parameters": {
                "segments": [
                    {"start": 0, "end": 33},
                    {"start": 33, "end": 66},
                    {"start": 66, "end": 100},
                ]
            }
        })

    @patch("media_splitter.pipeline.get_media_duration_ms", return_value=10000)
    def test_custom_output_parameter_name(self, mock_duration):
        self.job["output_parameter_name"] = "chunks"
        self.job["duration"] = {"value": 5, "unit": "percent"}
        self.job["number_of_segments"] = 1
        result = process_job(self.job)
        self.assertEqual(result["parameters"], {"chunks": [{"start": 0, "end": 500}]})

    @patch("media_splitter.pipeline.get_media_duration_ms", return_value=60000)
    def test_end_anchored_job(self, mock_duration):
        self.job.update({
            "number_of_segments": 2,
            "duration": {"value": 10, "unit": "second"},
            "duration_position": "end",
            "overlap": {"value": 1, "unit": "second"},
        })
        segments = process_job(self.job)["parameters"]["segments"]
        self.assertEqual(segments, [
            {"start": 50000, "end": 55000},
            {"start": 54000, "end": 60000},
        ])

    @patch("media_splitter.pipeline.get_media_duration_ms")
    def test_duration_lookup_failure(self, mock_duration):
        mock_duration.side_effect = MetadataError("Failed to query ffprobe: invalid data")
        with self.assertRaises(ProcessingError) as ctx:
            process(SplitterParameters(source_path="/tmp/broken.mkv"))
        self.assertIn("Failed to query ffprobe: invalid data", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, MetadataError)

    @patch("media_splitter.pipeline.get_media_duration_ms")
    def test_invalid_parameters_skip_lookup(self, mock_duration):
        self.job["overlap"] = {"value": 5}
        with self.assertRaises(ConfigurationError):
            process_job(self.job)
        mock_duration.assert_not_called()

    def test_build_job_result(self):
        result = build_job_result("segments", [Segment(0, 10), Segment(10, 20)])
        self.assertEqual(result["status"], "completed")
        self.assertEqual(
            result["parameters"]["segments"],
            [{"start": 0, "end": 10}, {"start": 10, "end": 20}]
        )


if __name__ == "__main__":
    unittest.main()
