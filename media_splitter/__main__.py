"""
Command-line interface for the media splitter worker
"""
import argparse
import json
import logging
import sys

from . import __version__
from .duration import DurationPosition, DurationUnit
from .exceptions import SplitterError
from .formatting import print_error, print_header, print_info, print_segments
from .logging import configure_logging
from .parameters import DURATION_FIELDS, SplitterParameters
from .pipeline import process
from .split_policy import Segment
from .utils import check_dependencies

def _add_duration_argument(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    flag = name.replace("_", "-")
    parser.add_argument(
        f"--{flag}",
        dest=name,
        type=int,
        default=None,
        metavar="VALUE",
        help=help_text
    )
    parser.add_argument(
        f"--{flag}-unit",
        dest=f"{name}_unit",
        choices=[unit.value for unit in DurationUnit],
        default=None,
        help=f"Unit of --{flag} (required with --{flag})"
    )

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Split an audio/video media file into segments. "
                    "Segments are defined in milliseconds and can overlap."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default from config)"
    )
    parser.add_argument(
        "--no-file-log",
        dest="file_logging",
        action="store_false",
        help="Do not write a log file"
    )
    parser.add_argument(
        "-n", "--number-of-segments",
        dest="number_of_segments",
        type=int,
        default=None,
        help="Number of parts to split into (default: 1)"
    )
    _add_duration_argument(parser, "min_segment_duration", "Minimal duration of a segment")
    _add_duration_argument(parser, "segment_duration", "Fixed duration of each segment (replaces -n)")
    _add_duration_argument(parser, "entry_point", "Reserved entry point")
    _add_duration_argument(parser, "duration", "Duration of the content processed")
    _add_duration_argument(parser, "max_duration", "Upper limit on the processed duration")
    _add_duration_argument(parser, "overlap", "Duration by which segments overlap")
    parser.add_argument(
        "--duration-position",
        dest="duration_position",
        choices=[position.value for position in DurationPosition],
        default=None,
        help="Reckon the processed duration from the start or the end of the media"
    )
    parser.add_argument(
        "--output-parameter-name",
        dest="output_parameter_name",
        default=None,
        help="Key of the segment list in the job result (default: segments)"
    )
    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the job result as JSON"
    )
    parser.add_argument(
        "source_path",
        help="Input media file"
    )
    return parser.parse_args(argv)

def build_job_parameters(args: argparse.Namespace) -> dict:
    """Convert parsed arguments into a job envelope"""
    data = {"source_path": args.source_path}
    for name in ("number_of_segments", "duration_position", "output_parameter_name"):
        value = getattr(args, name)
        if value is not None:
            data[name] = value

    for name in DURATION_FIELDS:
        value = getattr(args, name)
        unit = getattr(args, f"{name}_unit")
        if value is None and unit is None:
            continue
        duration = {}
        if value is not None:
            duration["value"] = value
        if unit is not None:
            duration["unit"] = unit
        data[name] = duration
    return data

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level, file_logging=args.file_logging)

    log = logging.getLogger("media_splitter")

    if not check_dependencies():
        log.error("Missing required dependencies")
        return 1

    try:
        parameters = SplitterParameters.from_dict(build_job_parameters(args))
        if not args.as_json:
            print_header(f"Media splitter v{__version__}")
            print_info(f"Splitting {parameters.source_path}")
        result = process(parameters)
    except KeyboardInterrupt:
        log.warning("Split interrupted by user")
        return 130
    except SplitterError as e:
        log.error("%s", e)
        print_error(e.message)
        return 1

    if args.as_json:
        print(json.dumps(result))
    else:
        segments = result["parameters"][parameters.output_parameter_name]
        print_segments([Segment(**segment) for segment in segments])
    return 0

if __name__ == "__main__":
    sys.exit(main())
