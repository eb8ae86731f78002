"""Command-line interface for test-smells."""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from smells_analyzer.core.config import OUTPUT_FORMATS, load_config
from smells_analyzer.core.engine import create_default_engine
from smells_analyzer.core.models import ScanError
from smells_analyzer.core.reporting import JSONReporter, LogReporter
from smells_analyzer.core.smells import get_default_detectors

logger = logging.getLogger("smells_analyzer")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="test-smells",
        description="Scan test sources for well-known test smells",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="Test source directory to scan (default: from config, else src/test/java)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--extension",
        help="Test source file extension (default: .java)",
    )

    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="SMELL",
        help="Disable a smell by name or slug (repeatable)",
    )

    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: log)",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file for JSON format (default: stdout)",
    )

    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Analyze files in a thread pool (output order is unchanged)",
    )

    parser.add_argument(
        "--list-smells",
        action="store_true",
        help="List the smell catalog and exit",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors")

    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 = scan completed, 2 = error)
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    if args.list_smells:
        for detector in get_default_detectors():
            print(f"{detector.slug:<28} {detector.name}")
        return 0

    try:
        # Load configuration
        if args.config:
            config = load_config(config_file=args.config)
        else:
            config = load_config(start_dir=args.directory or Path.cwd())

        # Command line overrides
        if args.directory:
            config.test_directory = args.directory
        if args.extension:
            config.file_extension = args.extension
        if args.format:
            config.output_format = args.format
        if args.parallel:
            config.parallel_processing = True
        config.disabled_smells.update(args.disable)

        if config.config_path:
            logger.debug("Using configuration from %s", config.config_path)

        engine = create_default_engine(config)

        if config.output_format == "json":
            reporter = JSONReporter()
            engine.scan_directory(config.test_directory, reporter)
            output = reporter.render()
            if args.output:
                try:
                    args.output.write_text(output + "\n")
                except OSError as e:
                    logger.error("Error writing report to %s: %s", args.output, e)
                    return 2
            else:
                print(output)
        else:
            engine.scan_directory(config.test_directory, LogReporter(logger))

        return 0

    except ScanError as e:
        cause = e.__cause__
        logger.error("Error analyzing the test directory: %s", e)
        if cause is not None:
            logger.debug("Caused by: %r", cause)
        return 2
    except (FileNotFoundError, ValueError, KeyError) as e:
        logger.error("Configuration error: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
