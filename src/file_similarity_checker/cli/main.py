"""CLI entry point for file similarity checker."""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from .. import __version__
from ..core import (
    ApplicationConfig,
    AutoSelector,
    FileScanner,
    SimilarityGrouper,
    SimilarityResult,
    format_result,
)
from ..core.exporter import OUTPUT_FORMATS


def setup_logging(level: str = "INFO") -> None:
    """
    Set up logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def read_file_list(lines: Iterable[str]) -> list[Path]:
    """
    Parse a list of file paths, one per line.

    Args:
        lines: Lines from a list file or stdin

    Returns:
        Paths in order of first appearance

    Blank lines and lines starting with ``#`` are skipped. Repeated paths are
    kept once.
    """
    paths: list[Path] = []
    seen: set[str] = set()
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#") or entry in seen:
            continue
        seen.add(entry)
        paths.append(Path(entry))
    return paths


def analyze_directory(directory: Path, config: ApplicationConfig) -> SimilarityResult:
    """
    Scan a directory and group its files by similarity.

    Args:
        directory: Directory to scan
        config: Thresholds and scan settings

    Returns:
        SimilarityResult for every file found

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    logger = logging.getLogger(__name__)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    scanner = FileScanner(config)
    grouper = SimilarityGrouper(config)

    logger.info(f"Starting analysis of directory: {directory}")
    files = scanner.scan_directory(directory)
    result = grouper.group(files)
    logger.info(f"Analysis complete: {len(result.groups)} similarity groups found")
    return result


def analyze_files(file_paths: list[Path], config: ApplicationConfig) -> SimilarityResult:
    """
    Describe an explicit list of files and group them by similarity.

    Args:
        file_paths: Files to analyze; missing or unreadable entries are skipped
        config: Thresholds and scan settings

    Returns:
        SimilarityResult for every accessible file

    Raises:
        ValueError: If the list is empty
    """
    logger = logging.getLogger(__name__)

    if not file_paths:
        raise ValueError("No files provided. Use --help for usage information.")

    logger.info(f"Starting analysis of {len(file_paths)} listed files")
    files = FileScanner(config).scan_files(file_paths)
    result = SimilarityGrouper(config).group(files)
    logger.info(f"Analysis complete: {len(result.groups)} similarity groups found")
    return result


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="file-similarity-checker",
        description="File Similarity Checker - Find likely duplicate files by content and name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a directory
  file-similarity-checker /path/to/documents

  # Skip content hashing, compare sizes and names only
  file-similarity-checker /path/to/documents --no-hash

  # Export as CSV including files that matched nothing
  file-similarity-checker . --output-format csv --show-ungrouped -o report.csv

  # Analyze the files listed in a file (# starts a comment)
  file-similarity-checker --input-file files.txt

  # Read the file list from stdin
  find . -name '*.pdf' | file-similarity-checker

  # List files the smart heuristic would remove
  file-similarity-checker /path/to/documents --select smart
        """,
    )

    # Input options
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="Directory to analyze (omit to read a file list from --input-file or stdin)",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        metavar="FILE",
        help="Read file paths from FILE, one per line ('-' for stdin)",
    )

    # Scan options
    parser.add_argument(
        "--no-recursive", action="store_true", help="Don't scan subdirectories recursively"
    )
    parser.add_argument(
        "--no-hash", action="store_true", help="Don't hash file contents (disables identical tier)"
    )

    # Matching options
    parser.add_argument(
        "--content-threshold",
        type=float,
        default=0.8,
        help="Name similarity required for same-size files (default: 0.8)",
    )
    parser.add_argument(
        "--name-threshold",
        type=float,
        default=0.9,
        help="Name similarity required regardless of size (default: 0.9)",
    )

    # Output options
    parser.add_argument(
        "--output-format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format for results (default: text)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="PATH",
        help="Write the report to PATH instead of stdout",
    )
    parser.add_argument(
        "--show-ungrouped", action="store_true", help="Include files that matched nothing"
    )
    parser.add_argument(
        "--select",
        choices=sorted(AutoSelector.STRATEGIES),
        help="Also list the files this heuristic marks as removable",
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def run_analysis(args: argparse.Namespace, config: ApplicationConfig) -> SimilarityResult:
    """Analyze the directory, the listed files, or the list read from stdin."""
    if args.directory is not None and args.input_file is None:
        return analyze_directory(args.directory, config)

    file_paths: list[Path] = []
    if args.directory is not None:
        file_paths.extend(FileScanner(config).discover_files(args.directory, config.recursive))

    if args.input_file is None or args.input_file == "-":
        file_paths.extend(read_file_list(sys.stdin))
    else:
        with open(args.input_file, encoding="utf-8") as f:
            file_paths.extend(read_file_list(f))

    return analyze_files(list(dict.fromkeys(file_paths)), config)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        config = ApplicationConfig(
            content_threshold=args.content_threshold,
            name_threshold=args.name_threshold,
            compute_hashes=not args.no_hash,
            recursive=not args.no_recursive,
            log_level=args.log_level,
        )
        setup_logging(config.log_level)

        result = run_analysis(args, config)
        report = format_result(result, args.output_format, args.show_ungrouped, config)

        if args.select:
            selected = AutoSelector(args.select).select(result)
            report += f"\nFiles marked for removal ({args.select}): {len(selected)}\n"
            report += "".join(f"  {path}\n" for path in sorted(selected))

        if args.output:
            args.output.write_text(report, encoding="utf-8")
            logger.info(f"Report written to {args.output}")
        else:
            print(report, end="")

        return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except NotADirectoryError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        logger.exception("Unexpected error occurred")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
