"""Command-line interface for SRT Tools."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import SrtToolsConfig
from .operations import process_srt
from .parser import read_srt_text, validate_srt_file, write_srt_text

STDOUT_PATH = "-"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="srt-tools",
        description="Offset, renumber and clean up SRT subtitle files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s video.srt --offset 1500             # Subtitles appear 1.5s later
  %(prog)s video.srt --offset -2000 -o out.srt # Subtitles appear 2s sooner
  %(prog)s video.srt --renumber 1 --in-place   # Renumber from 1
  %(prog)s video.srt - --strip-extra           # Clean up, print to stdout
        """
    )

    # Positional arguments
    parser.add_argument("input_path", help="Input SRT file path")
    parser.add_argument("output_path", nargs='?', default=None,
                        help="Output SRT file path ('-' for stdout)")
    parser.add_argument("-o", "--output", dest="output_option", default=None,
                        help="Output SRT file path (same as the positional argument)")

    # Operations
    parser.add_argument("--offset", dest="offset_ms", type=int, default=None,
                        help="Shift all timecodes by this many milliseconds")
    parser.add_argument("--renumber", dest="renumber_start", type=int, default=None,
                        help="Renumber subtitles starting at this index")
    parser.add_argument("--strip-extra", action="store_true",
                        help="Remove text that is not part of a subtitle "
                             "(default from SRT_TOOLS_REMOVE_EXTRA_TEXT)")

    # Output
    parser.add_argument("--in-place", action="store_true", help="Overwrite the input file")

    # Misc
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)
    if args.output_path and args.output_option:
        parser.error("give the output path either as OUTPUT or with -o, not both")
    return args


def resolve_output(args: argparse.Namespace, in_path: Path, config: SrtToolsConfig) -> Optional[Path]:
    """
    Work out where to write the result.

    Returns:
        Output path, or None for stdout
    """
    target = args.output_option or args.output_path
    if target == STDOUT_PATH:
        return None
    if target:
        return Path(target).expanduser()
    if args.in_place:
        return in_path
    return in_path.with_name(f"{config.output_prefix}{in_path.name}")


def run(args: argparse.Namespace) -> int:
    """Main workflow."""
    logger = logging.getLogger(__name__)
    config = SrtToolsConfig.from_args(args)

    # 验证配置
    error = config.validate()
    if error:
        logger.error(error)
        return 1

    # 验证输入文件
    in_path = Path(args.input_path).expanduser().resolve()
    error = validate_srt_file(in_path)
    if error:
        logger.error(error)
        return 1

    logger.info(f"Reading: {in_path}")
    content = read_srt_text(in_path)
    result = process_srt(content, config)

    if not result.valid:
        logger.error("No valid subtitle entries found")
        return 1

    logger.info(f"Processed {result.entry_count} subtitle entries")

    out_path = resolve_output(args, in_path, config)
    if out_path is None:
        sys.stdout.write(result.text)
        sys.stdout.flush()
        return 0

    write_srt_text(result.text, out_path)
    logger.info(f"Done! Saved to {out_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        exit_code = run(args)
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
