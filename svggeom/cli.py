"""
Command-line filter: SVG shape markup (or path data) on stdin, normalized geometry on stdout.
"""
import argparse
import logging
import sys
from typing import List, Optional

from svggeom.config import load_config, resolve_config
from svggeom.errors import SvgGeomError
from svggeom.reader import read
from svggeom.writer import geometry_to_svg_d_string, geometry_to_svg_elements

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="svg2geo",
        description="Convert SVG shape elements or path data to planar geometry.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        help="File to read instead of standard input",
    )

    parser.add_argument(
        "--d-string", "-d",
        action="store_true",
        help="Input is bare path data rather than shape markup",
    )

    parser.add_argument(
        "--format", "-f",
        choices=["svg", "d", "repr"],
        default="svg",
        help="Output as SVG elements, path data or a Python repr",
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config else resolve_config()
        if not args.verbose:
            logging.getLogger().setLevel(str(config["log_level"]).upper())

        if args.input:
            with open(args.input, 'r', encoding='utf-8') as f:
                text = f.read()
        else:
            text = sys.stdin.read()

        geometry = read(text.strip(), d_string=args.d_string, config=config)
        logger.info(f"Read {type(geometry).__name__}")

        if args.format == "d":
            output = geometry_to_svg_d_string(geometry)
        elif args.format == "repr":
            output = repr(geometry)
        else:
            output = geometry_to_svg_elements(geometry)
        print(output)
        return 0
    except (SvgGeomError, OSError, ValueError, KeyError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
