#!/usr/bin/env python3
"""
Great-circle distance and interpolation tool.
This script computes the distance between two coordinates, points along the
great-circle arc connecting them, and optionally renders the arc on an
interactive HTML map.
"""

from typing import List, Optional
import webbrowser
import argparse
import logging
import sys
import os

from . import __version__
from .config import GreatCircleConfig
from .geometry import Coordinate, distance, intermediate_point
from .path import great_circle_path, path_coordinates
from .visualization import create_path_map

# Configure logging
logger = logging.getLogger("greatcircle")


def add_endpoint_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the four positional coordinate arguments shared by every command."""
    parser.add_argument("lat1", type=float, help="Latitude of the first point")
    parser.add_argument("lon1", type=float, help="Longitude of the first point")
    parser.add_argument("lat2", type=float, help="Latitude of the second point")
    parser.add_argument("lon2", type=float, help="Longitude of the second point")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    defaults = GreatCircleConfig()

    parser = argparse.ArgumentParser(
        description="Great-circle distance and interpolation tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {defaults.log_level})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"greatcircle {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    distance_parser = subparsers.add_parser(
        "distance", help="Print the distance between two points in mi and km"
    )
    add_endpoint_arguments(distance_parser)

    intermediate_parser = subparsers.add_parser(
        "intermediate", help="Print the point at a fraction along the arc"
    )
    add_endpoint_arguments(intermediate_parser)
    intermediate_parser.add_argument(
        "fraction",
        type=float,
        help="Fraction along the arc (0=first point, 1=second point)",
    )

    path_parser = subparsers.add_parser(
        "path", help="Print points sampled along the arc"
    )
    add_endpoint_arguments(path_parser)
    path_parser.add_argument(
        "--segments",
        type=int,
        default=defaults.segments,
        help=f"Number of segments to split the arc into (default: {defaults.segments})",
    )
    path_parser.add_argument(
        "--map",
        dest="map_output",
        type=str,
        default=defaults.map_output,
        help="Write an HTML map of the path to this file",
    )
    path_parser.add_argument(
        "--open",
        dest="open_map",
        action="store_true",
        help="Open the HTML map in the browser after writing it",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GreatCircleConfig:
    """Build a GreatCircleConfig from parsed arguments, keeping defaults for absent ones."""
    defaults = GreatCircleConfig()
    return GreatCircleConfig(
        segments=getattr(args, "segments", defaults.segments),
        log_level=args.log_level,
        map_output=getattr(args, "map_output", defaults.map_output),
        open_map=getattr(args, "open_map", defaults.open_map),
    )


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except webbrowser.Error as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def setup_logging(config: GreatCircleConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def format_coordinate(coord: Coordinate) -> str:
    return f"{coord.latitude:.6f}, {coord.longitude:.6f}"


def run_path(start: Coordinate, end: Coordinate, config: GreatCircleConfig) -> None:
    """
    Sample the arc between start and end, print it, and write the map if requested.

    Raises:
        ValueError: If config.segments is less than 1
        OSError: If the map file cannot be written
    """
    path = great_circle_path(start, end, config.segments)
    for coord in path_coordinates(path):
        print(format_coordinate(coord))

    if config.map_output is None:
        return

    create_path_map(start, end, path, config.map_output)
    logger.info(f"Map written to {config.map_output}")

    if config.open_map:
        open_file_in_browser(config.map_output)


def main(argv: Optional[List[str]] = None):
    """
    Parses command-line arguments and runs the requested computation.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)

    # Setup logging
    setup_logging(config)

    start = Coordinate(latitude=args.lat1, longitude=args.lon1)
    end = Coordinate(latitude=args.lat2, longitude=args.lon2)
    logger.debug(f"Command {args.command} from {start} to {end}")

    if args.command == "distance":
        mi, km = distance(start, end)
        print(f"{mi:.2f} mi / {km:.2f} km")
    elif args.command == "intermediate":
        print(format_coordinate(intermediate_point(start, end, args.fraction)))
    else:
        try:
            run_path(start, end, config)
        except ValueError as e:
            logger.error(f"Invalid path request: {e}")
            sys.exit(1)
        except OSError as e:
            logger.error(f"Failed to write map: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
