"""Command-line interface for archzoom."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from archzoom.config import load_settings
from archzoom.connectors import JsonDependencyConnector
from archzoom.pipeline import generate_files


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="archzoom",
        description="Multi-level architecture diagrams — PlantUML module, component, "
        "system and service views from collected project metadata.",
    )
    parser.add_argument(
        "src_dirs",
        type=Path,
        nargs="+",
        metavar="SRC_DIR",
        help="Folder(s) searched for collected metadata files",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("diagrams"),
        help="Target folder for the diagrams (default: ./diagrams)",
    )
    parser.add_argument(
        "--dependencies",
        type=Path,
        default=None,
        help="JSON file with already resolved calls between services "
        "(used when collected API metadata is found)",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Also render SVG images (requires plantuml on PATH)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Folder holding .archzoom.toml or pyproject.toml (default: first SRC_DIR)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("archzoom").setLevel(logging.DEBUG)

    settings = load_settings(args.config or args.src_dirs[0])
    connector = None
    if args.dependencies:
        connector = JsonDependencyConnector(args.dependencies)

    generate_files(
        args.src_dirs,
        args.output,
        visualize=args.visualize,
        connector=connector,
        settings=settings,
    )
