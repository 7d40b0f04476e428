"""Command-line interface for dfpaths."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from dfpaths.config import IO_CONFIG
from dfpaths.io import load_graph
from dfpaths.logging import get_logger, level_for_flags, set_global_log_level
from dfpaths.paths import DepthFirstPaths
from dfpaths.report import format_adjacency, format_path, format_paths, format_state
from dfpaths.types import AdjacencyOrder

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _run_paths(
    path: Path,
    source: int,
    order: AdjacencyOrder,
    adjacency: bool = False,
    state: bool = False,
    target: Optional[int] = None,
) -> None:
    """Load a graph, search it from ``source`` and print the requested reports.

    Args:
        path: Graph description file.
        source: Source vertex.
        order: Neighbor ordering used while loading.
        adjacency: Also print the adjacency listing.
        state: Also print the marked/edgeTo table.
        target: Print only the path to this vertex instead of all paths.
    """
    logger.info(f"Loading graph from: {path}")
    _start_time = perf_counter()

    try:
        graph = load_graph(path, order=order)
        finder = DepthFirstPaths(graph, source)

        if adjacency:
            print(format_adjacency(graph))
            print()
        if state:
            print(format_state(finder))
            print()
        if target is not None:
            print(f"{source} to {target}:  {format_path(finder.path_to(target))}")
        else:
            print(format_paths(finder))

        _elapsed = perf_counter() - _start_time
        logger.info(
            f"Reached {finder.count()} of {graph.vertex_count()} vertices "
            f"in {_format_duration(_elapsed)}"
        )

    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to compute paths: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to compute paths: {type(e).__name__}: {e}")
        sys.exit(1)


def _show_adjacency(path: Path, order: AdjacencyOrder) -> None:
    """Load a graph and print its adjacency listing."""
    logger.info(f"Loading graph from: {path}")
    try:
        graph = load_graph(path, order=order)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to load graph: {type(e).__name__}: {e}")
        sys.exit(1)

    print(format_adjacency(graph))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dfpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="dfpaths",
        description="Depth-first paths from a source vertex in an undirected graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{paths,adjacency}",
        help="Available commands",
    )

    paths_parser = subparsers.add_parser(
        "paths", help="Print a path from SOURCE to every vertex"
    )
    paths_parser.add_argument("graph", type=Path, help="Path to graph file")
    paths_parser.add_argument("source", type=int, help="Source vertex")
    paths_parser.add_argument(
        "--adjacency",
        "-a",
        action="store_true",
        help="Also print the adjacency list",
    )
    paths_parser.add_argument(
        "--state",
        "-s",
        action="store_true",
        help="Also print the marked/edgeTo table",
    )
    paths_parser.add_argument(
        "--target",
        "-t",
        type=int,
        default=None,
        help="Print only the path to this vertex",
    )

    adjacency_parser = subparsers.add_parser(
        "adjacency", help="Print the adjacency list of a graph"
    )
    adjacency_parser.add_argument("graph", type=Path, help="Path to graph file")

    for p in (paths_parser, adjacency_parser):
        p.add_argument(
            "--order",
            type=AdjacencyOrder.from_string,
            default=IO_CONFIG.default_order.name.lower(),
            help=(
                "Neighbor order: insertion, lifo (most recent edge first) or"
                " sorted (default: %(default)s)"
            ),
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "paths":
        _run_paths(
            path=args.graph,
            source=args.source,
            order=args.order,
            adjacency=args.adjacency,
            state=args.state,
            target=args.target,
        )
    elif args.command == "adjacency":
        _show_adjacency(args.graph, args.order)


if __name__ == "__main__":
    main()
