"""Command-line interface for gridpaths."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema

from gridpaths.analysis.context import SearchContext
from gridpaths.dsl.loader import GridScenario, load_grid_file
from gridpaths.logging import configure_cli_logging, get_logger
from gridpaths.render import render_grid, render_path
from gridpaths.types.base import Cell, PreconditionViolation

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(min_width, max(len(str(row[i])) for row in all_data))
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _resolve_endpoint(
    override: Optional[List[int]], fallback: Optional[Cell], label: str
) -> Cell:
    if override is not None:
        return Cell(override[0], override[1])
    if fallback is None:
        raise ValueError(
            f"No {label} cell: pass --{label} ROW COL or mark it in the grid"
        )
    return fallback


def _find(
    path: Path,
    start: Optional[List[int]],
    end: Optional[List[int]],
    max_paths: Optional[int],
    as_json: bool,
) -> None:
    """Load a grid, run the multi-path search and print the results."""
    scenario: GridScenario = load_grid_file(path)
    start_cell = _resolve_endpoint(start, scenario.start, "start")
    end_cell = _resolve_endpoint(end, scenario.end, "end")
    limit = max_paths if max_paths is not None else scenario.max_paths

    ctx = SearchContext(scenario.grid)
    t0 = perf_counter()
    paths = ctx.search(start_cell, end_cell, limit)
    elapsed = perf_counter() - t0
    logger.info(
        "Found %d %s in %s",
        len(paths),
        _plural(len(paths), "path"),
        _format_duration(elapsed),
    )

    summaries = ctx.queries.summaries()
    if as_json:
        payload = {
            "grid": {"rows": scenario.grid.rows, "cols": scenario.grid.cols},
            "start": list(start_cell),
            "end": list(end_cell),
            "paths": [s.to_dict() for s in summaries],
        }
        print(json.dumps(payload, indent=2))
        return

    if not paths:
        print(f"No path from {start_cell} to {end_cell}")
        return

    for idx, found in enumerate(paths, start=1):
        print(f"Path {idx} ({len(found)} cells):")
        print(render_path(scenario.grid, found))
        print()

    rows = [[s.id, str(s.start), str(s.end), s.length] for s in summaries]
    print(_format_table(["id", "start", "end", "length"], rows))


def _inspect(path: Path) -> None:
    """Print a short description of a grid file."""
    scenario = load_grid_file(path)
    grid = scenario.grid
    print(f"Grid: {grid.rows} x {grid.cols}")
    obstacles = grid.obstacle_count()
    print(f"Obstacles: {obstacles} {_plural(obstacles, 'cell')}")
    print(f"Start: {scenario.start if scenario.start is not None else '-'}")
    print(f"End: {scenario.end if scenario.end is not None else '-'}")
    if scenario.max_paths is not None:
        print(f"Max paths: {scenario.max_paths}")
    print()
    print(render_grid(grid))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``gridpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="gridpaths",
        description="Find and inspect multiple paths on obstacle grids.",
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
        metavar="{find,inspect}",
        help="Available commands",
    )

    find_parser = subparsers.add_parser("find", help="Search for paths on a grid")
    find_parser.add_argument("grid", type=Path, help="Grid text file or YAML scenario")
    find_parser.add_argument(
        "--start",
        nargs=2,
        type=int,
        metavar=("ROW", "COL"),
        help="Start cell (default: the S marker or the scenario's start)",
    )
    find_parser.add_argument(
        "--end",
        nargs=2,
        type=int,
        metavar=("ROW", "COL"),
        help="End cell (default: the E marker or the scenario's end)",
    )
    find_parser.add_argument(
        "--max-paths",
        "-n",
        type=int,
        default=None,
        help="Maximum number of paths to return",
    )
    find_parser.add_argument(
        "--json", action="store_true", help="Print path summaries as JSON"
    )

    inspect_parser = subparsers.add_parser("inspect", help="Describe a grid file")
    inspect_parser.add_argument(
        "grid", type=Path, help="Grid text file or YAML scenario"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)
    if args.verbose:
        logger.debug("Debug logging enabled")

    try:
        if args.command == "find":
            _find(args.grid, args.start, args.end, args.max_paths, args.json)
        elif args.command == "inspect":
            _inspect(args.grid)
    except PreconditionViolation as exc:
        logger.error("Invalid search: %s", exc)
        raise SystemExit(1) from exc
    except jsonschema.ValidationError as exc:
        logger.error("Invalid grid scenario %s: %s", args.grid, exc.message)
        raise SystemExit(1) from exc
    except (ValueError, OSError) as exc:
        logger.error("Failed to load %s: %s", args.grid, exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
