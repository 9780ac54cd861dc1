"""Command-line interface for ENBP."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import numpy as np
import yaml

from enbp.config import SolverConfig
from enbp.graph import Graph
from enbp.io import load_matrix, write_cypher
from enbp.logging import get_logger, set_global_log_level
from enbp.path import Path as EnbpPath
from enbp.report import paths_to_dataframe, paths_to_dict
from enbp.samples import SAMPLES, get_sample
from enbp.types import NodeOrder

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _paths_table(paths: List[EnbpPath]) -> str:
    rows = [
        [
            str(idx),
            " ".join(str(n) for n in path.nodes),
            f"{path.weight:.4f}",
        ]
        for idx, path in enumerate(paths)
    ]
    return _format_table(["#", "Nodes", "Weight"], rows)


def _load_input(matrix_file: Optional[Path], sample: Optional[str], key: str) -> Any:
    if sample is not None:
        logger.debug(f"Using built-in sample: {sample}")
        return get_sample(sample)
    assert matrix_file is not None
    return load_matrix(matrix_file, key=key)


def _solve(
    matrix_file: Optional[Path],
    sample: Optional[str],
    key: str,
    topological: bool,
    cypher: Optional[Path],
    results: Optional[Path],
    csv: Optional[Path],
) -> None:
    """Solve one matrix and print (and optionally export) its best paths."""
    source = sample if sample is not None else str(matrix_file)
    try:
        matrix = _load_input(matrix_file, sample, key)
        rows, cols = np.shape(matrix) if np.ndim(matrix) == 2 else (0, 0)
        print(f"Input graph: {rows} x {cols} nodes.")

        if cypher is not None:
            write_cypher(matrix, cypher)

        config = SolverConfig(
            node_order=NodeOrder.TOPOLOGICAL if topological else NodeOrder.INDEX
        )
        start = perf_counter()
        graph = Graph(matrix, config=config)
        elapsed = perf_counter() - start

        paths = graph.best_paths
        print(f"Found {len(paths)} {_plural(len(paths), 'path')}:")
        print(_paths_table(paths))
        print(f"Elapsed time: {_format_duration(elapsed)}")
        logger.info(f"Solved {source} in {_format_duration(elapsed)}")

        if results is not None:
            payload = {
                "input": source,
                "num_nodes": graph.num_nodes,
                "best_paths": paths_to_dict(paths),
            }
            results.parent.mkdir(parents=True, exist_ok=True)
            results.write_text(json.dumps(payload, indent=2))
            logger.info(f"Results written to: {results}")

        if csv is not None:
            csv.parent.mkdir(parents=True, exist_ok=True)
            paths_to_dataframe(paths).to_csv(csv, index=False)
            logger.info(f"Path table written to: {csv}")

    except FileNotFoundError:
        logger.error(f"Matrix file not found: {matrix_file}")
        print(f"ERROR: Matrix file not found: {matrix_file}")
        sys.exit(1)
    except (KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to solve {source}: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to solve {source}: {type(e).__name__}: {e}")
        sys.exit(1)


def _list_samples() -> None:
    rows = []
    for name in sorted(SAMPLES):
        matrix = SAMPLES[name]()
        rows.append([name, str(matrix.shape[0]), str(int(np.count_nonzero(matrix)))])
    print(_format_table(["Sample", "Nodes", "Edges"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``enbp`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="enbp",
        description="Cover a weighted DAG with disjoint paths of maximal average weight.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,samples}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Compute the best paths")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "matrix", type=Path, nargs="?", default=None, help="Path to matrix YAML"
    )
    source.add_argument(
        "--sample", "-s", choices=sorted(SAMPLES), help="Use a built-in sample matrix"
    )
    solve_parser.add_argument(
        "--key", default="data", help="YAML key holding the matrix (default: data)"
    )
    solve_parser.add_argument(
        "--topological",
        action="store_true",
        help="Relabel nodes in topological order instead of trusting index order",
    )
    solve_parser.add_argument(
        "--cypher", type=Path, default=None, help="Export the graph as Cypher"
    )
    solve_parser.add_argument(
        "--results", "-r", type=Path, default=None, help="Export best paths to JSON"
    )
    solve_parser.add_argument(
        "--csv", type=Path, default=None, help="Export the best path table to CSV"
    )

    subparsers.add_parser("samples", help="List built-in sample matrices")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _solve(
            matrix_file=args.matrix,
            sample=args.sample,
            key=args.key,
            topological=args.topological,
            cypher=args.cypher,
            results=args.results,
            csv=args.csv,
        )
    elif args.command == "samples":
        _list_samples()


if __name__ == "__main__":
    main()
