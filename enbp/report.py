"""Tabular summaries of computed paths."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import pandas as pd

from enbp.path import Path

COLUMNS = ["path", "nodes", "num_nodes", "weight", "src_node", "dst_node"]


def paths_to_dict(paths: Sequence[Path]) -> List[Dict[str, Any]]:
    """Return JSON-serializable records, one per path, in input order."""
    return [{"path": idx, **path.to_dict()} for idx, path in enumerate(paths)]


def paths_to_dataframe(paths: Sequence[Path]) -> pd.DataFrame:
    """Return one row per path.

    Columns: ``path`` (position), ``nodes`` (space-separated ids),
    ``num_nodes``, ``weight`` (average edge weight), ``src_node``, ``dst_node``.
    """
    rows = [
        {
            "path": idx,
            "nodes": " ".join(str(n) for n in path.nodes),
            "num_nodes": path.node_count,
            "weight": path.weight,
            "src_node": path.src_node,
            "dst_node": path.dst_node,
        }
        for idx, path in enumerate(paths)
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
