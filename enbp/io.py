"""Reading and writing weight matrices.

Matrices are stored in YAML. Two layouts are accepted under the matrix key:

- the OpenCV ``FileStorage`` layout (optionally tagged ``!!opencv-matrix``)::

    %YAML:1.0
    data: !!opencv-matrix
       rows: 2
       cols: 2
       dt: f
       data: [ 0., 0.5, 0., 0. ]

- a plain nested list of rows::

    data:
      - [0.0, 0.5]
      - [0.0, 0.0]

``to_cypher`` renders a matrix as Cypher ``MERGE`` statements so the graph can
be inspected in Neo4j.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import yaml

from enbp.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

OPENCV_MATRIX_TAG = "tag:yaml.org,2002:opencv-matrix"


class _MatrixLoader(yaml.SafeLoader):
    """SafeLoader that understands the ``!!opencv-matrix`` tag."""


def _construct_opencv_matrix(loader: yaml.SafeLoader, node: yaml.Node) -> Dict[str, Any]:
    return loader.construct_mapping(node, deep=True)


_MatrixLoader.add_constructor(OPENCV_MATRIX_TAG, _construct_opencv_matrix)


def _strip_opencv_directive(text: str) -> str:
    # OpenCV writes "%YAML:1.0", which is not a valid YAML directive.
    lines = text.splitlines()
    if lines and lines[0].startswith("%YAML:"):
        lines = lines[1:]
    return "\n".join(lines)


def parse_matrix(text: str, key: str = "data") -> np.ndarray:
    """Parse a YAML document and return the matrix stored under ``key``.

    Args:
        text: YAML document.
        key: Top-level key holding the matrix.

    Returns:
        The matrix as a float64 array. Values are not validated here; see
        ``enbp.matrix.as_weight_matrix``.

    Raises:
        ValueError: If the key is missing or the matrix layout is malformed.
    """
    document = yaml.load(_strip_opencv_directive(text), Loader=_MatrixLoader)
    if not isinstance(document, dict) or key not in document:
        raise ValueError(f"Matrix key '{key}' not found in document")

    value = document[key]
    if isinstance(value, dict):
        missing = [f for f in ("rows", "cols", "data") if f not in value]
        if missing:
            raise ValueError(f"Matrix mapping is missing field(s): {', '.join(missing)}")
        rows, cols = int(value["rows"]), int(value["cols"])
        flat = list(value["data"] or [])
        if len(flat) != rows * cols:
            raise ValueError(
                f"Matrix data has {len(flat)} value(s), expected {rows}x{cols}={rows * cols}"
            )
        return np.asarray(flat, dtype=np.float64).reshape(rows, cols)

    if isinstance(value, list):
        try:
            return np.asarray(value, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Malformed matrix rows: {exc}") from None

    raise ValueError(
        f"Matrix under '{key}' must be a mapping or a list of rows, "
        f"got {type(value).__name__}"
    )


def load_matrix(path: PathLike, key: str = "data") -> np.ndarray:
    """Load a weight matrix from a YAML file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document does not hold a matrix under ``key``.
    """
    path = Path(path)
    logger.debug("Loading matrix '%s' from %s", key, path)
    return parse_matrix(path.read_text(encoding="utf-8"), key=key)


def dump_matrix(matrix: Any, key: str = "data") -> str:
    """Return ``matrix`` as a YAML document in the OpenCV mapping layout."""
    arr = np.asarray(matrix, dtype=np.float64)
    rows, cols = arr.shape
    document = {
        key: {
            "rows": int(rows),
            "cols": int(cols),
            "dt": "d",
            "data": [float(v) for v in arr.ravel()],
        }
    }
    return yaml.safe_dump(document, default_flow_style=None, sort_keys=False)


def save_matrix(matrix: Any, path: PathLike, key: str = "data") -> None:
    """Write ``matrix`` to a YAML file readable by :func:`load_matrix`."""
    path = Path(path)
    path.write_text(dump_matrix(matrix, key=key), encoding="utf-8")
    logger.debug("Saved matrix '%s' to %s", key, path)


def to_cypher(matrix: Any) -> str:
    """Render the graph as Cypher ``MERGE`` statements.

    Each node becomes ``MERGE (idN:Node {name:'N'})`` and each edge
    ``MERGE (idI)-[:Link {cost:C}]->(idJ)`` where ``C = 1 - weight`` so that
    likely links are cheap.
    """
    arr = np.asarray(matrix, dtype=np.float64)
    lines: List[str] = [f"MERGE (id{n}:Node {{name:'{n}'}})" for n in range(arr.shape[0])]
    for i, j in zip(*np.nonzero(arr > 0.0)):
        cost = 1.0 - float(arr[i, j])
        lines.append(f"MERGE (id{i})-[:Link {{cost:{cost:.6g}}}]->(id{j})")
    return "\n".join(lines) + "\n"


def write_cypher(matrix: Any, path: PathLike) -> None:
    """Write :func:`to_cypher` output to ``path``."""
    path = Path(path)
    path.write_text(to_cypher(matrix), encoding="utf-8")
    logger.info("Cypher export written to %s", path)
