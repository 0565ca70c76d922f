"""Renderer-facing JSON payloads for lattice graphs.

Functions
---------
- :func:`graph_payload` — build the export dict for a :class:`LatticeGraph`
- :func:`validate_graph_payload` — check a payload against :data:`GRAPH_SCHEMA`
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .graph import LatticeGraph
from .models import EDGE_TYPES

_EXPORT_VERSION = "1.0"

_NUMBER = {"type": "number"}

GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "jilattice graph",
    "type": "object",
    "required": ["version", "metadata", "vertices", "edges"],
    "properties": {
        "version": {"type": "string"},
        "metadata": {
            "type": "object",
            "required": ["dimensions", "vertex_count", "edge_count"],
            "properties": {
                "dimensions": {"enum": [2, 3]},
                "vertex_count": {"type": "integer", "minimum": 0},
                "edge_count": {"type": "integer", "minimum": 0},
                "edge_types": {
                    "type": "object",
                    "additionalProperties": {"type": "integer", "minimum": 0},
                },
            },
        },
        "vertices": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["x", "y"],
                "properties": {
                    "x": _NUMBER,
                    "y": _NUMBER,
                    "z": _NUMBER,
                    "index": {"type": ["integer", "null"]},
                    "indices": {"type": "array", "items": {"type": "integer"}},
                },
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["x1", "y1", "x2", "y2", "type"],
                "properties": {
                    "x1": _NUMBER,
                    "y1": _NUMBER,
                    "z1": _NUMBER,
                    "x2": _NUMBER,
                    "y2": _NUMBER,
                    "z2": _NUMBER,
                    "type": {"enum": list(EDGE_TYPES)},
                },
            },
        },
    },
}


def graph_payload(
    graph: LatticeGraph,
    metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build a JSON-serialisable export of *graph*.

    *metadata* entries are merged over the generated ones (dimensions,
    counts and the number of edges per type).
    """
    payload = graph.to_dict()
    meta: Dict[str, Any] = dict(graph.metadata)
    meta.update({
        "dimensions": graph.dimensions,
        "vertex_count": len(graph.vertices),
        "edge_count": len(graph.edges),
        "edge_types": dict(graph.edge_counts()),
        "generator": "jilattice.export",
    })
    if metadata:
        meta.update(metadata)
    payload["version"] = _EXPORT_VERSION
    payload["metadata"] = meta
    return payload


def validate_graph_payload(payload: Dict[str, Any]) -> List[str]:
    """Validate *payload* against :data:`GRAPH_SCHEMA`.

    Returns a list of error messages (empty = valid).  Count mismatches
    between metadata and content are reported as well.
    """
    try:
        import jsonschema
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "Payload validation requires jsonschema. Install with `pip install jsonschema`."
        ) from exc

    validator = jsonschema.Draft202012Validator(GRAPH_SCHEMA)
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path]):
        location = "/".join(str(p) for p in error.path) or "<root>"
        errors.append(f"{location}: {error.message}")
    if errors:
        return errors

    meta = payload["metadata"]
    if meta["vertex_count"] != len(payload["vertices"]):
        errors.append(
            f"vertex_count mismatch: metadata says {meta['vertex_count']}, "
            f"got {len(payload['vertices'])}"
        )
    if meta["edge_count"] != len(payload["edges"]):
        errors.append(
            f"edge_count mismatch: metadata says {meta['edge_count']}, "
            f"got {len(payload['edges'])}"
        )
    return errors
