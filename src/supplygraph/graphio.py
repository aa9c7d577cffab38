from pathlib import Path
import logging
import yaml
from pydantic import ValidationError
from .ir import Graph

logger = logging.getLogger(__name__)

class GraphLoadError(ValueError):
    """Raised when a graph document cannot be read or does not match the IR."""

def load_graph(path: Path) -> Graph:
    """Read a YAML (or JSON) graph document with `nodes`, `edges` and optional `metadata`."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise GraphLoadError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise GraphLoadError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise GraphLoadError(f"{path} must contain a mapping with 'nodes' and 'edges'")
    try:
        graph = Graph(**data)
    except ValidationError as e:
        raise GraphLoadError(f"{path} does not describe a graph: {e}") from e

    logger.debug(f"Loaded {len(graph.nodes)} nodes and {len(graph.edges)} edges from {path}")
    return graph

def save_graph_yaml(graph: Graph, path: Path):
    data = graph.model_dump(by_alias=True, exclude_none=True)
    Path(path).write_text(yaml.safe_dump(data, sort_keys=False))
