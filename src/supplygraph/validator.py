from pathlib import Path
import logging
import networkx as nx
from typing import Tuple, List
from .engine import find_orphaned_nodes
from .graphio import load_graph
from .ir import Graph
from .status import is_known_role, is_known_status

logger = logging.getLogger(__name__)

def validate_graph(g: Graph) -> Tuple[bool, List[str]]:
    """Structural report for a whole graph. Only `ERR:` messages fail it."""
    messages: List[str] = []
    ok = True

    ids = g.node_ids()
    node_ids = set(ids)
    # 1) Unique node ids
    if len(node_ids) != len(ids):
        ok = False
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        messages.append(f"ERR: Duplicate node IDs detected: {', '.join(dupes)}.")
    else:
        messages.append("OK: Node IDs are unique.")

    # 2) Edges refer to existing nodes
    dangling = False
    for e in g.edges:
        if e.source not in node_ids or e.target not in node_ids:
            dangling = True
            messages.append(f"ERR: Edge {e.source}->{e.target} references missing node(s).")
    if dangling:
        ok = False
    else:
        messages.append("OK: All edges reference existing nodes.")

    # 3) No self-loops
    loops = [e for e in g.edges if e.source == e.target]
    for e in loops:
        messages.append(f"ERR: Edge {e.source}->{e.target} is a self-loop.")
    if loops:
        ok = False

    # 4) Acyclic check
    nxg = nx.DiGraph()
    nxg.add_nodes_from(ids)
    for e in g.edges:
        if e.source != e.target:
            nxg.add_edge(e.source, e.target)
    try:
        cycle = nx.find_cycle(nxg)
    except nx.NetworkXNoCycle:
        if not loops:
            messages.append("OK: Graph is acyclic.")
    else:
        ok = False
        trail = " -> ".join([u for u, _ in cycle] + [cycle[0][0]])
        messages.append(f"ERR: Cycle detected in the graph: {trail}.")

    # 5) Orphans are reported but do not fail the graph
    orphans = find_orphaned_nodes(g.nodes, g.edges)
    if orphans:
        messages.append(f"WARN: Orphaned node(s) with no edges: {', '.join(orphans)}.")
    else:
        messages.append("OK: Every node has at least one edge.")

    # 6) Status/role vocabulary
    for n in g.nodes:
        if n.status is not None and not is_known_status(n.status):
            messages.append(f"WARN: Node {n.id} has unknown status '{n.status}'.")
        if n.role is not None and not is_known_role(n.role):
            messages.append(f"WARN: Node {n.id} has unknown role '{n.role}'.")

    logger.info(f"Validation complete: {'ok' if ok else 'failed'} ({len(messages)} messages)")
    return ok, messages

def validate_graph_from_file(path: Path) -> Tuple[bool, List[str]]:
    return validate_graph(load_graph(path))
