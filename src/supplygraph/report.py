import networkx as nx
from typing import List, Optional
from .engine import find_shortest_path, get_edges_in_path, get_nodes_in_path
from .ir import Graph, Node
from .status import status_label

def _describe(node: Node) -> str:
    parts = [node.role or "Unassigned"]
    if node.status:
        parts.append(status_label(node.status))
    return f"{node.id} [{', '.join(parts)}]"

def ascii_plan(g: Graph) -> str:
    """List nodes in topological (upstream first) order with their outgoing flows."""
    nxg = nx.DiGraph()
    nxg.add_nodes_from(g.node_ids())
    for e in g.edges:
        nxg.add_edge(e.source, e.target, label=e.label or "")

    # raises nx.NetworkXUnfeasible on cyclic input
    order = list(nx.topological_sort(nxg))
    node_map = g.node_map()
    lines = ["# Supply chain plan (topological order)"]
    for i, nid in enumerate(order, 1):
        node = node_map.get(nid) or Node(id=nid)
        lines.append(f"{i:02d}. {_describe(node)}")
        for succ in nxg.successors(nid):
            elabel = nxg.get_edge_data(nid, succ)["label"]
            suffix = f"  ({elabel})" if elabel else ""
            lines.append(f"    └─▶ {succ}{suffix}")
    return "\n".join(lines)

def path_report(g: Graph, source: str, target: str) -> Optional[List[str]]:
    """Lines describing the shortest path, or None if there is none."""
    path = find_shortest_path(g.edges, source, target)
    if path is None:
        return None
    nodes = get_nodes_in_path(g.node_map(), path)
    edges = get_edges_in_path(g.edges, path)
    lines = [" -> ".join(path), f"{len(path) - 1} hop(s)"]
    lines.extend(f"node  {_describe(n)}" for n in nodes)
    for e in edges:
        label = f" ({e.label})" if e.label else ""
        lines.append(f"edge  {e.source} -> {e.target}{label}")
    return lines
