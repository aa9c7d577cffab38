"""
Supply-Chain Topology Engine

Pure structural queries over a snapshot of the participant graph:
- Cycle pre-check for a candidate edge (the chain must stay a DAG)
- Orphaned node detection
- Shortest path search and path materialization

Every function takes the full (nodes, edges) snapshot it needs, rebuilds its
adjacency per call and never mutates its inputs. Nodes and edges may be
``ir.Node``/``ir.Edge`` models or plain mappings with the same keys.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


def _field(obj: Any, key: str) -> Any:
    """Get a field from a mapping or a model."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _hashable(value: Any) -> bool:
    if value is None:
        return False
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _seeded_adjacency(nodes: Iterable[Any], edges: Iterable[Any]) -> Dict[Hashable, List[Hashable]]:
    """Adjacency keyed by node id; edges leaving unknown nodes are dropped."""
    adjacency: Dict[Hashable, List[Hashable]] = {}
    for node in nodes:
        node_id = _field(node, "id")
        if _hashable(node_id):
            adjacency.setdefault(node_id, [])

    for edge in edges:
        source, target = _field(edge, "source"), _field(edge, "target")
        if _hashable(source) and _hashable(target) and source in adjacency:
            adjacency[source].append(target)
    return adjacency


def _edge_adjacency(edges: Iterable[Any]) -> Dict[Hashable, List[Hashable]]:
    """Adjacency built from edges alone, in edge order."""
    adjacency: Dict[Hashable, List[Hashable]] = {}
    for edge in edges:
        source, target = _field(edge, "source"), _field(edge, "target")
        if _hashable(source) and _hashable(target):
            adjacency.setdefault(source, []).append(target)
    return adjacency


def _index_adjacency(
    adjacency: Mapping[Hashable, Sequence[Hashable]]
) -> Tuple[Dict[Hashable, int], List[List[int]]]:
    """
    Map ids to dense integer slots and translate the adjacency onto them.

    Targets that are not keys of ``adjacency`` get a slot with no successors.
    """
    index: Dict[Hashable, int] = {node_id: i for i, node_id in enumerate(adjacency)}
    successors: List[List[int]] = [[] for _ in index]

    for node_id, targets in adjacency.items():
        row = successors[index[node_id]]
        for target in targets:
            if target not in index:
                index[target] = len(successors)
                successors.append([])
            row.append(index[target])
    return index, successors


def _reaches_back_edge(
    successors: Sequence[Sequence[int]],
    start: int,
    visited: List[bool],
    on_stack: List[bool],
) -> bool:
    """
    Iterative DFS from ``start``.

    ``visited`` and ``on_stack`` are updated in place. Returns True as soon as
    a neighbor already on the current traversal stack is reached.
    """
    visited[start] = True
    on_stack[start] = True
    work = [(start, iter(successors[start]))]

    while work:
        node, pending = work[-1]
        for neighbor in pending:
            if on_stack[neighbor]:
                return True
            if not visited[neighbor]:
                visited[neighbor] = True
                on_stack[neighbor] = True
                work.append((neighbor, iter(successors[neighbor])))
                break
        else:
            on_stack[node] = False
            work.pop()

    return False


def would_create_cycle(
    nodes: Iterable[Any],
    edges: Iterable[Any],
    source_id: Hashable,
    target_id: Hashable,
) -> bool:
    """
    Check whether adding ``source_id -> target_id`` would create a cycle.

    Args:
        nodes: Current nodes, used to seed every id (edge-less ones included)
        edges: Existing edges
        source_id: Source of the candidate edge
        target_id: Target of the candidate edge

    Returns:
        True if the graph with the candidate edge contains a cycle. A
        self-loop always returns True. Ids that are not known nodes have no
        outgoing edges.
    """
    if source_id == target_id:
        logger.debug(f"Candidate edge {source_id}->{target_id} is a self-loop")
        return True

    adjacency = _seeded_adjacency(nodes, edges)
    if _hashable(source_id) and _hashable(target_id) and source_id in adjacency:
        adjacency[source_id].append(target_id)

    _, successors = _index_adjacency(adjacency)
    visited = [False] * len(successors)
    on_stack = [False] * len(successors)

    for start in range(len(successors)):
        if not visited[start] and _reaches_back_edge(successors, start, visited, on_stack):
            logger.debug(f"Candidate edge {source_id}->{target_id} closes a cycle")
            return True

    return False


def find_orphaned_nodes(nodes: Iterable[Any], edges: Iterable[Any]) -> List[Any]:
    """Ids of nodes that are neither source nor target of any edge, in input order."""
    connected = set()
    for edge in edges:
        for key in ("source", "target"):
            endpoint = _field(edge, key)
            if _hashable(endpoint):
                connected.add(endpoint)

    orphans = []
    for node in nodes:
        node_id = _field(node, "id")
        if not _hashable(node_id) or node_id not in connected:
            orphans.append(node_id)
    return orphans


def find_shortest_path(edges: Iterable[Any], source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
    """
    Breadth-first search for the minimum-hop path from ``source`` to ``target``.

    Neighbors are explored in edge order, so among equally short paths the
    one discovered first wins. ``source == target`` yields ``[source]``.
    Returns None when ``target`` is unreachable.
    """
    if source == target:
        return [source]
    if not _hashable(source) or not _hashable(target):
        return None

    adjacency = _edge_adjacency(edges)
    parents: Dict[Hashable, Optional[Hashable]] = {source: None}
    queue = deque([source])

    while queue:
        node = queue.popleft()
        for neighbor in adjacency.get(node, ()):
            if neighbor in parents:
                continue
            parents[neighbor] = node
            if neighbor == target:
                return _unwind(parents, target)
            queue.append(neighbor)

    return None


def find_path(edges: Iterable[Any], source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
    """Reachability query; same result as ``find_shortest_path``."""
    return find_shortest_path(edges, source, target)


def _unwind(parents: Mapping[Hashable, Optional[Hashable]], target: Hashable) -> List[Hashable]:
    path = [target]
    while parents[path[-1]] is not None:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def get_nodes_in_path(nodes_by_id: Mapping[Hashable, Any], path: Optional[Sequence[Hashable]]) -> List[Any]:
    """Node objects along ``path``; ids missing from ``nodes_by_id`` are dropped."""
    result = []
    for node_id in path or ():
        node = nodes_by_id.get(node_id) if _hashable(node_id) else None
        if node is not None:
            result.append(node)
    return result


def get_edges_in_path(edges: Iterable[Any], path: Optional[Sequence[Hashable]]) -> List[Any]:
    """
    Edge objects joining consecutive ids of ``path``.

    The first edge matching each (source, target) pair is used; pairs with no
    matching edge are skipped.
    """
    by_pair: Dict[Tuple[Hashable, Hashable], Any] = {}
    for edge in edges:
        pair = (_field(edge, "source"), _field(edge, "target"))
        if _hashable(pair[0]) and _hashable(pair[1]):
            by_pair.setdefault(pair, edge)

    path = list(path or ())
    result = []
    for source_id, target_id in zip(path, path[1:]):
        edge = by_pair.get((source_id, target_id)) if _hashable(source_id) and _hashable(target_id) else None
        if edge is not None:
            result.append(edge)
    return result
