import networkx as nx
import pytest

from supplygraph.engine import (
    find_orphaned_nodes,
    find_path,
    find_shortest_path,
    get_edges_in_path,
    get_nodes_in_path,
    would_create_cycle,
)
from supplygraph.ir import Edge, Node

def _nodes(*ids):
    return [Node(id=i) for i in ids]

def _edges(*pairs):
    return [Edge(source=s, target=t, id=f"{s}-{t}") for s, t in pairs]

@pytest.mark.parametrize("node_id", ["A", "B", "nowhere"])
def test_self_loop_always_cycles(node_id):
    assert would_create_cycle(_nodes("A", "B"), _edges(("A", "B")), node_id, node_id)
    assert would_create_cycle([], [], node_id, node_id)

def test_closing_edge_creates_cycle():
    nodes = _nodes("A", "B", "C")
    edges = _edges(("A", "B"), ("B", "C"))
    assert would_create_cycle(nodes, edges, "C", "A") is True

def test_shortcut_edge_keeps_dag():
    nodes = _nodes("A", "B", "C")
    edges = _edges(("A", "B"), ("B", "C"))
    assert would_create_cycle(nodes, edges, "A", "C") is False

def test_unknown_ids_are_sinks():
    nodes = _nodes("A", "B")
    edges = _edges(("A", "B"))
    assert would_create_cycle(nodes, edges, "B", "Z") is False
    # Z is not a node, so the candidate edge from it is never followed
    assert would_create_cycle(nodes, edges, "Z", "A") is False

def test_existing_cycle_elsewhere_is_reported():
    nodes = _nodes("A", "B", "X", "Y")
    edges = _edges(("X", "Y"), ("Y", "X"))
    assert would_create_cycle(nodes, edges, "A", "B") is True

def test_accepts_plain_mappings():
    nodes = [{"id": "A"}, {"id": "B"}, {"id": "C"}]
    edges = [{"source": "A", "target": "B"}, {"source": "B", "target": "C"}]
    assert would_create_cycle(nodes, edges, "C", "A") is True
    assert would_create_cycle(nodes, edges, "A", "C") is False

def test_malformed_entries_do_not_raise():
    nodes = [{"id": "A"}, {"id": None}, {"name": "no id"}, {"id": ["unhashable"]}]
    edges = [{"source": "A"}, {"source": ["x"], "target": "A"}, {"source": "A", "target": "B"}]
    assert would_create_cycle(nodes, edges, "B", "A") is False
    assert find_shortest_path(edges, "A", "B") == ["A", "B"]

def test_does_not_mutate_inputs():
    nodes = _nodes("A", "B", "C")
    edges = _edges(("A", "B"), ("B", "C"))
    before = [e.model_dump() for e in edges]
    would_create_cycle(nodes, edges, "C", "A")
    assert [e.model_dump() for e in edges] == before
    assert len(edges) == 2

def test_long_chain_does_not_exhaust_stack():
    size = 20000
    ids = [f"n{i}" for i in range(size)]
    nodes = _nodes(*ids)
    edges = _edges(*zip(ids, ids[1:]))
    assert would_create_cycle(nodes, edges, ids[-1], ids[0]) is True
    assert would_create_cycle(nodes, edges, ids[0], ids[-1]) is False

def test_matches_networkx_on_small_graphs():
    ids = ["S", "M1", "M2", "D", "C"]
    edges = _edges(("S", "M1"), ("S", "M2"), ("M1", "D"), ("M2", "D"), ("D", "C"))
    for source in ids:
        for target in ids:
            g = nx.DiGraph([(e.source, e.target) for e in edges])
            g.add_nodes_from(ids)
            g.add_edge(source, target)
            expected = not nx.is_directed_acyclic_graph(g)
            assert would_create_cycle(_nodes(*ids), edges, source, target) == expected, (source, target)

def test_repeated_calls_are_identical():
    nodes = _nodes("A", "B", "C")
    edges = _edges(("A", "B"), ("B", "C"))
    results = {would_create_cycle(nodes, edges, "C", "A") for _ in range(5)}
    assert results == {True}
    paths = [find_shortest_path(edges, "A", "C") for _ in range(5)]
    assert all(p == ["A", "B", "C"] for p in paths)

def test_orphans_in_input_order():
    nodes = _nodes("D", "A", "B", "E")
    edges = _edges(("A", "B"))
    assert find_orphaned_nodes(nodes, edges) == ["D", "E"]

def test_orphans_empty_when_all_connected():
    assert find_orphaned_nodes(_nodes("A", "B"), _edges(("A", "B"))) == []

def test_orphan_example():
    assert find_orphaned_nodes(_nodes("A", "B", "D"), _edges(("A", "B"))) == ["D"]

def test_shortest_path_prefers_direct_edge():
    edges = _edges(("A", "B"), ("B", "C"), ("A", "C"))
    assert find_shortest_path(edges, "A", "C") == ["A", "C"]

def test_unreachable_target():
    assert find_shortest_path(_edges(("A", "B")), "A", "Z") is None
    assert find_path(_edges(("A", "B")), "B", "A") is None

def test_same_source_and_target_is_trivial_path():
    assert find_shortest_path([], "A", "A") == ["A"]
    assert find_path(_edges(("A", "B")), "A", "A") == ["A"]

def test_path_search_tolerates_cycles():
    edges = _edges(("A", "B"), ("B", "A"), ("B", "C"))
    assert find_path(edges, "A", "C") == ["A", "B", "C"]
    assert find_path(edges, "C", "A") is None

def test_tie_break_follows_edge_order():
    edges = _edges(("A", "X"), ("A", "Y"), ("Y", "T"), ("X", "T"))
    assert find_shortest_path(edges, "A", "T") == ["A", "X", "T"]

def test_find_path_matches_shortest_path():
    edges = _edges(("S", "M"), ("M", "D"), ("D", "C"), ("S", "D"))
    assert find_path(edges, "S", "C") == find_shortest_path(edges, "S", "C") == ["S", "D", "C"]

def test_edges_in_path_match_consecutive_pairs():
    edges = _edges(("S", "M"), ("M", "D"), ("D", "C"), ("S", "D"))
    p = find_shortest_path(edges, "S", "C")
    found = get_edges_in_path(edges, p)
    assert len(found) == len(p) - 1
    assert [(e.source, e.target) for e in found] == list(zip(p, p[1:]))

def test_edges_in_path_skip_missing_pairs_and_take_first_match():
    first = Edge(source="A", target="B", id="first")
    second = Edge(source="A", target="B", id="second")
    found = get_edges_in_path([first, second], ["A", "B", "C"])
    assert found == [first]
    assert get_edges_in_path([first], []) == []
    assert get_edges_in_path([first], None) == []

def test_nodes_in_path_drop_unknown_ids():
    nodes = {n.id: n for n in _nodes("A", "B")}
    assert [n.id for n in get_nodes_in_path(nodes, ["A", "Z", "B"])] == ["A", "B"]
    assert get_nodes_in_path(nodes, None) == []
