from pocketkit.graph import Graph


def _demo_graph():
    g = Graph()
    g.add_edge("a", "b")
    g.add_edge("c", "d")
    g.add_edge("a", "d")
    g.add_edge("d", "a")
    return g


def test_edges_present():
    g = _demo_graph()
    assert g.has_edge("a", "b") is True
    assert g.has_edge("c", "d") is True
    assert g.has_edge("a", "d") is True
    assert g.has_edge("d", "a") is True


def test_edges_absent():
    g = _demo_graph()
    assert g.has_edge("x", "b") is False
    assert g.has_edge("x", "d") is False
    assert g.has_edge("d", "x") is False
    assert g.has_edge("b", "a") is False


def test_adding_edge_twice_is_harmless():
    g = Graph()
    g.add_edge("p", "q")
    g.add_edge("p", "q")
    assert g.has_edge("p", "q") is True
    assert g.has_edge("q", "p") is False