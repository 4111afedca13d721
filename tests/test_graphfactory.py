from plotviewer.graphfactory import GraphFactory
from plotviewer.graphs import GraphType, LineGraph, ScatterGraph


def test_builtin_graphs_are_always_present():
    factory = GraphFactory()
    assert isinstance(factory.get_graph(GraphType.LINE), LineGraph)
    assert isinstance(factory.get_graph(GraphType.SCATTER), ScatterGraph)
    assert len(factory.graphs()) == len(GraphType)


def test_given_graph_is_used():
    line = LineGraph()
    factory = GraphFactory([line])
    assert factory.get_graph(GraphType.LINE) is line


def test_first_graph_of_a_type_wins():
    first = ScatterGraph()
    second = ScatterGraph()
    factory = GraphFactory([first, second])
    assert factory.get_graph(GraphType.SCATTER) is first


def test_missing_entries_are_skipped():
    scatter = ScatterGraph()
    factory = GraphFactory([None, scatter])
    assert factory.get_graph(GraphType.SCATTER) is scatter
    assert None not in factory.graphs()


def test_graphs_lists_registered_renderers_first():
    scatter = ScatterGraph()
    factory = GraphFactory([scatter])
    graphs = factory.graphs()
    assert graphs[0] is scatter
    assert {graph.graph_type for graph in graphs} == set(GraphType)