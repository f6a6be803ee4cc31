import pytest

from glslmerge.errors import AmbiguousEntryError, CyclicDependencyError
from glslmerge.graph import build_graph
from glslmerge.order import topological_order


def _assert_valid(order, graph):
    position = {name: i for i, name in enumerate(order)}
    for name, refs in graph.forward.items():
        for ref in refs:
            assert position[name] < position[ref]


def test_chain_order():
    graph = build_graph({"a": "#include <b>", "b": "#include <c>", "c": ""})
    assert topological_order(graph) == ["a", "b", "c"]


def test_diamond_entry_first_leaves_last():
    sources = {
        "leaf": "L",
        "left": "#include <leaf>",
        "main": "#include <left>\n#include <right>",
        "right": "#include <leaf>",
    }
    graph = build_graph(sources)
    order = topological_order(graph)

    assert order[0] == "main"
    assert order[-1] == "leaf"
    assert sorted(order) == sorted(sources)
    _assert_valid(order, graph)


def test_two_entries_are_ambiguous():
    graph = build_graph({"base0": "#include <a>", "base1": "#include <a>", "a": ""})
    with pytest.raises(AmbiguousEntryError) as excinfo:
        topological_order(graph)
    assert excinfo.value.candidates == ["base0", "base1"]


def test_unrelated_fragments_are_ambiguous():
    graph = build_graph({"a": "A", "b": "B"})
    with pytest.raises(AmbiguousEntryError):
        topological_order(graph)


def test_no_entry_is_ambiguous():
    graph = build_graph({"a": "#include <b>", "b": "#include <a>"})
    with pytest.raises(AmbiguousEntryError) as excinfo:
        topological_order(graph)
    assert excinfo.value.candidates == []


def test_empty_graph_is_ambiguous():
    with pytest.raises(AmbiguousEntryError):
        topological_order(build_graph({}))


def test_cycle_below_entry():
    sources = {
        "base": "#include <incl0>",
        "incl0": "#include <incl1>",
        "incl1": "#include <incl2>",
        "incl2": "#include <incl0>",
    }
    with pytest.raises(CyclicDependencyError) as excinfo:
        topological_order(build_graph(sources))
    assert excinfo.value.names == ["incl0", "incl1", "incl2"]


def test_cycle_disconnected_from_entry():
    sources = {
        "main": "#include <a>",
        "a": "A",
        "x": "#include <y>",
        "y": "#include <x>",
    }
    with pytest.raises(CyclicDependencyError) as excinfo:
        topological_order(build_graph(sources))
    assert excinfo.value.names == ["x", "y"]


def test_self_include_is_cycle():
    with pytest.raises(CyclicDependencyError):
        topological_order(build_graph({"main": "#include <a>", "a": "#include <a>"}))
