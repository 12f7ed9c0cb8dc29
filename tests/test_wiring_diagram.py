#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import networkx as nx
import pytest

import rbnet
from rbnet import WiringDiagram, InternalConsistencyError, InvalidParameterError


def test_predecessors_are_sorted_and_read_only():
    W = WiringDiagram([[2, 1], [0, 2], [1, 0]])

    assert [regulators.tolist() for regulators in W.I] == [[1, 2], [0, 2], [0, 1]]
    assert W.indegrees.tolist() == [2, 2, 2]
    assert W.outdegrees.tolist() == [2, 2, 2]
    with pytest.raises(ValueError):
        W.I[0][0] = 0


def test_edges():
    W = WiringDiagram([[1], [2], [1]])

    assert W.get_edges() == [(1, 0), (2, 1), (1, 2)]
    assert W.has_edge(1, 0) and not W.has_edge(0, 1)
    assert W.outdegrees.tolist() == [0, 2, 1]
    assert W.variables.tolist() == ['x0', 'x1', 'x2']


def test_check_fixed_indegree():
    WiringDiagram([[1], [2], [0]]).check_fixed_indegree(1)

    with pytest.raises(InternalConsistencyError):
        WiringDiagram([[1], [2], [0]]).check_fixed_indegree(2)
    with pytest.raises(InternalConsistencyError):
        WiringDiagram([[1], [1], [0]]).check_fixed_indegree(1)
    with pytest.raises(InternalConsistencyError):
        WiringDiagram([[1, 1], [0, 2], [0, 1]]).check_fixed_indegree(2)
    with pytest.raises(InternalConsistencyError):
        WiringDiagram([[3], [0], [1]]).check_fixed_indegree(1)


def test_variables_length_mismatch():
    with pytest.raises(InvalidParameterError):
        WiringDiagram([[1], [0]], variables=['a'])
    with pytest.raises(TypeError):
        WiringDiagram("01")


def test_to_and_from_DiGraph():
    W = rbnet.random_wiring_diagram(8, 3, rng=21)

    G = W.to_DiGraph(USE_VARIABLE_NAMES=False)
    assert G.number_of_nodes() == 8
    assert G.number_of_edges() == 24
    assert all(G.in_degree(node) == 3 for node in G.nodes)

    W2 = WiringDiagram.from_DiGraph(G)
    assert W2.get_edges() == W.get_edges()


def test_from_DiGraph_names():
    G = nx.DiGraph()
    G.add_edges_from([('a', 'b'), ('b', 'a')])
    W = WiringDiagram.from_DiGraph(G)

    assert W.variables.tolist() == ['a', 'b']
    assert W.get_edges() == [(1, 0), (0, 1)]
    assert set(W.to_DiGraph().edges) == {('a', 'b'), ('b', 'a')}

    with pytest.raises(TypeError):
        WiringDiagram.from_DiGraph(nx.Graph())


def test_strongly_connected_components():
    ring = WiringDiagram([[2], [0], [1]])
    assert ring.get_strongly_connected_components() == [{0, 1, 2}]

    chain = WiringDiagram([[1], [2], [1]])
    components = chain.get_strongly_connected_components()
    assert sorted(map(sorted, components)) == [[0], [1, 2]]

    with pytest.warns(UserWarning):
        assert len(WiringDiagram([[], []]).get_strongly_connected_components()) == 2


def test_str_and_repr():
    W = WiringDiagram([[1], [0]])
    assert str(W) == "WiringDiagram(N=2, indegrees=[1, 1])"
    assert repr(W) == "WiringDiagram(N=2)"
