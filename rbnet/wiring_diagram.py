#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Wiring-diagram representation for random Boolean networks.

This module defines the :class:`~rbnet.WiringDiagram` class, which encodes
the directed topology of a network independently of any update functions.

For each node the wiring diagram stores the indices of its predecessors
(regulators) in ascending order. That order is the canonical order used to
assign bit positions when a node's input pattern is formed: the predecessor
with the smallest index is the most significant bit. Once constructed, a
wiring diagram never changes.
"""

import warnings
from collections.abc import Sequence

import numpy as np
import networkx as nx

try:
    from rbnet.errors import InvalidParameterError, InternalConsistencyError
except ModuleNotFoundError:
    from errors import InvalidParameterError, InternalConsistencyError


__all__ = [
    "WiringDiagram",
]

class WiringDiagram(object):
    """
    Directed wiring diagram of a random Boolean network.

    Parameters
    ----------
    I : sequence of sequences of int
        Adjacency-list representation of the wiring diagram.
        Entry ``I[i]`` contains the indices of the predecessors of node ``i``.
    variables : list[str] or np.ndarray[str], optional
        Names of the variables corresponding to each node.
        Must have length ``N`` if provided. If None, default names
        ``['x0', 'x1', ..., 'x{N-1}']`` are assigned.

    Attributes
    ----------
    I : tuple[np.ndarray]
        Read-only predecessor index arrays, one per node, sorted ascending.
    variables : np.ndarray[str]
        Names of variables corresponding to each node.
    N : int
        Total number of nodes.
    indegrees : np.ndarray[int]
        Indegree of each node.
    outdegrees : np.ndarray[int]
        Outdegree of each node.

    Notes
    -----
    - Node indices are zero-based.
    - Duplicates and self-loops are not rejected here; they are reported by
      :meth:`check_fixed_indegree`, which the simulation calls every step.

    Examples
    --------
    >>> from rbnet import WiringDiagram
    >>> W = WiringDiagram([[1, 2], [2, 0], [0, 1]])
    >>> W.N
    3
    >>> W.has_edge(2, 1)
    True
    >>> W.check_fixed_indegree(2)
    """

    def __init__(
        self,
        I : Sequence[Sequence[int]],
        variables : list[str] | np.ndarray | None = None,
    ):
        if not isinstance(I, (Sequence, np.ndarray)) or isinstance(I, (str, bytes)):
            raise TypeError("I must be a sequence of sequences of int")

        if variables is not None and len(I) != len(variables):
            raise InvalidParameterError("len(I) == len(variables) required if variable names are provided")

        regulator_arrays = []
        for regulators in I:
            regulators = np.sort(np.array(regulators, dtype=int).reshape(-1))
            regulators.setflags(write=False)
            regulator_arrays.append(regulators)
        self.I = tuple(regulator_arrays)
        self.N = len(self.I)

        indegrees = np.array([len(regulators) for regulators in self.I], dtype=int)
        indegrees.setflags(write=False)
        self.indegrees = indegrees

        if variables is None:
            variables = ['x'+str(i) for i in range(self.N)]
        self.variables = np.array(variables, dtype=str)

        self.outdegrees = self.get_outdegrees()


    @classmethod
    def from_DiGraph(
        cls,
        nx_DiGraph: "nx.DiGraph",
    ) -> "WiringDiagram":
        """
        Construct a WiringDiagram from a NetworkX directed graph.

        Each directed edge ``u -> v`` means that ``u`` is a predecessor of
        ``v``. Nodes are indexed in the iteration order of
        ``nx_DiGraph.nodes``.

        Parameters
        ----------
        nx_DiGraph : nx.DiGraph
            Directed graph whose nodes represent variables.

        Returns
        -------
        WiringDiagram
        """
        if not isinstance(nx_DiGraph, nx.DiGraph):
            raise TypeError("nx_DiGraph must be a networkx.DiGraph")

        nodes = list(nx_DiGraph.nodes)
        node_to_idx = {node: i for i, node in enumerate(nodes)}

        variables = []
        for node in nodes:
            if 'name' in nx_DiGraph.nodes[node]:
                variables.append(str(nx_DiGraph.nodes[node]['name']))
            elif isinstance(node, str):
                variables.append(node)
            else:
                variables.append(f"x{node}")

        I = [[node_to_idx[r] for r in nx_DiGraph.predecessors(node)] for node in nodes]
        return cls(I=I, variables=variables)


    def to_DiGraph(self, USE_VARIABLE_NAMES: bool = True) -> nx.DiGraph:
        """
        Convert the wiring diagram into a NetworkX directed graph.

        Parameters
        ----------
        USE_VARIABLE_NAMES : bool, optional
            If True (default), nodes are labeled using the variable names.
            If False, nodes are labeled ``0, 1, ..., N-1``.

        Returns
        -------
        nx.DiGraph
        """
        G = nx.DiGraph()

        if USE_VARIABLE_NAMES:
            labels = [str(v) for v in self.variables]
        else:
            labels = list(range(self.N))

        G.add_nodes_from(labels)
        for target, regulators in enumerate(self.I):
            for regulator in regulators:
                G.add_edge(labels[int(regulator)], labels[target])
        return G

    def __str__(self):
        return (
            f"WiringDiagram(N={self.N}, "
            f"indegrees={self.indegrees.tolist()})"
        )

    def __getitem__(self, index):
        return self.I[index]

    def __repr__(self):
        return f"{type(self).__name__}(N={self.N})"

    def get_outdegrees(self) -> np.ndarray:
        """
        Compute the outdegree of each node, i.e. the number of nodes it feeds.
        """
        outdegrees = np.zeros(self.N, dtype=int)
        for regulators in self.I:
            for regulator in regulators:
                if 0 <= regulator < self.N:
                    outdegrees[regulator] += 1
        outdegrees.setflags(write=False)
        return outdegrees

    def has_edge(self, source : int, target : int) -> bool:
        """
        Whether ``source`` is a predecessor of ``target``.
        """
        return bool(np.any(self.I[target] == source))

    def get_edges(self) -> list[tuple[int, int]]:
        """
        All edges as (predecessor, successor) pairs, ordered by successor and
        then by predecessor.
        """
        return [(int(regulator), target) for target, regulators in enumerate(self.I)
                for regulator in regulators]

    def check_fixed_indegree(self, K : int) -> None:
        """
        Verify that every node has exactly K distinct predecessors, none of
        which is the node itself.

        Raises
        ------
        InternalConsistencyError
            On the first violated node.
        """
        for target, regulators in enumerate(self.I):
            if len(regulators) != K:
                raise InternalConsistencyError(
                    f"Node {target} has {len(regulators)} predecessors, expected {K}")
            if len(regulators) > 0 and (regulators[0] < 0 or regulators[-1] >= self.N):
                raise InternalConsistencyError(
                    f"Node {target} has a predecessor outside 0..{self.N - 1}")
            if np.any(regulators[1:] == regulators[:-1]):
                raise InternalConsistencyError(
                    f"Node {target} lists the same predecessor more than once")
            if np.any(regulators == target):
                raise InternalConsistencyError(
                    f"Node {target} regulates itself")

    def get_strongly_connected_components(self) -> list:
        """
        Compute the strongly connected components of the wiring diagram.

        Returns
        -------
        list of set of int
            Each component as a set of node indices.
        """
        G = self.to_DiGraph(USE_VARIABLE_NAMES=False)
        if G.number_of_edges() == 0 and self.N > 1:
            warnings.warn('The wiring diagram has no edges; every node is its own component', UserWarning)
        return list(nx.strongly_connected_components(G))
