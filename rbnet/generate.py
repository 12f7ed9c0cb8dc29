#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Random generation of function tables, wiring diagrams and whole random
Boolean networks with a fixed in-degree K and no self-regulation.

Every generator takes an ``rng`` keyword, coerced by ``utils._coerce_rng``.
Passing the same seed reproduces topology, function tables and initial state
bit for bit.
"""

##Imports
import numpy as np

try:
    import rbnet.utils as utils
    from rbnet.boolean_function import BooleanFunction, MAX_K
    from rbnet.boolean_network import RandomBooleanNetwork
    from rbnet.wiring_diagram import WiringDiagram
    from rbnet.errors import InvalidParameterError
except ModuleNotFoundError:
    import utils
    from boolean_function import BooleanFunction, MAX_K
    from boolean_network import RandomBooleanNetwork
    from wiring_diagram import WiringDiagram
    from errors import InvalidParameterError


__all__ = [
    "random_function_table",
    "random_initial_state",
    "random_predecessors",
    "random_wiring_diagram",
    "create_network",
]


def _check_network_parameters(N : int, K : int) -> None:
    if not utils.is_integer(N) or not utils.is_integer(K):
        raise InvalidParameterError(f"N and K must be integers, got N={N!r}, K={K!r}")
    if N <= 0:
        raise InvalidParameterError(f"N must be positive, got N={N}")
    if K < 0:
        raise InvalidParameterError(f"K must be non-negative, got K={K}")
    if N <= K:
        raise InvalidParameterError(f"Cannot select K={K} distinct predecessors other than the node itself among N={N} nodes. N > K required.")
    if K > MAX_K:
        raise InvalidParameterError(f"K={K} exceeds the largest supported in-degree {MAX_K}")


## Random function generation

def random_function_table(K : int, *, rng=None) -> BooleanFunction:
    """
    Draw a function table with K inputs uniformly from [0, 2^(2^K) - 1].

    Each of the 2^K outputs is an independent fair coin flip, which makes
    every table value equally likely.

    **Parameters:**

        - K (int): Number of inputs, 0 <= K <= MAX_K.

        - rng (None, optional): Argument for the random number generator,
          implemented in 'utils._coerce_rng'.

    **Returns:**

        - BooleanFunction: Function table object.
    """
    if not utils.is_integer(K) or not 0 <= K <= MAX_K:
        raise InvalidParameterError(f"K must be an integer between 0 and {MAX_K}, got {K!r}")
    rng = utils._coerce_rng(rng)
    return BooleanFunction.from_truth_table(rng.integers(2, size=2**K))


def random_initial_state(N : int, *, rng=None) -> np.ndarray:
    """
    Draw N node states uniformly from {0, 1}.
    """
    rng = utils._coerce_rng(rng)
    return rng.integers(2, size=N).astype(np.uint8)


## Random wiring diagram generation

def random_predecessors(N : int, K : int, successor : int, *, rng=None) -> np.ndarray:
    """
    Choose K distinct predecessors of node ``successor`` uniformly among the
    N-1 other nodes.

    A random permutation of all N node indices is drawn and its first K
    entries other than ``successor`` are taken.

    **Parameters:**

        - N (int): Number of nodes.
        - K (int): Number of predecessors, K < N.
        - successor (int): Index of the node receiving the edges.

        - rng (None, optional): Argument for the random number generator,
          implemented in 'utils._coerce_rng'.

    **Returns:**

        - np.array[int]: The K predecessors in the order they were drawn.
    """
    _check_network_parameters(N, K)
    if not utils.is_integer(successor) or not 0 <= successor < N:
        raise InvalidParameterError(f"successor must be a node index in 0..{N - 1}, got {successor!r}")
    rng = utils._coerce_rng(rng)
    indices = rng.permutation(N)
    predecessors = []
    index = 0
    while len(predecessors) < K:
        candidate = int(indices[index])
        if candidate != successor: # no self-regulation
            predecessors.append(candidate)
        index += 1
    return np.array(predecessors, dtype=int)


def random_wiring_diagram(N : int, K : int, *, rng=None) -> WiringDiagram:
    """
    Generate a wiring diagram of N nodes in which every node has exactly K
    distinct predecessors and none regulates itself.

    Different successors may share predecessors, so out-degrees vary.

    **Parameters:**

        - N (int): Number of nodes, N > K.
        - K (int): Constant in-degree.

        - rng (None, optional): Argument for the random number generator,
          implemented in 'utils._coerce_rng'.

    **Returns:**

        - WiringDiagram
    """
    _check_network_parameters(N, K)
    rng = utils._coerce_rng(rng)
    I = [random_predecessors(N, K, i, rng=rng) for i in range(N)]
    return WiringDiagram(I)


## Random network generation

def create_network(N : int, K : int, seed : int = None, *, rng=None,
    VERBOSE : bool = False) -> RandomBooleanNetwork:
    """
    Build a random Boolean network of N nodes with in-degree K.

    Nodes are created in index order, each receiving a random function table
    followed by a random initial state. The wiring is drawn afterwards, one
    successor at a time.

    **Parameters:**

        - N (int): Number of nodes, N >= 1.
        - K (int): In-degree of every node, 0 <= K < N and K <= MAX_K.
        - seed (int, optional): Seed of the random number generator.

        - rng (None, optional): Argument for the random number generator,
          implemented in 'utils._coerce_rng'. Cannot be combined with seed.

        - VERBOSE (bool, optional): If True, print a line announcing the
          network size before building it.

    **Returns:**

        - RandomBooleanNetwork

    **Raises:**

        - InvalidParameterError: If N <= 0, K < 0, N <= K or K > MAX_K.

    **Examples:**

        >>> bn = create_network(4, 1, seed=0)
        >>> bn.run(3)  # prints 4 lines of 4 characters
    """
    _check_network_parameters(N, K)
    if seed is not None and rng is not None:
        raise InvalidParameterError("Provide either seed or rng, not both")
    rng = utils._coerce_rng(seed if seed is not None else rng)

    if VERBOSE:
        print(f"Creating RBN with N = {N}, K = {K}")

    F = []
    initial_state = np.zeros(N, dtype=np.uint8)
    for i in range(N):
        F.append(random_function_table(K, rng=rng))
        initial_state[i] = rng.integers(2)
    I = random_wiring_diagram(N, K, rng=rng)
    return RandomBooleanNetwork(F, I, initial_state)
