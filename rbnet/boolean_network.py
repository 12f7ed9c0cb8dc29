#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Random Boolean networks and their synchronous dynamics.

A :class:`RandomBooleanNetwork` couples a :class:`~rbnet.WiringDiagram` in
which every node has exactly K predecessors with one
:class:`~rbnet.BooleanFunction` per node and a current state vector. Each
simulation step forms every node's input pattern from one snapshot of the
state vector, looks up the corresponding bit of the node's function table and
only then replaces the whole state vector.
"""

import warnings

import numpy as np

from typing import Union

try:
    import rbnet.utils as utils
    from rbnet.boolean_function import BooleanFunction
    from rbnet.wiring_diagram import WiringDiagram
    from rbnet.errors import InvalidParameterError, InternalConsistencyError
except ModuleNotFoundError:
    import utils
    from boolean_function import BooleanFunction
    from wiring_diagram import WiringDiagram
    from errors import InvalidParameterError, InternalConsistencyError


__all__ = [
    "RandomBooleanNetwork",
    "step",
    "run",
]

class RandomBooleanNetwork(WiringDiagram):
    """
    A class representing a random Boolean network with N nodes of in-degree K.

    **Constructor Parameters:**

        - F (list[BooleanFunction | list[int]]): A list of N function tables,
          or of N truth table vectors of length 2^K.

        - I (list[list[int]] | WiringDiagram): The predecessors of each node.

        - initial_state (list[int] | np.array[int]): The N initial node
          states (0 or 1).

        - variables (list[str] | np.array[str], optional): Node names,
          default x0, ..., x{N-1}.

    **Members:**

        - F (list[BooleanFunction]): Function table of each node.
        - I (tuple[np.array[int]]): Sorted predecessors of each node.
        - K (int): The in-degree shared by all nodes.
        - N (int): The number of nodes.
        - state (np.array[np.uint8]): Current state vector.
        - inputs (np.array[int]): Input patterns computed in the last step.
        - n_steps (int): Number of completed steps.

    **Raises:**

        - InvalidParameterError: If the network is empty or the lengths of F,
          I and initial_state disagree, or the function tables do not share a
          common number of inputs.

    The wiring is not validated here. It is checked before every step, and a
    node without exactly K distinct, non-self predecessors aborts the
    simulation with an InternalConsistencyError.
    """

    def __init__(self, F : Union[list, np.ndarray], I : Union[list, WiringDiagram],
                 initial_state : Union[list, np.ndarray],
                 variables : Union[list, np.ndarray, None] = None):
        if isinstance(I, WiringDiagram):
            if variables is not None:
                warnings.warn('Values of provided variables ignored. Variables of the WiringDiagram are used instead.', UserWarning)
            super().__init__(I.I, I.variables)
        else:
            super().__init__(I, variables)

        if self.N == 0:
            raise InvalidParameterError("A random Boolean network needs at least one node")
        if len(F) != self.N:
            raise InvalidParameterError("len(F) == len(I) required")

        self.F = []
        for ii, f in enumerate(F):
            if isinstance(f, BooleanFunction):
                bf = BooleanFunction(f.table, f.n, name=str(self.variables[ii]))
            elif isinstance(f, (list, np.ndarray)):
                bf = BooleanFunction.from_truth_table(f, name=str(self.variables[ii]))
            else:
                raise TypeError(f"F holds invalid data type {type(f)} : Expected either list, np.array, or BooleanFunction")
            self.F.append(bf)

        self.K = self.F[0].n
        if any(bf.n != self.K for bf in self.F):
            raise InvalidParameterError("All function tables must have the same number of inputs K")

        self.state = self._as_state_vector(initial_state)
        self.inputs = np.zeros(self.N, dtype=np.int64)
        self.n_steps = 0

    def _as_state_vector(self, X : Union[list, np.ndarray]) -> np.ndarray:
        X = np.asarray(X)
        if X.shape != (self.N,):
            raise InvalidParameterError(f"A state vector must have length {self.N}")
        if not np.all((X == 0) | (X == 1)):
            raise InvalidParameterError("A state vector may only contain 0 and 1")
        return X.astype(np.uint8)

    def __len__(self):
        return self.N

    def __str__(self):
        return f"Random Boolean network of {self.N} nodes with in-degree {self.K}"

    def __getitem__(self, index):
        return self.F[index]

    def get_state_string(self) -> str:
        """
        The current state as N characters '0'/'1' in node order.
        """
        return utils.state_to_string(self.state)

    def get_input_patterns(self, X : Union[list, np.ndarray, None] = None) -> np.ndarray:
        """
        Compute the input pattern of every node for the state vector X.

        The predecessors of a node, in ascending index order, occupy bit
        positions K-1 down to 0 of its pattern. Predecessors in state 1
        set their bit.

        **Parameters:**

            - X (list[int] | np.array[int], optional): State vector; defaults
              to the current state.

        **Returns:**

            - np.array[int]: The N input patterns, each in [0, 2^K - 1].

        **Raises:**

            - InternalConsistencyError: If some node does not have exactly K
              distinct predecessors or regulates itself.
        """
        X = self.state if X is None else self._as_state_vector(X)
        self.check_fixed_indegree(self.K)
        patterns = np.zeros(self.N, dtype=np.int64)
        for i in range(self.N):
            patterns[i] = utils.bin2dec(X[self.I[i]])
        return patterns

    def get_next_states(self, patterns : Union[list, np.ndarray]) -> np.ndarray:
        """
        Look up the next state of every node given precomputed input patterns.
        Only the patterns are read, never the current state vector.

        **Raises:**

            - InternalConsistencyError: If a pattern lies outside
              [0, 2^K - 1].
        """
        if len(patterns) != self.N:
            raise InternalConsistencyError(f"Expected {self.N} input patterns, got {len(patterns)}")
        Fx = np.zeros(self.N, dtype=np.uint8)
        for i in range(self.N):
            Fx[i] = self.F[i].evaluate(int(patterns[i]))
        return Fx

    def update_network_synchronously(self, X : Union[list, np.ndarray]) -> np.ndarray:
        """
        Perform a synchronous update of the state vector X without touching
        the network's own state.

        **Returns:**

            - np.array[np.uint8]: New state vector after the update.
        """
        return self.get_next_states(self.get_input_patterns(X))

    def step(self) -> np.ndarray:
        """
        Advance the network by one synchronous step.

        All input patterns are computed from the current state vector before
        the new vector replaces it.

        **Returns:**

            - np.array[np.uint8]: A copy of the new state vector.
        """
        patterns = self.get_input_patterns(self.state)
        new_state = self.get_next_states(patterns)
        self.inputs = patterns
        self.state = new_state
        self.n_steps += 1
        return self.state.copy()

    def trajectory(self, iterations : int):
        """
        Perform iterations + 1 steps, yielding the state string after each.

        **Raises:**

            - InvalidParameterError: Immediately, if iterations is not a
              non-negative integer.
        """
        if not utils.is_integer(iterations) or iterations < 0:
            raise InvalidParameterError(f"iterations must be a non-negative integer, got {iterations!r}")
        return self._trajectory(int(iterations))

    def _trajectory(self, iterations : int):
        for _ in range(iterations + 1):
            self.step()
            yield self.get_state_string()

    def run(self, iterations : int, file = None) -> None:
        """
        Perform iterations + 1 synchronous steps, printing the state after
        each one as a line of '0'/'1' characters.

        **Parameters:**

            - iterations (int): Non-negative upper bound of the inclusive
              loop 0..iterations.

            - file (file-like, optional): Where to write the lines, default
              sys.stdout.

        If a step fails, the lines of all completed steps have been written
        and the error propagates.
        """
        for line in self.trajectory(iterations):
            print(line, file=file)

    def get_attractor(self, X : Union[list, np.ndarray, None] = None,
        n_steps_timeout : int = 1000, DEBUG : bool = False) -> dict:
        """
        Follow the synchronous dynamics from X until a state repeats.

        The network's own state is left unchanged.

        **Parameters:**

            - X (list[int] | np.array[int], optional): Initial state;
              defaults to the current state.

            - n_steps_timeout (int, optional): Maximum number of updates
              (default 1000).

            - DEBUG (bool, optional): If True, print every visited state.

        **Returns:**

            - dict[str:Variant]: A dictionary containing:

                - Attractor (list[int]): The states of the attractor cycle in
                  decimal representation (node 0 is the most significant
                  bit), in the order they are visited.

                - Period (int): The length of the cycle.

                - TransientLength (int): Number of updates before the cycle
                  is entered.

        **Raises:**

            - RuntimeError: If no state repeats within n_steps_timeout
              updates.
        """
        x = self.state.copy() if X is None else self._as_state_vector(X)
        xdec = utils.bin2dec(x)
        first_visit = {xdec: 0}
        queue = [xdec]
        for count in range(1, n_steps_timeout + 1):
            x = self.update_network_synchronously(x)
            xdec = utils.bin2dec(x)
            if DEBUG:
                print(count, xdec, utils.state_to_string(x))
            if xdec in first_visit:
                index = first_visit[xdec]
                attractor = queue[index:]
                return dict(zip(["Attractor", "Period", "TransientLength"],
                                (attractor, len(attractor), index)))
            first_visit[xdec] = count
            queue.append(xdec)
        raise RuntimeError(f'No attractor reached within {n_steps_timeout} updates. Increase n_steps_timeout.')

    def get_derrida_value(self, nsim : int = 1000, *, rng = None) -> float:
        """
        Estimate the Derrida value of the network.

        A random state and a copy with one random node flipped are both
        updated once; the Derrida value is the mean Hamming distance between
        the two successors.

        **Parameters:**

            - nsim (int, optional): Number of simulations (default 1000).

            - rng (None, optional): Argument for the random number generator,
              implemented in 'utils._coerce_rng'.

        **Returns:**

            - float: The mean Hamming distance over nsim simulations.

        **References:**

            #. Derrida, B., & Pomeau, Y. (1986). Random networks of automata:
               a simple annealed approximation. Europhysics letters, 1(2), 45.
        """
        rng = utils._coerce_rng(rng)
        hamming_distances = []
        for _ in range(nsim):
            X = rng.integers(2, size=self.N)
            Y = X.copy()
            index = rng.integers(self.N)
            Y[index] = 1 - Y[index]
            FX = self.update_network_synchronously(X)
            FY = self.update_network_synchronously(Y)
            hamming_distances.append(int(np.count_nonzero(FX != FY)))
        return float(np.mean(hamming_distances))


def step(network : RandomBooleanNetwork) -> np.ndarray:
    """
    Advance network by one synchronous step, see RandomBooleanNetwork.step.
    """
    return network.step()


def run(network : RandomBooleanNetwork, iterations : int, file = None) -> None:
    """
    Perform iterations + 1 synchronous steps of network, printing one state
    line per step, see RandomBooleanNetwork.run.
    """
    network.run(iterations, file=file)
