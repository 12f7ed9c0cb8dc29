#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Function tables of random Boolean network nodes.

A node with K inputs is updated by a Boolean function whose truth table has
2^K rows. The table is stored as a single non-negative Python integer of 2^K
bits: bit p (counting from the least significant bit) is the output for the
input pattern p. Python integers have arbitrary precision, so tables for K >= 6
(which no longer fit into 64 bits) need no special treatment; ``MAX_K`` only
bounds the memory spent per node.

Example with K = 3::

    inputs : output
    0 0 0  : 1
    0 0 1  : 0
    0 1 0  : 0
    0 1 1  : 1
    1 0 0  : 1
    1 0 1  : 0
    1 1 0  : 0
    1 1 1  : 1

Reading the output column from pattern 7 down to pattern 0 gives 0b10011001,
so the table value is 153.
"""

import numpy as np
import pandas as pd
from pyeda.inter import exprvar, Or, And, espresso_exprs
from pyeda.boolalg.expr import OrOp, AndOp, NotOp, Complement

from typing import Union

try:
    import rbnet.utils as utils
    from rbnet.errors import InvalidParameterError, InternalConsistencyError
except ModuleNotFoundError:
    import utils
    from errors import InvalidParameterError, InternalConsistencyError


__all__ = [
    "MAX_K",
    "BooleanFunction",
]

#: Largest supported number of inputs per node (a 2^16-bit table).
MAX_K = 16


class BooleanFunction(object):
    """
    A class representing the function table of a single node.

    **Constructor Parameters:**

        - table (int): Non-negative integer in [0, 2^(2^n) - 1]. Bit p is the
          output for input pattern p.

        - n (int): The number of inputs, 0 <= n <= MAX_K.

        - name (str, optional): The name of the node regulated by the Boolean
          function (default '').

    **Members:**

        - table (int): As passed by the constructor.
        - n (int): The number of inputs for the Boolean function.
        - f (np.array[np.uint8]): Read-only truth table vector of length 2^n,
          f[p] == bit p of table.

        - variables (np.array[str]): A numpy array of n strings with variable
          names, default x0, ..., x_{n-1}. x0 is the most significant input.

        - name (str): The name of the node regulated by the Boolean function.

    **Raises:**

        - InvalidParameterError: If n or table are out of range.
    """

    __slots__ = ['table', 'n', 'f', 'variables', 'name']

    def __init__(self, table : int, n : int, name : str = ""):
        if not utils.is_integer(n) or not 0 <= n <= MAX_K:
            raise InvalidParameterError(f"The number of inputs must be an integer between 0 and {MAX_K}, got {n!r}")
        if not utils.is_integer(table):
            raise InvalidParameterError(f"A function table must be an integer, got {type(table)!r}")
        n = int(n)
        table = int(table)
        if not 0 <= table < 2**(2**n):
            raise InvalidParameterError(f"A function table with {n} inputs must lie in [0, 2^{2**n} - 1], got {table}")

        self.table = table
        self.n = n
        self.name = name
        self.variables = np.array(['x%i' % i for i in range(n)], dtype=str)

        n_bits = 2**n
        n_bytes = (n_bits + 7) // 8
        f = np.unpackbits(np.frombuffer(table.to_bytes(n_bytes, 'little'), dtype=np.uint8),
                          bitorder='little')[:n_bits]
        f.setflags(write=False)
        self.f = f

    @classmethod
    def from_truth_table(cls, f : Union[list, np.ndarray], name : str = "") -> "BooleanFunction":
        """
        Build a function table from a truth table vector.

        **Parameters:**

            - f (list[int] | np.array[int]): Outputs of length 2^n, where f[p]
              is the output for input pattern p.

        **Returns:**

            - BooleanFunction

        **Examples:**

            >>> BooleanFunction.from_truth_table([1, 0, 0, 1]).table
            9
        """
        f = np.asarray(f)
        if f.ndim != 1 or len(f) == 0:
            raise InvalidParameterError("f must be a non-empty one-dimensional truth table")
        n = int(np.log2(len(f)))
        if 2**n != len(f):
            raise InvalidParameterError("f must be of size 2^n, n >= 0")
        if not np.all((f == 0) | (f == 1)):
            raise InvalidParameterError("f may only contain the values 0 and 1")
        packed = np.packbits(f.astype(np.uint8), bitorder='little')
        return cls(int.from_bytes(packed.tobytes(), 'little'), n, name=name)

    def evaluate(self, p : int) -> int:
        """
        Return the output (0 or 1) for input pattern p, i.e. bit p of the
        table.

        **Raises:**

            - InternalConsistencyError: If p is not in [0, 2^n - 1].
        """
        if not 0 <= p < 2**self.n:
            raise InternalConsistencyError(f"Input pattern {p} out of range for a function with {self.n} inputs")
        return utils.pth_bit(int(p), self.table)

    def __call__(self, p : int) -> int:
        return self.evaluate(p)

    def evaluate_inputs(self, states_regulators : Union[list, np.ndarray]) -> int:
        """
        Return the output for a binary vector of input states, the first entry
        being the most significant input.
        """
        if len(states_regulators) != self.n:
            raise InternalConsistencyError(f"Expected {self.n} input states, got {len(states_regulators)}")
        return self.evaluate(utils.bin2dec(states_regulators))

    def __str__(self):
        return f"{self.f}"

    def __repr__(self):
        return f"{type(self).__name__}(table={self.table}, n={self.n})"

    def __len__(self):
        return 2**self.n

    def __getitem__(self, index):
        try:
            return int(self.f[index])
        except TypeError:
            return self.f[index]

    def __eq__(self, other):
        if not isinstance(other, BooleanFunction):
            return NotImplemented
        return self.n == other.n and self.table == other.table

    def __hash__(self):
        return hash((self.n, self.table))

    def to_truth_table(self, RETURN : bool = True, filename : str = None):
        """
        Returns or saves the full truth table of the Boolean function as a
        pandas DataFrame.

        Each row shows the input combination (x0, ..., x_{n-1}) and the
        corresponding output.

        **Parameters**

            - RETURN (bool, optional): Whether to return the DataFrame
              (default: True).
            - filename (str, optional): File name to which the truth table
              should be saved. Supported formats are 'csv', 'xls', and 'xlsx'.

        **Returns**

            - pd.DataFrame: The full truth table, if `RETURN=True`.

        **Example**

            >>> BooleanFunction(9, 2).to_truth_table()
               x0  x1  f
            0   0   0  1
            1   0   1  0
            2   1   0  0
            3   1   1  1
        """
        columns = np.append(self.variables, self.name if self.name != '' else 'f')
        truth_table = pd.DataFrame(np.c_[utils.get_left_side_of_truth_table(self.n), self.f],
                                   columns=columns)
        if filename is not None:
            ending = filename.split('.')[-1]
            if ending not in ['csv', 'xls', 'xlsx']:
                raise ValueError("filename must end in 'csv', 'xls', or 'xlsx'")
            if ending == 'csv':
                truth_table.to_csv(filename)
            else:
                truth_table.to_excel(filename)
        if RETURN:
            return truth_table

    def to_logical(self, AND : str = '&', OR : str = '|', NOT : str = '!',
        MINIMIZE_EXPRESSION : bool = True) -> str:
        """
        Transform the function table into a logical expression.

        **Parameters:**

            - AND (str, optional): Character(s) to use for the And operator.
            - OR (str, optional): Character(s) to use for the Or operator.
            - NOT (str, optional): Character(s) to use for the Not operator.
            - MINIMIZE_EXPRESSION (bool, optional): Whether or not to minimize
              the expression using Espresso. Defaults to true.

        **Returns:**

            - str: A string representing the Boolean function, '0' or '1' for
              constant functions.
        """
        if self.table == 0:
            return '0'
        if self.table == 2**(2**self.n) - 1:
            return '1'
        variables = [exprvar(str(var)) for var in self.variables]
        terms = []
        for m in range(2**self.n):
            if not self.f[m]:
                continue
            bits = [(variables[i] if (m >> (self.n - 1 - i)) & 1 else ~variables[i]) for i in range(self.n)]
            terms.append(And(*bits))
        func_expr = Or(*terms).to_dnf()
        if MINIMIZE_EXPRESSION:
            func_expr, = espresso_exprs(func_expr)
        def __pyeda_to_string__(e):
            if isinstance(e, OrOp):
                return '('+(")%s("%OR).join(__pyeda_to_string__(arg) for arg in e.xs)+')'
            elif isinstance(e, AndOp):
                return AND.join(__pyeda_to_string__(arg) for arg in e.xs)
            elif isinstance(e, NotOp):
                return "%s(%s)"%(NOT, __pyeda_to_string__(e.x))
            elif isinstance(e, Complement):
                return "(%s%s)"%(NOT, str(e)[1::])
            return str(e)
        return __pyeda_to_string__(func_expr)

    def get_hamming_weight(self) -> int:
        """
        Number of input patterns mapped to 1.
        """
        return bin(self.table).count('1')

    def is_constant(self) -> bool:
        """
        Check whether the function ignores its inputs entirely.
        """
        return self.table == 0 or self.table == 2**(2**self.n) - 1

    def get_average_sensitivity(self, nsim : int = 10000, EXACT : bool = True,
        NORMALIZED : bool = True, *, rng = None) -> float:
        """
        Compute the average sensitivity of the function: the expected number
        of single-input flips that change the output.

        **Parameters:**

            - nsim (int, optional): Number of random samples (used when EXACT
              is False).

            - EXACT (bool, optional): If True (default), iterate over all 2^n
              inputs; otherwise, use Monte Carlo sampling.

            - NORMALIZED (bool, optional): If True, divide by the number of
              inputs.

            - rng (None, optional): Argument for the random number generator,
              implemented in 'utils._coerce_rng'.

        **Returns:**

            - float: The (normalized) average sensitivity, 0 for n == 0.
        """
        if self.n == 0:
            return 0.0
        size_state_space = 2**self.n
        if EXACT:
            X = np.arange(size_state_space, dtype=np.int64)
        else:
            rng = utils._coerce_rng(rng)
            X = rng.integers(0, size_state_space, nsim)
        activities = np.zeros(self.n, dtype=np.float64)
        for i in range(self.n):
            flipped = X ^ (1 << (self.n - 1 - i))
            activities[i] = np.count_nonzero(self.f[X] != self.f[flipped])
        s = float(activities.sum() / len(X))
        if NORMALIZED:
            return s / self.n
        return s
