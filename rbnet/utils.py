#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Small helpers shared by the network builder and the simulation engine.
"""


##Imports
from __future__ import annotations
import numpy as np
import random as _py_random
from numpy.random import Generator as _NPGen, RandomState as _NPRandomState, SeedSequence, default_rng

from typing import Union

def _coerce_rng(rng : Union[int, _NPGen, _NPRandomState, _py_random.Random, None] = None) -> _NPGen:
    """
    Return a NumPy Generator given a variety of rng-like inputs.

    **Accepts:**

      - None                -> default_rng()
      - int (seed)          -> default_rng(seed)
      - np.random.Generator -> returned as-is
      - np.random.RandomState -> converted via SeedSequence
      - random.Random       -> converted via SeedSequence

    **Raises:**

        - TypeError: for unsupported inputs.
    """
    if rng is None:
        return default_rng()
    if isinstance(rng, _NPGen):
        return rng
    if isinstance(rng, bool):
        raise TypeError(f"Unsupported rng type: {type(rng)!r}")
    if isinstance(rng, (int, np.integer)):
        return default_rng(int(rng))
    if isinstance(rng, _NPRandomState):
        entropy = rng.randint(0, 2**32, size=4, dtype=np.uint32)
        return default_rng(SeedSequence(entropy))
    if isinstance(rng, _py_random.Random):
        entropy = [rng.getrandbits(32) for _ in range(4)]
        return default_rng(SeedSequence(entropy))
    raise TypeError(f"Unsupported rng type: {type(rng)!r}")


def is_integer(x) -> bool:
    """
    Check whether x is a Python or NumPy integer (booleans excluded).
    """
    return isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_))


def bin2dec(binary_vector : list) -> int:
    """
    Convert a binary vector to an integer. The first entry is the most
    significant bit.

    **Parameters:**

        - binary_vector (list[int]): List containing binary digits (0 or 1).

    **Returns:**

        - int: Integer value converted from the binary vector.
    """
    decimal = 0
    for bit in binary_vector:
        decimal = (decimal << 1) | int(bit)
    return int(decimal)


def dec2bin(integer_value : int, num_bits : int) -> list:
    """
    Convert an integer to a binary vector.

    **Parameters:**

        - integer_value (int): Integer value to be converted.
        - num_bits (int): Number of bits in the binary representation.

    **Returns:**

        - list[int]: List containing binary digits (0 or 1), most significant
          bit first.
    """
    if num_bits == 0:
        return []
    binary_string = bin(integer_value)[2:].zfill(num_bits)
    return [int(bit) for bit in binary_string]


def pth_bit(p : int, q : int) -> int:
    """
    Return bit p of the non-negative integer q, counting from the least
    significant bit (bit 0).
    """
    return (q >> p) & 1


left_side_of_truth_tables = {}

def get_left_side_of_truth_table(n : int) -> np.ndarray:
    """
    Return the 2^n x n matrix whose row p is the binary expansion of p
    (most significant bit in column 0). Results are cached per n.
    """
    if n in left_side_of_truth_tables:
        left_side_of_truth_table = left_side_of_truth_tables[n]
    elif n == 0:
        left_side_of_truth_table = np.zeros((1, 0), dtype=np.uint8)
        left_side_of_truth_tables[n] = left_side_of_truth_table
    else:
        vals = np.arange(2**n, dtype=np.uint64)[:, None]              # shape (2^n, 1)
        masks = (np.uint64(1) << np.arange(n-1, -1, -1, dtype=np.uint64))[None]  # shape (1, n)
        left_side_of_truth_table = ((vals & masks) != 0).astype(np.uint8)
        left_side_of_truth_tables[n] = left_side_of_truth_table
    return left_side_of_truth_table


def state_to_string(X : Union[list, np.ndarray]) -> str:
    """
    Format a state vector as a string of '0' and '1' characters, one per node
    in index order.

    **Examples:**

        >>> state_to_string([1, 0, 0, 1])
        '1001'
    """
    return ''.join('1' if x else '0' for x in X)


def string_to_state(s : str) -> np.ndarray:
    """
    Inverse of state_to_string.
    """
    if any(c not in '01' for c in s):
        raise ValueError(f"State strings may only contain '0' and '1', got {s!r}")
    return np.array([int(c) for c in s], dtype=np.uint8)
