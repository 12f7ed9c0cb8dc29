#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised while building and simulating random Boolean networks.
"""

__all__ = [
    "InvalidParameterError",
    "InternalConsistencyError",
]


class InvalidParameterError(ValueError):
    """
    Raised when a network size, in-degree, iteration count or function table
    lies outside its valid domain. Nothing is constructed when it is raised.
    """


class InternalConsistencyError(AssertionError):
    """
    Raised when a structural invariant that construction guarantees (exact
    in-degree K, distinct predecessors, no self-regulation, table index in
    range) is found violated. Always fatal.
    """
