#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

import rbnet
from rbnet import InvalidParameterError


def test_create_network_constant_indegree():
    """
    create_network(N, K) must produce a network
    with constant in-degree equal to K.
    """
    for seed in range(10):
        bn = rbnet.create_network(20, 3, seed=seed)

        assert min(bn.indegrees) == max(bn.indegrees) == 3, (
            "Failed to create RBN with constant in-degree"
        )
        assert bn.K == 3 and all(bf.n == 3 for bf in bn), (
            "Function tables do not match the in-degree"
        )


def test_create_network_no_self_regulation():
    """
    No node may be one of its own predecessors.
    """
    rng = np.random.default_rng(6)

    for _ in range(20):
        bn = rbnet.create_network(5, 4, rng=rng)
        assert all(
            i not in regulators
            for i, regulators in enumerate(bn.I)
        ), "Failed to create RBN without self-loops"


def test_create_network_distinct_predecessors():
    """
    The K predecessors of every node are distinct.
    """
    bn = rbnet.create_network(6, 5, seed=11)

    for i, regulators in enumerate(bn.I):
        assert len(set(regulators.tolist())) == 5, (
            f"Node {i} has repeated predecessors"
        )
        assert sorted(regulators.tolist()) == [j for j in range(6) if j != i], (
            "With K = N - 1 every other node must be a predecessor"
        )


def test_wiring_is_static():
    """
    The wiring diagram never changes while the network is simulated.
    """
    bn = rbnet.create_network(15, 2, seed=3)
    edges_before = bn.get_edges()

    for _ in range(25):
        bn.step()

    assert bn.get_edges() == edges_before, "Wiring changed during simulation"
    with pytest.raises(ValueError):
        bn.I[0][0] = 1


def test_create_network_is_reproducible():
    """
    A fixed seed reproduces topology, function tables and initial state.
    """
    bn1 = rbnet.create_network(12, 3, seed=2024)
    bn2 = rbnet.create_network(12, 3, seed=2024)

    assert bn1.get_edges() == bn2.get_edges(), "Topology not reproducible"
    assert [bf.table for bf in bn1] == [bf.table for bf in bn2], (
        "Function tables not reproducible"
    )
    assert np.all(bn1.state == bn2.state), "Initial state not reproducible"


def test_seed_and_rng_are_equivalent():
    """
    Passing seed=s or rng=np.random.default_rng(s) builds the same network.
    """
    bn1 = rbnet.create_network(8, 2, seed=5)
    bn2 = rbnet.create_network(8, 2, rng=np.random.default_rng(5))

    assert bn1.get_edges() == bn2.get_edges()
    assert [bf.table for bf in bn1] == [bf.table for bf in bn2]


def test_seed_and_rng_together_are_rejected():
    with pytest.raises(InvalidParameterError):
        rbnet.create_network(8, 2, seed=5, rng=np.random.default_rng(5))


@pytest.mark.parametrize("N, K", [
    (3, 3),
    (2, 5),
    (0, 0),
    (-1, 0),
    (5, -1),
    (20, rbnet.MAX_K + 1),
    (4.0, 1),
    (4, 1.5),
])
def test_create_network_invalid_parameters(N, K):
    """
    N <= 0, K < 0, N <= K, K above MAX_K and non-integers are rejected.
    """
    with pytest.raises(InvalidParameterError):
        rbnet.create_network(N, K, seed=0)


def test_create_network_invalid_parameters_print_nothing(capsys):
    with pytest.raises(InvalidParameterError):
        rbnet.create_network(3, 3, seed=0, VERBOSE=True)
    assert capsys.readouterr().out == ""


def test_verbose_banner(capsys):
    rbnet.create_network(5, 2, seed=0, VERBOSE=True)
    assert capsys.readouterr().out == "Creating RBN with N = 5, K = 2\n"


def test_random_predecessors_skip_successor():
    """
    With K = N - 1 the predecessors are exactly the other nodes.
    """
    rng = np.random.default_rng(0)

    for successor in range(5):
        predecessors = rbnet.random_predecessors(5, 4, successor, rng=rng)
        assert sorted(predecessors.tolist()) == [j for j in range(5) if j != successor]


def test_random_wiring_diagram_shares_predecessors():
    """
    Different successors may share predecessors; out-degrees sum to N*K.
    """
    W = rbnet.random_wiring_diagram(10, 3, rng=np.random.default_rng(1))

    assert int(W.outdegrees.sum()) == 30
    W.check_fixed_indegree(3)


def test_random_function_table_range():
    """
    Function tables lie in [0, 2^(2^K) - 1], including tables wider
    than 64 bits.
    """
    rng = np.random.default_rng(9)

    for K in range(0, 9):
        bf = rbnet.random_function_table(K, rng=rng)
        assert 0 <= bf.table < 2**(2**K)
        assert len(bf.f) == 2**K

    wide = [rbnet.random_function_table(7, rng=rng).table for _ in range(20)]
    assert max(wide) >= 2**64, "Tables for K = 7 should use all 128 bits"


def test_random_function_table_covers_all_values():
    """
    For K = 1 all four Boolean functions of one input are drawn.
    """
    rng = np.random.default_rng(10)
    tables = {rbnet.random_function_table(1, rng=rng).table for _ in range(200)}
    assert tables == {0, 1, 2, 3}


def test_random_initial_state_is_binary():
    X = rbnet.random_initial_state(50, rng=np.random.default_rng(12))
    assert X.shape == (50,)
    assert set(X.tolist()) <= {0, 1}
