"""Pytest configuration and fixtures."""

import pytest

from causalgraph.graph import CausalGraph


@pytest.fixture
def chain_graph() -> CausalGraph:
    """e1 -> e2 -> e3."""
    return CausalGraph.build(["e1", "e2", "e3"], [("e1", "e2"), ("e2", "e3")])


@pytest.fixture
def diamond_graph() -> CausalGraph:
    """a -> b, a -> c, b -> d, c -> d."""
    return CausalGraph.build(
        ["a", "b", "c", "d"],
        [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")],
    )


@pytest.fixture
def two_cycle_graph() -> CausalGraph:
    """x -> y and y -> x."""
    return CausalGraph.build(["x", "y"], [("x", "y"), ("y", "x")])
