from __future__ import annotations

import pytest

from algraph import (
    GraphInstance,
    get_instance_for,
    eq_strict,
    ord_natural,
    overlay,
    connect,
    edge,
)


@pytest.fixture()
def G() -> GraphInstance:
    return get_instance_for(eq_strict, ord_natural)


@pytest.fixture()
def unordered() -> GraphInstance:
    return get_instance_for(eq_strict)


@pytest.fixture()
def g1():
    return overlay(overlay(edge(0, 10), edge(20, 30)), edge(10, 20))


@pytest.fixture()
def two_edges():
    return connect(edge("a", "b"), edge("c", "d"))
