"""Shared fixtures for nodechain tests."""

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from nodechain import NodeChain


@dataclass(frozen=True)
class Item:
    """Hashable value object; equal instances are still distinct for find_node()."""

    name: str

    def __str__(self) -> str:
        return self.name


def _check_invariants(chain: NodeChain) -> None:
    if len(chain) == 0:
        assert chain._head is None
        assert chain._tail is None
        return

    assert chain._head is not None
    assert chain._tail is not None
    assert chain._tail.next is None

    seen: set[int] = set()
    walk = chain._head
    steps = 0
    while walk is not chain._tail:
        assert id(walk) not in seen, "cycle in chain"
        seen.add(id(walk))
        assert walk.next is not None, "tail not reachable from head"
        walk = walk.next
        steps += 1
    assert steps == len(chain) - 1


@pytest.fixture
def check_invariants() -> Callable[[NodeChain], None]:
    """Assert head/tail/size consistency of a chain."""
    return _check_invariants


@pytest.fixture
def abc() -> tuple[Item, Item, Item]:
    """Three distinct items A, B, C."""
    return Item("A"), Item("B"), Item("C")


@pytest.fixture
def make_item() -> Callable[[str], Item]:
    """Factory for fresh Item instances."""
    return Item
