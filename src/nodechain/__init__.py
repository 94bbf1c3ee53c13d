"""nodechain - Singly linked chain with node swap and move-based concatenation."""

from nodechain.chain import Node, NodeChain
from nodechain.errors import NodeChainError, SelfConcatenationError

__version__ = "0.0.1"

__all__ = [
    "Node",
    "NodeChain",
    "NodeChainError",
    "SelfConcatenationError",
]
