"""Exception classes for nodechain."""


class NodeChainError(Exception):
    """Base exception for all nodechain errors."""


class SelfConcatenationError(NodeChainError, ValueError):
    """Raised when attempting to concatenate a chain onto itself."""
