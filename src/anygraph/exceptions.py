"""Custom exceptions for anygraph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class InvalidDescriptionError(GraphError, ValueError):
    """Raised when an edge description has an unrecognized shape."""


class InvalidTargetError(GraphError, ValueError):
    """Raised when an attribute target is neither a node nor a resolvable edge."""
