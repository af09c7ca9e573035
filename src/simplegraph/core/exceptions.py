"""
Custom exceptions for the simplegraph library.

This module defines the hierarchy of exceptions raised by the library. Query
operations never raise for unknown keys or unreachable destinations; they
return ``None`` instead. Exceptions are reserved for invalid input, invalid
configuration and the explicit lookup helpers that promise a result.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Negative edge weight
        * Non-integer edge weight
        * Negative hop budget
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown strategy name
        * Negative cache size
        * Configuration mapping that does not match the schema
    """


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot be carried out.

    Examples:
        * Lookup helpers asked for a node that must exist
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(GraphOperationError):
    """Raised when a requested resource is not found."""


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Only the explicit ``require_*`` helpers raise this; ``connected`` and
    ``shortest_path`` report unknown keys by returning ``None``.
    """
