"""
Configuration for graph instances.

``GraphConfig`` selects the traversal strategies, sizes the query cache and
controls whether the store checks its invariants after every mutation. A
config can be built directly or loaded from a plain mapping (for example one
read from a host's settings file), in which case the mapping is validated
against a JSON schema first.

Example:
    >>> config = GraphConfig.from_dict({"shortest_path_strategy": "heap"})
    >>> graph = SimpleGraph(config=config)
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError

SHORTEST_PATH_STRATEGIES = ("scan", "heap")
REACHABILITY_STRATEGIES = ("frontier", "memoized")
DEFAULT_CACHE_SIZE = 128

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "shortest_path_strategy": {"type": "string", "enum": list(SHORTEST_PATH_STRATEGIES)},
        "reachability_strategy": {"type": "string", "enum": list(REACHABILITY_STRATEGIES)},
        "cache_size": {"type": "integer", "minimum": 0},
        "check_invariants": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Settings for a :class:`~simplegraph.core.graph.SimpleGraph`.

    Attributes:
        shortest_path_strategy (str): ``"scan"`` for the linear open-set scan,
            ``"heap"`` for the binary-heap open set
        reachability_strategy (str): ``"frontier"`` for layered expansion,
            ``"memoized"`` for the memoised recursive union
        cache_size (int): Maximum number of cached query results, 0 disables
        check_invariants (bool): Assert store invariants after each mutation
    """

    shortest_path_strategy: str = "scan"
    reachability_strategy: str = "frontier"
    cache_size: int = DEFAULT_CACHE_SIZE
    check_invariants: bool = __debug__

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.shortest_path_strategy not in SHORTEST_PATH_STRATEGIES:
            raise ConfigurationError(
                f"Unknown shortest path strategy '{self.shortest_path_strategy}'. "
                f"Must be one of: {', '.join(SHORTEST_PATH_STRATEGIES)}"
            )
        if self.reachability_strategy not in REACHABILITY_STRATEGIES:
            raise ConfigurationError(
                f"Unknown reachability strategy '{self.reachability_strategy}'. "
                f"Must be one of: {', '.join(REACHABILITY_STRATEGIES)}"
            )
        if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int):
            raise ConfigurationError("cache_size must be an integer")
        if self.cache_size < 0:
            raise ConfigurationError("cache_size must be non-negative")
        if not isinstance(self.check_invariants, bool):
            raise ConfigurationError("check_invariants must be a boolean")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a config from a mapping, validating it against the schema.

        Missing keys take their defaults.

        Args:
            data: Mapping of field names to values

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            json_validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
