from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from engine.defaults import DEFAULT_STRATEGY
from engine.errors import ConfigurationError, SearchLimitError

Candidates = Mapping[str, Tuple[str, ...]]
Grouping = Dict[str, List[str]]


class SearchStrategy(ABC):
    """Base class for every basket search strategy"""

    name: str = "base"
    exact: bool = True
    max_methods: Optional[int] = None

    @abstractmethod
    def search(self, candidates: Candidates, weights: Mapping[str, int]) -> Grouping:
        """Group the distinct basket items by delivery method.

        candidates maps each distinct item to the methods able to carry it and
        weights holds how many basket entries share that item id. Every item must
        land in exactly one group and no group may be empty.
        """
        pass

    def check_limit(self, methods: Sequence[str]) -> None:
        if self.max_methods is not None and len(methods) > self.max_methods:
            raise SearchLimitError(len(methods), self.max_methods, self.name)


def _strategy_types():
    from strategies.cover import CoverSearch
    from strategies.frequency_greedy import FrequencyGreedy
    from strategies.permutation import PermutationSearch

    return {cls.name: cls for cls in (PermutationSearch, CoverSearch, FrequencyGreedy)}


def available_strategies() -> List[str]:
    return sorted(_strategy_types())


def build_strategy(cfg=None) -> SearchStrategy:
    """Build a strategy from a type name or a {"type": ..., "max_methods": ...} dict."""
    if isinstance(cfg, SearchStrategy):
        return cfg
    if cfg is None:
        cfg = {"type": DEFAULT_STRATEGY}
    elif isinstance(cfg, str):
        cfg = {"type": cfg}
    elif not isinstance(cfg, dict):
        raise ConfigurationError(f"Search strategy must be a name or a dict, got {type(cfg).__name__}")

    stype = cfg.get("type", DEFAULT_STRATEGY)
    types = _strategy_types()
    if stype not in types:
        raise ConfigurationError(f"Unknown search strategy type {stype!r}, expected one of {sorted(types)}")

    kwargs = {}
    if "max_methods" in cfg:
        limit = cfg["max_methods"]
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
            raise ConfigurationError(f"max_methods must be a positive integer or null, got {limit!r}")
        kwargs["max_methods"] = limit
    return types[stype](**kwargs)
