# engine/splitter.py
import logging
from collections import Counter
from typing import Dict, List, Optional

from engine.basket import validate_basket
from engine.catalog import Catalog, load_catalog
from engine.errors import ConfigurationError, UnavailableItemError
from strategies import SearchStrategy, build_strategy
from strategies._claims import grouping_key

logger = logging.getLogger(__name__)


class BasketSplitter:
    """
    Assigns every basket entry to exactly one delivery method.

    Goal, in order:
      1) use as few distinct delivery methods as possible,
      2) then make the largest delivery group as big as possible.

    The catalog is owned by the instance and never mutated, so split() is a pure
    function of (catalog, basket) and can be called from several threads at once.
    When several groupings are equally good, which one comes back is unspecified.
    """

    def __init__(self, catalog=None, strategy=None):
        self.strategy: SearchStrategy = build_strategy(strategy)
        self.catalog: Optional[Catalog] = None
        if catalog is None:
            logger.warning("BasketSplitter created without a catalog; split() will refuse to run")
            return
        try:
            self.catalog = load_catalog(catalog)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e

    @property
    def configured(self) -> bool:
        return self.catalog is not None

    def split(self, items) -> Dict[str, List[str]]:
        if self.catalog is None:
            raise ConfigurationError("No delivery catalog loaded; cannot split basket")
        basket = validate_basket(items)
        if not basket:
            return {}

        distinct = list(dict.fromkeys(basket))
        for item in distinct:
            if item not in self.catalog:
                raise UnavailableItemError(item)

        candidates = self.catalog.restrict(distinct)
        weights = Counter(basket)
        if not self.strategy.exact:
            logger.warning("Strategy '%s' is a heuristic; result may not be optimal", self.strategy.name)

        grouping = self.strategy.search(candidates, weights)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Split %d entries (%d distinct) with '%s': key=%s",
                len(basket), len(distinct), self.strategy.name, grouping_key(grouping, weights),
            )

        assigned = {}
        for method, claimed in grouping.items():
            for item in claimed:
                assigned[item] = method
        # Safety invariant: the strategy placed every distinct item
        assert len(assigned) == len(distinct), "strategy left basket items unassigned"

        # expand back to basket entries, basket order within each group
        groups: Dict[str, List[str]] = {method: [] for method in grouping}
        for entry in basket:
            groups[assigned[entry]].append(entry)
        return {method: entries for method, entries in groups.items() if entries}
