import itertools
from dataclasses import dataclass
from typing import Mapping, Optional

from strategies import Candidates, Grouping, SearchStrategy
from strategies._claims import candidate_methods, greedy_claim, group_size


@dataclass
class CoverSearch(SearchStrategy):
    """
    Exact search by set cover: try method subsets of growing size.

    The first size with a subset covering every item is the minimum number of
    methods. Among covers of that size the largest group is the heaviest single
    method inside a cover, so that method claims first and the rest of its cover
    takes what is left. Work grows with 2^m instead of m!.
    """
    max_methods: Optional[int] = 16

    name = "cover"

    def search(self, candidates: Candidates, weights: Mapping[str, int]) -> Grouping:
        methods = candidate_methods(candidates)
        self.check_limit(methods)

        carries = {m: frozenset(i for i, opts in candidates.items() if m in opts) for m in methods}
        load = {m: group_size(carries[m], weights) for m in methods}
        everything = frozenset(candidates)

        for size in range(1, len(methods) + 1):
            best = None
            for combo in itertools.combinations(methods, size):
                if frozenset().union(*(carries[m] for m in combo)) != everything:
                    continue
                lead = max(combo, key=lambda m: load[m])
                if best is None or load[lead] > load[best[0]]:
                    best = (lead, combo)
            if best is not None:
                lead, combo = best
                return greedy_claim([lead] + [m for m in combo if m != lead], candidates)
        return {}
