import itertools
from dataclasses import dataclass
from typing import Mapping, Optional

from engine.defaults import DEFAULT_MAX_METHODS
from strategies import Candidates, Grouping, SearchStrategy
from strategies._claims import candidate_methods, greedy_claim, group_size, grouping_key


@dataclass
class PermutationSearch(SearchStrategy):
    """
    Exhaustive search over every ordering of the candidate methods.

    Each ordering is turned into one grouping by greedy claiming and the best
    (methods used, -largest group) key wins; the first ordering reaching the best
    key is kept. Cost is m! in the number of candidate methods, so max_methods
    caps m before anything is enumerated.
    """
    max_methods: Optional[int] = DEFAULT_MAX_METHODS

    name = "permutation"

    def search(self, candidates: Candidates, weights: Mapping[str, int]) -> Grouping:
        methods = candidate_methods(candidates)
        self.check_limit(methods)

        # nothing beats one method carrying the whole basket
        floor = (1, -group_size(candidates, weights))

        best: Grouping = {}
        best_key = None
        for order in itertools.permutations(methods):
            grouping = greedy_claim(order, candidates)
            key = grouping_key(grouping, weights)
            if best_key is None or key < best_key:
                best, best_key = grouping, key
                if key == floor:
                    break
        return best
