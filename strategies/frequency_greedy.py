from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from strategies import Candidates, Grouping, SearchStrategy


@dataclass
class FrequencyGreedy(SearchStrategy):
    """
    Single pass heuristic:
      items with the fewest options go first,
      each goes to its option already carrying the most basket entries.
    Fast for any catalog size but not guaranteed to be optimal.
    """
    max_methods: Optional[int] = None

    name = "frequency_greedy"
    exact = False

    def search(self, candidates: Candidates, weights: Mapping[str, int]) -> Grouping:
        counts: Dict[str, int] = {}
        grouping: Dict[str, List[str]] = {}
        methods_seen = {m for opts in candidates.values() for m in opts}
        self.check_limit(sorted(methods_seen))

        # sorted() is stable: equal option counts keep basket order
        for item in sorted(candidates, key=lambda i: len(candidates[i])):
            best_method, best_count = None, -1
            for m in candidates[item]:
                c = counts.get(m, 0)
                if c > best_count:
                    best_method, best_count = m, c
            counts[best_method] = best_count + weights.get(item, 1)
            grouping.setdefault(best_method, []).append(item)
        return grouping
