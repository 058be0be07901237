from typing import Dict, Iterable, List, Mapping, Tuple


def candidate_methods(candidates: Mapping[str, Tuple[str, ...]]) -> List[str]:
    """Methods offered by at least one item, in first-seen order."""
    seen = {}
    for methods in candidates.values():
        for m in methods:
            seen.setdefault(m, None)
    return list(seen)


def greedy_claim(order: Iterable[str], candidates: Mapping[str, Tuple[str, ...]]) -> Dict[str, List[str]]:
    """Walk methods in order; each one takes every unclaimed item it can carry."""
    unclaimed = list(candidates)
    grouping: Dict[str, List[str]] = {}
    for method in order:
        if not unclaimed:
            break
        taken = [item for item in unclaimed if method in candidates[item]]
        if taken:
            grouping[method] = taken
            unclaimed = [item for item in unclaimed if method not in candidates[item]]
    return grouping


def group_size(items: Iterable[str], weights: Mapping[str, int]) -> int:
    return sum(weights.get(item, 1) for item in items)


def grouping_key(grouping: Mapping[str, List[str]], weights: Mapping[str, int]) -> Tuple[int, int]:
    """(methods used, -largest group). Smaller is better."""
    if not grouping:
        return (0, 0)
    largest = max(group_size(items, weights) for items in grouping.values())
    return (len(grouping), -largest)
