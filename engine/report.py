# engine/report.py
from typing import Dict, List, Mapping

import pandas as pd

from engine.catalog import Catalog


def grouping_frame(grouping: Mapping[str, List[str]]) -> pd.DataFrame:
    """Tidy view of a split: one row per basket entry (method, item, line)."""
    rows = []
    for method, items in grouping.items():
        for line, item in enumerate(items):
            rows.append({"method": method, "item": item, "line": line})
    return pd.DataFrame(rows, columns=["method", "item", "line"])


def grouping_summary(grouping: Mapping[str, List[str]]) -> pd.DataFrame:
    """Entries per method, largest group first."""
    df = grouping_frame(grouping)
    if df.empty:
        return pd.DataFrame(columns=["method", "entries", "distinct_items"])
    out = (
        df.groupby("method", sort=False)
        .agg(entries=("item", "size"), distinct_items=("item", "nunique"))
        .reset_index()
        .sort_values("entries", ascending=False, kind="stable")
        .reset_index(drop=True)
    )
    return out


def describe_catalog(catalog: Catalog) -> List[str]:
    return [f"{item}: {list(methods)}" for item, methods in catalog.options.items()]


def method_coverage(catalog: Catalog) -> Dict[str, int]:
    """How many catalog items each method can carry."""
    counts: Dict[str, int] = {}
    for methods in catalog.options.values():
        for m in methods:
            counts[m] = counts.get(m, 0) + 1
    return counts
