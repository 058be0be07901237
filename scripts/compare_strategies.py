import argparse
import glob
import os
import sys
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from engine.basket import load_basket
from engine.catalog import load_catalog
from engine.defaults import DEFAULT_CONFIG_PATH, DEFAULT_OUTDIR
from engine.errors import SplitterError
from engine.splitter import BasketSplitter
from strategies import available_strategies


def compare(catalog, baskets, strategies=None):
    """Run every strategy over every basket; one row per (basket, strategy)."""
    strategies = strategies or available_strategies()
    splitters = {name: BasketSplitter(catalog, strategy=name) for name in strategies}

    results = []
    for basket_name, basket in baskets.items():
        for name, splitter in splitters.items():
            start = time.perf_counter()
            try:
                grouping = splitter.split(basket)
                err = None
            except SplitterError as e:
                grouping, err = {}, str(e)
            elapsed = time.perf_counter() - start

            results.append({
                "basket": basket_name,
                "strategy": name,
                "entries": len(basket),
                "methods_used": len(grouping),
                "largest_group": max((len(v) for v in grouping.values()), default=0),
                "seconds": elapsed,
                "error": err,
            })
    return pd.DataFrame(results)


def plot(df, out_path):
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    plt.figure(figsize=(10, 6))
    for name, sub in df[df.error.isna()].groupby("strategy"):
        plt.scatter(sub["methods_used"], sub["largest_group"], label=name, alpha=0.7)
    plt.xlabel("Delivery methods used")
    plt.ylabel("Largest group (entries)")
    plt.title("Strategies: methods used vs largest group")
    plt.grid(True)
    plt.legend()
    plt.savefig(out_path, dpi=150)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description="Compare search strategies over a set of baskets.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--baskets", type=str, default=os.path.join("inputs", "baskets"),
                        help="Directory of basket_*.json files")
    parser.add_argument("--outdir", type=str, default=DEFAULT_OUTDIR)
    args = parser.parse_args()

    try:
        catalog = load_catalog(args.config)
        paths = sorted(glob.glob(os.path.join(args.baskets, "*.json")))
        baskets = {os.path.basename(p): load_basket(p) for p in paths if not p.endswith("manifest.json")}
    except SplitterError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    if not baskets:
        print(f"[ERROR] No basket files found in {args.baskets}")
        sys.exit(1)

    print("Running strategy comparison...\n")
    df = compare(catalog, baskets)
    for _, r in df.iterrows():
        status = r["error"] if r["error"] else f"methods={r['methods_used']}, largest={r['largest_group']}"
        print(f"[{r['basket']}, {r['strategy']}] => {status} ({r['seconds'] * 1000:.1f} ms)")

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, "strategy_comparison.csv")
    df.to_csv(out_csv, index=False)
    out_png = os.path.join(args.outdir, "strategy_comparison.png")
    plot(df, out_png)
    print(f"\n[ok] wrote {out_csv}")
    print(f"[ok] wrote {out_png}")


if __name__ == "__main__":
    main()
