#!/usr/bin/env python3
"""
Generate random baskets from a delivery catalog.

Outputs:
  <outdir>/
    - basket_<n>.json       (list of item ids, duplicates allowed)
    - manifest.json         (seed, sizes, files)

Usage:
  python -m dataset.make_baskets --config inputs/config/catalog.json \
      --count 5 --size 6 --outdir inputs/baskets

Optional:
  --seed 42              (reproducible baskets)
  --repeat-prob 0.1      (chance an entry repeats an earlier item)
"""

import argparse
import json
import random
from pathlib import Path

from engine.catalog import load_catalog


def make_baskets(items, count, size, rng, repeat_prob=0.0):
    baskets = []
    for _ in range(count):
        basket = []
        for _ in range(size):
            if basket and rng.random() < repeat_prob:
                basket.append(rng.choice(basket))
            else:
                basket.append(rng.choice(items))
        baskets.append(basket)
    return baskets


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--config", default="inputs/config/catalog.json", help="Catalog JSON")
    p.add_argument("--count", type=int, default=5, help="Number of baskets")
    p.add_argument("--size", type=int, default=6, help="Entries per basket")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--repeat-prob", type=float, default=0.0)
    p.add_argument("--outdir", default="inputs/baskets", help="Output directory")
    return p.parse_args()


def main():
    args = parse_args()
    catalog = load_catalog(args.config)
    items = list(catalog)
    if not items:
        raise SystemExit(f"[error] Catalog {args.config} has no items")

    out_dir = Path(args.outdir)
    out_dir.mkdir(parents=True, exist_ok=True)

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    baskets = make_baskets(items, args.count, args.size, rng, args.repeat_prob)

    manifest = {"seed": args.seed, "size": args.size, "files": []}
    for n, basket in enumerate(baskets, start=1):
        out = out_dir / f"basket_{n}.json"
        with open(out, "w", encoding="utf-8") as f:
            json.dump(basket, f, indent=2, ensure_ascii=False)
        manifest["files"].append(str(out.as_posix()))

    with open(out_dir / "manifest.json", "w") as f:
        json.dump(manifest, f, indent=2)

    print(f"[ok] Wrote {len(baskets)} baskets + manifest to {out_dir}")


if __name__ == "__main__":
    main()
