import argparse
import json
import os
import sys

from engine.basket import load_basket
from engine.defaults import (
    DEFAULT_BASKET_PATH,
    DEFAULT_CONFIG_PATH,
    DEFAULT_MAX_METHODS,
    DEFAULT_OUTDIR,
    DEFAULT_STRATEGY,
)
from engine.errors import SplitterError
from engine.logging_utils import configure_logging
from engine.report import describe_catalog, grouping_frame, grouping_summary, method_coverage
from engine.splitter import BasketSplitter
from strategies import available_strategies


def build_from_config(cfg_or_path, strategy=None):
    """Splitter from a catalog path or dict; strategy is a name or {"type", "max_methods"}."""
    return BasketSplitter(cfg_or_path, strategy=strategy)


def write_outputs(grouping, outdir):
    os.makedirs(outdir, exist_ok=True)
    out_json = os.path.join(outdir, "split_result.json")
    with open(out_json, "w", encoding="utf-8") as f:
        json.dump(grouping, f, indent=2, ensure_ascii=False)

    out_csv = os.path.join(outdir, "split_result.csv")
    grouping_frame(grouping).to_csv(out_csv, index=False)
    return out_json, out_csv


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Split a basket into delivery groups and write JSON/CSV.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH, help="Catalog JSON (item -> [methods])")
    parser.add_argument("--basket", type=str, default=DEFAULT_BASKET_PATH, help="Basket JSON (list of items)")
    parser.add_argument("--strategy", type=str, default=DEFAULT_STRATEGY, choices=available_strategies())
    parser.add_argument("--max-methods", type=int, default=None,
                        help=f"Cap on distinct candidate methods (permutation default {DEFAULT_MAX_METHODS})")
    parser.add_argument("--outdir", type=str, default=DEFAULT_OUTDIR)
    parser.add_argument("--show-catalog", action="store_true", help="Print the catalog before splitting")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    strategy = {"type": args.strategy}
    if args.max_methods is not None:
        strategy["max_methods"] = args.max_methods

    try:
        splitter = build_from_config(args.config, strategy=strategy)
        if args.show_catalog:
            for line in describe_catalog(splitter.catalog):
                print(line)
        print("Methods in catalog (items each can carry):")
        for method, count in method_coverage(splitter.catalog).items():
            print(f"  {method}: {count}")
        basket = load_basket(args.basket)
        grouping = splitter.split(basket)
    except SplitterError as e:
        print(f"[ERROR] {e}")
        return 1

    for method, items in grouping.items():
        print(f"{method}: {items}")

    summary = grouping_summary(grouping)
    if not summary.empty:
        print(summary.to_string(index=False))

    out_json, out_csv = write_outputs(grouping, args.outdir)
    print(f"[ok] wrote {out_json}")
    print(f"[ok] wrote {out_csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
