import argparse
import json
import os

import pandas as pd

from engine.catalog import Catalog
from engine.errors import error


# =========================
# Helpers
# =========================

def read_csv(path, required_cols):
    if not os.path.exists(path):
        error(f"Missing required file: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = set(required_cols) - set(df.columns)
    if missing:
        error(f"{path} is missing columns: {sorted(missing)}")

    return df


# =========================
# CATALOG
# =========================

def load_catalog_csv(path):
    """Long format CSV (item_id, method) -> {item_id: [methods]} in file order."""
    df = read_csv(path, ["item_id", "method"])
    df["item_id"] = df["item_id"].str.strip()
    df["method"] = df["method"].str.strip()

    blank = df[(df["item_id"] == "") | (df["method"] == "")]
    if not blank.empty:
        error(f"{path} has blank item_id/method on rows {[int(i) + 2 for i in blank.index]}")

    dupes = df[df.duplicated(["item_id", "method"])]
    if not dupes.empty:
        first = dupes.iloc[0]
        error(f"Duplicate row for item '{first['item_id']}' and method '{first['method']}'")

    catalog = {}
    for _, r in df.iterrows():
        catalog.setdefault(r["item_id"], []).append(r["method"])

    # same checks the splitter applies on load
    Catalog(catalog)
    return catalog


# =========================
# MAIN
# =========================

def build_catalog(csv_path, output_path):
    catalog = load_catalog_csv(csv_path)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(catalog, f, indent=2, ensure_ascii=False)

    print(f"[SUCCESS] Catalog written to {output_path} ({len(catalog)} items)")
    return catalog


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Build catalog JSON from an item/method CSV")
    parser.add_argument("--csv", default="inputs/catalog.csv")
    parser.add_argument("--out", default="inputs/config/catalog.json")
    args = parser.parse_args()
    build_catalog(csv_path=args.csv, output_path=args.out)
